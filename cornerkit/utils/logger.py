"""Logging setup for cornerkit and its scripts."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _parse_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    parsed = logging.getLevelName(str(level).upper())
    if not isinstance(parsed, int):
        raise ValueError(f"Unknown log level '{level}'")
    return parsed


def setup_logger(name: str = 'cornerkit', log_level: Union[int, str] = logging.INFO,
                 log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler, and a file handler when log_file is given.

    Repeated calls for the same name replace the handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_parse_level(log_level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def session_log_path(log_dir: str = 'logs', prefix: str = 'cornerkit') -> str:
    """Timestamped log file path inside log_dir, creating the directory."""
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return str(Path(log_dir) / f"{prefix}_{timestamp}.log")


def setup_logger_from_config(config: Dict[str, Any], name: str = 'cornerkit') -> logging.Logger:
    """Configure a logger from the ``logging`` section of a cornerkit config."""
    section = config.get('logging') or {}
    log_dir = section.get('log_dir')
    log_file = session_log_path(log_dir, prefix=name) if log_dir else None
    return setup_logger(name, section.get('level', logging.INFO), log_file)
