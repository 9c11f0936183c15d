"""
cornerkit Core Processor
Main entry point for corner detection and extraction on images
"""

import copy
import logging
from typing import Dict, Any, Union
from datetime import datetime
from pathlib import Path
import cv2
import numpy as np

from cornerkit import __version__
from cornerkit.config import load_config, merge_config
from cornerkit.detection.corner_detector import CornerDetector
from cornerkit.utils.io_handler import load_image
from cornerkit.utils.metrics import StageTimer

logger = logging.getLogger(__name__)


class CornerProcessor:
    """Run the configured corner detector over images"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize processor

        Args:
            config: Configuration dictionary (optional), merged over defaults
        """
        self.config = merge_config(load_config(), copy.deepcopy(config or {}))

        detection = self.config["detection"]
        extraction = self.config["extraction"]
        self.detector = CornerDetector(
            method=detection["method"],
            block_size=detection["block_size"],
            ksize=detection["ksize"],
            k=detection["k"],
            max_corners=extraction["max_corners"],
            quality_level=extraction["quality_level"],
        )

    @classmethod
    def from_file(cls, config_path: str) -> "CornerProcessor":
        """Build a processor from a YAML config file."""
        return cls(load_config(config_path))

    def process_image(self, image_input: Union[str, np.ndarray]) -> Dict[str, Any]:
        """
        Detect and extract corners from a single image

        Args:
            image_input: Path to image file or numpy array

        Returns:
            Dictionary with the ranked corners and processing metadata.
            OpenCV failures during detection are reported under
            ``processing_metadata.errors`` with status "failed".
        """
        timer = StageTimer()

        if isinstance(image_input, str):
            with timer.stage("load"):
                image = load_image(image_input)
            image_id = Path(image_input).stem
        else:
            image = image_input
            image_id = f"image_{datetime.now():%Y%m%d_%H%M%S}"

        if image is None:
            raise ValueError(f"Failed to load image from {image_input}")

        features = []
        errors = []
        try:
            with timer.stage("detection"):
                features = self.detector.detect_features(image)
        except cv2.error as e:
            logger.warning("%s: corner detection failed: %s", image_id, e)
            errors.append(str(e))

        if errors:
            status = "failed"
        elif features:
            status = "success"
        else:
            status = "empty"
        logger.debug("%s: %d corners (%s)", image_id, len(features), status)

        return {
            "system": "cornerkit",
            "version": __version__,
            "timestamp": datetime.now().isoformat(),
            "image_id": image_id,
            "status": status,
            "method": self.detector.method,
            "corners_detected": len(features),
            "corners": [feature.to_dict() for feature in features],
            "processing_metadata": {
                "processing_time_ms": round(timer.elapsed_ms, 2),
                "stage_times_ms": timer.summary(),
                "image_size": {
                    "width": image.shape[1],
                    "height": image.shape[0]
                },
                "errors": errors
            }
        }
