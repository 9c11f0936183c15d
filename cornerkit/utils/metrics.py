"""Per-stage timing for the corner pipeline."""

from contextlib import contextmanager
from time import perf_counter
from typing import Dict, Iterator


class StageTimer:
    """Accumulate wall-clock milliseconds per named pipeline stage."""

    def __init__(self):
        self._started = perf_counter()
        self.stages: Dict[str, float] = {}

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Time the enclosed block; repeated stages add up."""
        begin = perf_counter()
        try:
            yield
        finally:
            elapsed = (perf_counter() - begin) * 1000
            self.stages[name] = self.stages.get(name, 0.0) + elapsed

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds since the timer was created."""
        return (perf_counter() - self._started) * 1000

    def summary(self) -> Dict[str, float]:
        return {name: round(ms, 2) for name, ms in self.stages.items()}
