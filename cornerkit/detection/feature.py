"""Feature point record."""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple


@dataclass
class Feature:
    """Detected feature point."""
    x: int = 0  # centroid column
    y: int = 0  # centroid row
    octave: int = 0
    width: float = 0.0
    height: float = 0.0
    score: float = 0.0

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def to_dict(self) -> Dict:
        """Convert to a JSON-serialisable dictionary."""
        return asdict(self)
