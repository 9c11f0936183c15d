from .extraction import ALL, extract_corners
from .feature import Feature
from .corner_detector import CornerDetector

__all__ = ['ALL', 'extract_corners', 'Feature', 'CornerDetector']
