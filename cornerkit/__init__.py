"""
cornerkit - ranked corner extraction from corner response matrices.
"""

__version__ = '1.0.0'

from .detection.extraction import ALL, extract_corners
from .detection.feature import Feature

__all__ = ['ALL', 'extract_corners', 'Feature']
