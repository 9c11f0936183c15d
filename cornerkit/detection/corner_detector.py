"""Corner detection utilities."""

import logging

import cv2
import numpy as np
from typing import List, Tuple, Optional

from cornerkit.detection.extraction import ALL, extract_corners
from cornerkit.detection.feature import Feature

logger = logging.getLogger(__name__)

METHODS = ("harris", "shi_tomasi")


class CornerDetector:
    """Corner detection backed by OpenCV response maps."""

    def __init__(self, method: str = "harris", block_size: int = 2,
                 ksize: int = 3, k: float = 0.04, max_corners: int = ALL,
                 quality_level: float = 0.01):
        """
        Initialize corner detector.

        Args:
            method: Response method ("harris" or "shi_tomasi")
            block_size: Neighborhood size for the structure tensor
            ksize: Aperture parameter of the Sobel operator
            k: Harris detector free parameter
            max_corners: Maximum number of corners to return, negative for all
            quality_level: Fraction of the strongest response used as threshold
        """
        if method not in METHODS:
            raise ValueError(f"Unknown corner method '{method}', expected one of {METHODS}")
        self.method = method
        self.block_size = block_size
        self.ksize = ksize
        self.k = k
        self.max_corners = max_corners
        self.quality_level = quality_level

    def compute_response(self, image: np.ndarray,
                         mask: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Compute the corner response map of an image.

        Args:
            image: Input BGR or grayscale image
            mask: Optional binary mask to limit detection area

        Returns:
            Contiguous float32 response map with the image's height and width
        """
        if image.size == 0:
            return np.zeros(image.shape[:2], dtype=np.float32)

        gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY) if len(image.shape) == 3 else image
        gray = np.float32(gray)

        if self.method == "harris":
            response = cv2.cornerHarris(gray, self.block_size, self.ksize, self.k)
        else:
            response = cv2.cornerMinEigenVal(gray, self.block_size, ksize=self.ksize)

        if mask is not None:
            response = response * (mask > 0)

        return np.ascontiguousarray(response, dtype=np.float32)

    def _select(self, response: np.ndarray) -> List[Tuple[int, int]]:
        if response.size == 0:
            return []
        threshold = self.quality_level * float(response.max())
        # Flat or all-negative responses have no corner above zero
        threshold = max(threshold, 0.0)
        corners = extract_corners(response, self.max_corners, threshold)
        logger.debug("%s: %d corners above %.6g", self.method,
                     len(corners or []), threshold)
        return corners or []

    def detect(self, image: np.ndarray, mask: Optional[np.ndarray] = None) -> List[Tuple[int, int]]:
        """
        Detect corners in image.

        Args:
            image: Input BGR or grayscale image
            mask: Optional binary mask to limit detection area

        Returns:
            List of corner coordinates as (row, col) tuples, strongest first
        """
        return self._select(self.compute_response(image, mask))

    def detect_features(self, image: np.ndarray,
                        mask: Optional[np.ndarray] = None) -> List[Feature]:
        """Detect corners and describe them as Feature records."""
        response = self.compute_response(image, mask)
        return [
            Feature(x=col, y=row, octave=0,
                    width=float(self.block_size), height=float(self.block_size),
                    score=float(response[row, col]))
            for row, col in self._select(response)
        ]


def detect_corners_harris(image: np.ndarray, block_size: int = 2,
                          ksize: int = 3, k: float = 0.04,
                          max_corners: int = ALL) -> List[Tuple[int, int]]:
    """Detect corners using Harris corner detector."""
    detector = CornerDetector(method="harris", block_size=block_size,
                              ksize=ksize, k=k, max_corners=max_corners)
    return detector.detect(image)


def detect_corners_shi_tomasi(image: np.ndarray, max_corners: int = 100,
                              quality_level: float = 0.01,
                              block_size: int = 3) -> List[Tuple[int, int]]:
    """Detect corners using Shi-Tomasi minimum eigenvalue response."""
    detector = CornerDetector(method="shi_tomasi", block_size=block_size,
                              max_corners=max_corners, quality_level=quality_level)
    return detector.detect(image)
