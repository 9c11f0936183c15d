"""
Corner extraction from response matrices.

Turns a dense corner-response map (as produced by Harris or Shi-Tomasi)
into a list of (row, col) coordinates ranked by descending response.
"""

import numpy as np
from typing import List, Optional, Tuple

ALL = -1


def extract_corners(corner_response: np.ndarray, count: int = ALL,
                    threshold=0) -> Optional[List[Tuple[int, int]]]:
    """
    Extract corners as a list of 2D points from a response matrix.

    Args:
        corner_response: 2D response matrix, collected as output from a
            corner detection algorithm. The last axis must be contiguous.
        count: Number of corners to extract. Any negative value (default
            ``ALL``) returns every response above the threshold.
        threshold: Response values strictly greater than this are
            considered valid corners.

    Returns:
        List of (row, col) tuples ordered by descending response, or None
        if the response matrix is empty. Order among equal responses is
        unspecified.
    """
    if corner_response.ndim != 2:
        raise ValueError(
            f"Corner response must be 2D, got shape {corner_response.shape}")
    dtype = corner_response.dtype
    if dtype == np.bool_ or not np.issubdtype(dtype, np.number):
        raise TypeError(f"Corner response must be numeric, got {dtype}")

    if corner_response.size == 0:
        return None

    assert corner_response.strides[-1] == corner_response.itemsize, \
        "Corner response slice strides are not contiguous."

    flat = corner_response.ravel()
    candidates = np.flatnonzero(flat > threshold)
    if count == 0 or candidates.size == 0:
        return []

    values = flat[candidates]
    if 0 < count < candidates.size:
        # Top-k lands in the tail after partitioning around size - count
        selected = np.argpartition(values, candidates.size - count)[-count:]
    else:
        selected = np.arange(candidates.size)

    # Descending by response
    order = selected[np.argsort(values[selected], kind="stable")[::-1]]
    rows, cols = np.unravel_index(candidates[order], corner_response.shape)

    return [(int(r), int(c)) for r, c in zip(rows, cols)]
