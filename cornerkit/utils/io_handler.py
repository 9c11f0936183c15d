"""Reading images and response maps, writing ranked corners."""

import json
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

import cv2
import numpy as np


def load_image(image_path: str, grayscale: bool = False) -> Optional[np.ndarray]:
    """Load image from file, None if it cannot be read."""
    flags = cv2.IMREAD_GRAYSCALE if grayscale else cv2.IMREAD_COLOR
    return cv2.imread(image_path, flags)


def load_response(response_path: str) -> np.ndarray:
    """
    Load a precomputed corner response map.

    ``.npy`` files are loaded as saved; anything else is read as a
    grayscale image. The result is C-contiguous so it can go straight
    into ``extract_corners``.
    """
    path = Path(response_path)
    if path.suffix == ".npy":
        response = np.load(path)
    else:
        response = load_image(str(path), grayscale=True)
        if response is None:
            raise ValueError(f"Failed to load response map from {response_path}")
    return np.ascontiguousarray(response)


def save_corners(result: Any, output_path: str, indent: int = 2):
    """Write an extraction result (or a list of them) as JSON."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(result, f, indent=indent)


def load_corners(input_path: str) -> Any:
    with open(input_path, 'r') as f:
        return json.load(f)


def draw_corners(image: np.ndarray, corners: Iterable[Tuple[int, int]],
                 color: Tuple[int, int, int] = (0, 0, 255), radius: int = 3) -> np.ndarray:
    """Draw (row, col) corners on a BGR copy of the image."""
    output = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR) if image.ndim == 2 else image.copy()
    for row, col in corners:
        cv2.circle(output, (int(col), int(row)), radius, color, -1)
    return output


def save_image(image: np.ndarray, output_path: str) -> bool:
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    return cv2.imwrite(output_path, image)
