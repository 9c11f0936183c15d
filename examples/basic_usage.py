"""Basic usage example for cornerkit."""

from cornerkit import extract_corners
from cornerkit.detection.corner_detector import CornerDetector
from cornerkit.utils.io_handler import draw_corners, load_image, save_image


def main():
    """Extract the strongest Harris corners from an image."""
    image_path = "test_data/frames/sample_frame.jpg"
    image = load_image(image_path)

    if image is None:
        print(f"Error: Could not load image from {image_path}")
        return

    print("Computing Harris response...")
    detector = CornerDetector(method="harris")
    response = detector.compute_response(image)

    threshold = 0.01 * response.max()
    corners = extract_corners(response, count=200, threshold=threshold) or []
    print(f"Extracted {len(corners)} corners")

    output_path = "output/basic_corners.jpg"
    save_image(draw_corners(image, corners), output_path)
    print(f"Results saved to {output_path}")


if __name__ == "__main__":
    main()
