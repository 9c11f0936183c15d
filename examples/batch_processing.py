"""Batch processing example for multiple images."""

from pathlib import Path
from cornerkit.core import CornerProcessor
from cornerkit.utils.io_handler import save_corners
from cornerkit.utils.logger import setup_logger_from_config


def main():
    """Extract corners from every image in a directory."""
    processor = CornerProcessor({
        'extraction': {'max_corners': 500},
        'logging': {'log_dir': 'logs'},
    })
    logger = setup_logger_from_config(processor.config, name='batch_processor')

    frames_dir = Path("test_data/frames")
    frame_files = sorted(frames_dir.glob("*.jpg"))

    logger.info(f"Processing {len(frame_files)} images...")

    results = []
    for i, frame_path in enumerate(frame_files):
        logger.info(f"Processing image {i+1}/{len(frame_files)}: {frame_path.name}")

        try:
            result = processor.process_image(str(frame_path))
        except ValueError as e:
            logger.warning(str(e))
            continue

        if result['status'] == 'failed':
            logger.warning(f"{frame_path.name}: {result['processing_metadata']['errors']}")
        results.append(result)

    save_corners(results, "output/batch_corners.json")
    logger.info("Batch processing complete!")


if __name__ == "__main__":
    main()
