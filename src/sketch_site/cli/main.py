"""Main CLI entry point for the sketch component detector."""

import logging
from pathlib import Path

from pydantic import ValidationError

from sketch_site.cli.config import ProcessingConfig, parse_arguments
from sketch_site.cli.io import (
    load_detector_config,
    load_request,
    output_stem,
    save_result_json,
)
from sketch_site.cli.reporting import print_description, print_layout, print_summary
from sketch_site.detection import DetectorConfig, run_detection
from sketch_site.drawing import draw_components

logger = logging.getLogger(__name__)


def _setup_logging(log_level: str) -> None:
    """Configure logging based on level.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _validate_path(path: Path) -> bool:
    """Validate that an input file exists.

    Returns:
        True if file exists, False otherwise
    """
    if not path.exists():
        logger.error("File not found: %s", path)
        return False
    return True


def _process_request(
    config: ProcessingConfig,
    detector_config: DetectorConfig,
    input_path: Path,
    output_dir: Path,
) -> int:
    """Run detection for a single request file.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        request = load_request(input_path)
    except ValidationError as e:
        logger.error("Invalid detection request %s:\n%s", input_path, e)
        return 2
    except ValueError as e:
        logger.error("%s", e)
        return 2

    print(f"Processing: {input_path} (canvas {request.canvas})")
    result = run_detection(
        request.rects,
        request.canvas,
        request.annotations,
        detector_config,
    )

    if config.save_summary:
        print_summary([result], detailed=config.summary_detailed)

    if config.describe:
        print_description(result)

    if config.layout:
        print_layout(result, detector_config.layout)

    output_path = save_result_json(result, output_dir, input_path)
    print(f"Saved: {output_path}")

    if config.draw:
        image_path = output_dir / (output_stem(input_path) + "_components.png")
        draw_components(result.components, result.canvas, image_path)

    return 0


def main() -> int:
    """Main entry point for the sketch detector CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = parse_arguments()
    _setup_logging(args.log_level)

    config = ProcessingConfig.from_args(args)

    # Validate inputs
    paths = list(config.input_paths)
    if config.detector_config_path is not None:
        paths.append(config.detector_config_path)
    for path in paths:
        if not _validate_path(path):
            return 2

    try:
        detector_config = load_detector_config(config.detector_config_path)
    except ValidationError as e:
        logger.error("Invalid detector config %s:\n%s", config.detector_config_path, e)
        return 2

    for input_path in config.input_paths:
        output_dir = config.output_dir if config.output_dir is not None else input_path.parent
        output_dir.mkdir(parents=True, exist_ok=True)

        exit_code = _process_request(config, detector_config, input_path, output_dir)
        if exit_code != 0:
            return exit_code

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
