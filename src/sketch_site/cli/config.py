"""CLI configuration and argument parsing."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ProcessingConfig:
    """Configuration for processing detection requests."""

    input_paths: list[Path]
    output_dir: Path | None
    detector_config_path: Path | None = None

    # Output flags
    save_summary: bool = True
    summary_detailed: bool = False
    draw: bool = False
    describe: bool = False
    layout: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ProcessingConfig:
        """Create config from parsed arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            ProcessingConfig instance
        """
        return cls(
            input_paths=[Path(p) for p in args.input_paths],
            output_dir=args.output_dir,
            detector_config_path=args.config,
            save_summary=args.summary,
            summary_detailed=args.summary_detailed,
            draw=args.draw,
            describe=args.describe,
            layout=args.layout,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Detect UI components in sketched rectangles and export them as JSON."
        ),
        allow_abbrev=False,
    )

    parser.add_argument(
        "input_paths",
        nargs="+",
        help=(
            "Path(s) to one or more detection request JSON files "
            "(.json, .json.gz or .json.bz2)."
        ),
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory to save JSON and images. Defaults to same directory as input.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with detector thresholds. Unset values keep their defaults.",
    )

    # Output options group
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--summary",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Print a detection summary to stdout.",
    )
    output_group.add_argument(
        "--summary-detailed",
        action="store_true",
        help="Include the quality filter rejection reasons in the summary.",
    )
    output_group.add_argument(
        "--draw",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Save a PNG with the detected components drawn on the canvas.",
    )
    output_group.add_argument(
        "--describe",
        action="store_true",
        help="Print a one line description of every detected component.",
    )
    output_group.add_argument(
        "--layout",
        action="store_true",
        help="Print the components arranged into layout sections.",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO).",
    )
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and return command-line arguments.

    Args:
        argv: Arguments to parse; defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments namespace
    """
    return build_parser().parse_args(argv)
