"""CLI support for the sketch component detector."""

from .config import ProcessingConfig, parse_arguments
from .io import (
    DetectionRequest,
    load_detector_config,
    load_json,
    load_request,
    open_compressed,
    save_result_json,
)
from .reporting import print_description, print_layout, print_summary

__all__ = [
    "DetectionRequest",
    "ProcessingConfig",
    "load_detector_config",
    "load_json",
    "load_request",
    "open_compressed",
    "parse_arguments",
    "print_description",
    "print_layout",
    "print_summary",
    "save_result_json",
]
