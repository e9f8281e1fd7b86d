"""Input/Output operations for detection requests and results."""

import bz2
import gzip
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from sketch_site.detection import (
    Annotation,
    CanvasSize,
    DetectionResult,
    DetectorConfig,
    Rect,
)

logger = logging.getLogger(__name__)


class DetectionRequest(BaseModel):
    """One canvas worth of detector input, as read from a JSON file."""

    canvas: CanvasSize
    rects: list[Rect] = Field(default_factory=list)
    annotations: list[Annotation] = Field(default_factory=list)


def open_compressed(path: Path, mode: str = "rt", **kwargs):
    """Open a file, automatically detecting compression.

    Supports uncompressed files, gzip .gz, and bz2 .bz2 files.
    Works like the built-in open() but handles compressed files transparently.

    Args:
        path: Path to file (compressed or uncompressed)
        mode: File mode (e.g., 'rt', 'rb', 'wt', 'wb')
        **kwargs: Additional arguments passed to the opener (e.g., encoding)

    Returns:
        File handle (text or binary mode depending on mode parameter)
    """
    if path.suffix == ".bz2":
        return bz2.open(path, mode, **kwargs)
    elif path.suffix == ".gz":
        return gzip.open(path, mode, **kwargs)
    else:
        return open(path, mode, **kwargs)


def load_json(path: Path) -> Any:
    """Load JSON from file, automatically detecting compression.

    Raises:
        ValueError: If the file contains invalid JSON
    """
    try:
        with open_compressed(path, "rt", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Failed to parse JSON from {path}: {e.msg} at line {e.lineno}, "
            f"column {e.colno}"
        ) from e


def load_request(path: Path) -> DetectionRequest:
    """Load and validate a detection request.

    Raises:
        ValueError: If the file is not valid JSON
        pydantic.ValidationError: If the document does not describe a request
    """
    request = DetectionRequest.model_validate(load_json(path))
    logger.debug(
        "Loaded %s: canvas %s, %d rects, %d annotations",
        path,
        request.canvas,
        len(request.rects),
        len(request.annotations),
    )
    return request


def load_detector_config(path: Path | None) -> DetectorConfig:
    """Load detector thresholds from JSON, or the defaults when ``path`` is None."""
    if path is None:
        return DetectorConfig()
    with open_compressed(path, "rt", encoding="utf-8") as f:
        return DetectorConfig.model_validate_json(f.read())


def output_stem(input_path: Path) -> str:
    """File name of ``input_path`` without compression and ``.json`` suffixes."""
    name = input_path.name
    for suffix in (".bz2", ".gz", ".json"):
        if name.endswith(suffix):
            name = name[: -len(suffix)]
    return name


def save_result_json(
    result: DetectionResult,
    output_dir: Path,
    input_path: Path,
) -> Path:
    """Save the detection result as ``<stem>_components.json``.

    Args:
        result: The detection result to save
        output_dir: Directory where JSON should be saved
        input_path: Original request path (used for naming the JSON file)

    Returns:
        The path written
    """
    output_json_path = output_dir / (output_stem(input_path) + "_components.json")
    with open(output_json_path, "w") as f:
        f.write(result.to_json(indent=2))
    logger.info("Saved components JSON to %s", output_json_path)
    return output_json_path
