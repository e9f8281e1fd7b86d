"""Filter implausible rectangles before grouping.

Sketch analysis produces plenty of noise: stray marks, thin slivers from
overlapping strokes, and boxes drawn partly off the canvas. This module drops
them so that grouping and classification only see plausible UI regions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from sketch_site.detection.config import QualityFilterConfig
from sketch_site.detection.geometry import CanvasSize, Rect

logger = logging.getLogger(__name__)


class RejectionReason(str, Enum):
    """Why the quality filter dropped a rectangle."""

    TOO_SMALL = "too_small"
    INSUFFICIENT_AREA = "insufficient_area"
    EXTREME_ASPECT_RATIO = "extreme_aspect_ratio"
    OUTSIDE_CANVAS = "outside_canvas"


def rejection_reason(
    rect: Rect,
    canvas: CanvasSize,
    config: QualityFilterConfig | None = None,
) -> RejectionReason | None:
    """Return why ``rect`` fails the quality checks, or None if it passes.

    Checks run in a fixed order and the first failure is reported:
    minimum width/height, minimum area, aspect ratio, canvas containment.
    """
    cfg = config or QualityFilterConfig()

    min_width = canvas.width * cfg.min_width_fraction
    min_height = canvas.height * cfg.min_height_fraction
    if rect.width < min_width or rect.height < min_height:
        return RejectionReason.TOO_SMALL

    min_area = canvas.width * canvas.height * cfg.min_area_fraction
    if rect.area < min_area:
        return RejectionReason.INSUFFICIENT_AREA

    aspect = rect.width / rect.height if rect.height > 0 else float("inf")
    if not cfg.min_aspect_ratio <= aspect <= cfg.max_aspect_ratio:
        return RejectionReason.EXTREME_ASPECT_RATIO

    overscan = cfg.canvas_overscan
    allowed = Rect(
        -overscan,
        -overscan,
        canvas.width + 2 * overscan,
        canvas.height + 2 * overscan,
    )
    if not allowed.contains(rect):
        return RejectionReason.OUTSIDE_CANVAS

    return None


def filter_quality_rectangles_with_reasons(
    rects: Sequence[Rect],
    canvas: CanvasSize,
    config: QualityFilterConfig | None = None,
) -> tuple[list[Rect], dict[int, RejectionReason]]:
    """Split rectangles into kept and rejected.

    Args:
        rects: Candidate rectangles in canvas space.
        canvas: The canvas size used for relative thresholds.
        config: Filter thresholds, defaults if omitted.

    Returns:
        A tuple of:
        - Kept rectangles, preserving input order
        - Dict mapping the input index of each rejected rectangle to the reason
    """
    kept: list[Rect] = []
    rejected: dict[int, RejectionReason] = {}

    for index, rect in enumerate(rects):
        reason = rejection_reason(rect, canvas, config)
        if reason is None:
            kept.append(rect)
            continue
        rejected[index] = reason
        logger.debug("Filtered rect %d %s (%s)", index, rect, reason.value)

    if rejected:
        logger.debug("Quality filter kept %d of %d rectangles", len(kept), len(rects))
    return kept, rejected


def filter_quality_rectangles(
    rects: Sequence[Rect],
    canvas: CanvasSize,
    config: QualityFilterConfig | None = None,
) -> list[Rect]:
    """Drop rectangles that are too small, too thin, or off the canvas.

    Rejected rectangles are silently dropped; the result is always an ordered
    subset of ``rects``.
    """
    kept, _ = filter_quality_rectangles_with_reasons(rects, canvas, config)
    return kept
