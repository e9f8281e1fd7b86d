"""Merge a fresh detection run into an existing component list."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from sketch_site.detection.detected_component import DetectedComponent
from sketch_site.detection.geometry import point_distance

logger = logging.getLogger(__name__)

POSITION_TOLERANCE = 30.0
SIZE_TOLERANCE = 20.0


def is_duplicate(
    candidate: DetectedComponent,
    existing: DetectedComponent,
    position_tolerance: float = POSITION_TOLERANCE,
    size_tolerance: float = SIZE_TOLERANCE,
) -> bool:
    """True if both centres and sizes are within tolerance of each other."""
    position_distance = point_distance(candidate.rect.center, existing.rect.center)
    size_distance = math.hypot(
        candidate.rect.width - existing.rect.width,
        candidate.rect.height - existing.rect.height,
    )
    return position_distance < position_tolerance and size_distance < size_tolerance


def merge_components(
    existing: Sequence[DetectedComponent],
    new: Sequence[DetectedComponent],
    position_tolerance: float = POSITION_TOLERANCE,
    size_tolerance: float = SIZE_TOLERANCE,
) -> list[DetectedComponent]:
    """Append components from ``new`` that do not duplicate one in ``existing``.

    Existing components are kept untouched and first. New components are only
    compared against ``existing``, not against each other.
    """
    merged = list(existing)
    for candidate in new:
        duplicate = next(
            (
                e
                for e in existing
                if is_duplicate(candidate, e, position_tolerance, size_tolerance)
            ),
            None,
        )
        if duplicate is not None:
            logger.debug("Skipping duplicate component %s (matches %s)", candidate, duplicate.id)
            continue
        merged.append(candidate)

    logger.debug(
        "Merged components: %d existing + %d new -> %d",
        len(existing),
        len(new),
        len(merged),
    )
    return merged
