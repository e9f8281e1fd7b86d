"""
Nudge heavily overlapping components apart.

This is a heuristic scatter pass rather than a constraint solver. Components
are placed in list order; each one is compared only with the components
already placed. When one of them covers more than ``threshold`` of the
component's own area, the component steps ``offset`` units away along both
axes and is clamped back onto the canvas. After ``max_attempts`` steps the
component is placed wherever it ended up, overlapping or not.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sketch_site.detection.config import OverlapConfig
from sketch_site.detection.detected_component import DetectedComponent
from sketch_site.detection.geometry import (
    CanvasSize,
    Rect,
    clamp_to_canvas,
    overlap_ratio,
)

logger = logging.getLogger(__name__)


def _first_heavy_overlap(
    rect: Rect, placed: Sequence[DetectedComponent], threshold: float
) -> DetectedComponent | None:
    for other in placed:
        if overlap_ratio(rect, other.rect) > threshold:
            return other
    return None


def _step_away(rect: Rect, other: Rect, offset: float) -> tuple[float, float]:
    """Offset moving ``rect`` away from ``other``; positive when centres coincide."""
    dx = rect.mid_x - other.mid_x
    dy = rect.mid_y - other.mid_y
    step_x = -offset if dx < 0 else offset
    step_y = -offset if dy < 0 else offset
    return step_x, step_y


def resolve_component(
    component: DetectedComponent,
    placed: Sequence[DetectedComponent],
    canvas: CanvasSize,
    config: OverlapConfig | None = None,
) -> tuple[DetectedComponent, int]:
    """Move one component until it no longer heavily overlaps ``placed``.

    Returns:
        The (possibly moved) component and the number of moves made.
    """
    cfg = config or OverlapConfig()
    rect = component.rect
    moves = 0

    for _ in range(cfg.max_attempts):
        other = _first_heavy_overlap(rect, placed, cfg.threshold)
        if other is None:
            break
        step_x, step_y = _step_away(rect, other.rect, cfg.offset)
        rect = clamp_to_canvas(rect.offset_by(step_x, step_y), canvas)
        moves += 1

    if moves == 0:
        return component, 0
    return component.with_rect(rect), moves


def resolve_overlaps(
    components: Sequence[DetectedComponent],
    canvas: CanvasSize,
    config: OverlapConfig | None = None,
) -> list[DetectedComponent]:
    """Spread out components that overlap by more than the configured threshold.

    Only positions change; size, type, label and id are preserved. Lists of
    zero or one component are returned unchanged.
    """
    if len(components) <= 1:
        return list(components)

    resolved: list[DetectedComponent] = []
    moved = 0
    for index, component in enumerate(components):
        adjusted, moves = resolve_component(component, resolved, canvas, config)
        if moves:
            moved += 1
            logger.debug(
                "Moved overlapping component %d (%s) %d time(s) to %s",
                index + 1,
                component.type,
                moves,
                adjusted.rect,
            )
        resolved.append(adjusted)

    if moved:
        logger.info("Resolved overlaps: moved %d of %d components", moved, len(components))
    return resolved
