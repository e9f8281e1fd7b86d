"""
Spatial grouping of rectangles into rows, columns and singletons.

Grouping runs two greedy passes over the rectangles in input order. The row
pass runs first, so a rectangle that fits both a row and a column always ends
up in the row. Membership is tracked by index in a boolean list that each
pass takes and returns; rectangles are never compared by value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from sketch_site.detection.config import GroupingConfig
from sketch_site.detection.geometry import CanvasSize, Rect

logger = logging.getLogger(__name__)

# Decides whether ``other`` joins the group seeded by ``seed``.
_Aligned = Callable[[Rect, Rect], bool]


def _greedy_pass(
    rects: Sequence[Rect],
    used: Sequence[bool],
    aligned: _Aligned,
) -> tuple[list[list[int]], list[bool]]:
    """Seed a group at every unused rect and collect the unused rects aligned with it.

    Only groups with at least two members are kept. Returns the groups as
    index lists and a new used list; ``used`` itself is not modified.
    """
    now_used = list(used)
    groups: list[list[int]] = []

    for i, seed in enumerate(rects):
        if now_used[i]:
            continue
        members = [i]
        for j, other in enumerate(rects):
            if j == i or now_used[j]:
                continue
            if aligned(seed, other):
                members.append(j)
                now_used[j] = True
        if len(members) > 1:
            now_used[i] = True
            groups.append(members)

    return groups, now_used


def row_pass(
    rects: Sequence[Rect],
    used: Sequence[bool],
    size_threshold: float,
    align_threshold: float,
) -> tuple[list[list[int]], list[bool]]:
    """Group rects whose top edges and heights match."""

    def aligned(seed: Rect, other: Rect) -> bool:
        return (
            abs(seed.min_y - other.min_y) < align_threshold
            and abs(seed.height - other.height) < size_threshold
        )

    return _greedy_pass(rects, used, aligned)


def column_pass(
    rects: Sequence[Rect],
    used: Sequence[bool],
    size_threshold: float,
    align_threshold: float,
) -> tuple[list[list[int]], list[bool]]:
    """Group rects whose left edges and widths match."""

    def aligned(seed: Rect, other: Rect) -> bool:
        return (
            abs(seed.min_x - other.min_x) < align_threshold
            and abs(seed.width - other.width) < size_threshold
        )

    return _greedy_pass(rects, used, aligned)


def group_indices(
    rects: Sequence[Rect],
    canvas: CanvasSize,
    config: GroupingConfig | None = None,
) -> list[list[int]]:
    """Partition rect indices into rows, then columns, then singletons.

    Every index appears in exactly one group. Rows come first in the result,
    followed by columns, then singletons, each in input order.
    """
    cfg = config or GroupingConfig()
    size_threshold = canvas.max_dimension * cfg.size_fraction
    align_threshold = canvas.max_dimension * cfg.align_fraction

    used = [False] * len(rects)
    rows, used = row_pass(rects, used, size_threshold, align_threshold)
    columns, used = column_pass(rects, used, size_threshold, align_threshold)
    singletons = [[i] for i, is_used in enumerate(used) if not is_used]

    logger.debug(
        "Grouped %d rects: %d rows, %d columns, %d singletons",
        len(rects),
        len(rows),
        len(columns),
        len(singletons),
    )
    return rows + columns + singletons


def group_rectangles(
    rects: Sequence[Rect],
    canvas: CanvasSize,
    config: GroupingConfig | None = None,
) -> list[list[Rect]]:
    """Partition rects into row groups, column groups and singleton groups.

    Within a group the seed rectangle comes first, followed by the members
    in input order.
    """
    return [[rects[i] for i in group] for group in group_indices(rects, canvas, config)]
