"""
Arrange detected components into layout sections.

Components are first bucketed into rows: sorted by vertical centre, each
row is seeded by the top-most remaining component and takes every other
remaining component whose centre lies within ``alignment_tolerance`` of the
seed's. Each row then becomes a ``LayoutGroup`` whose section type comes
from its canvas-relative position and member types, and whose direction,
alignment and spacing come from the members' geometry. Finally the section
type may override the measured direction, alignment and spacing.

Section type rules, first match wins (``y`` is the row's vertical centre as
a fraction of canvas height):

1. header:      y < 0.25 and (a navbar or tab member, or the first row)
2. navigation:  any navbar, breadcrumb or tab member
3. form:        any form control, textarea or dropdown member
4. buttons:     two or more members, all buttons
5. card grid:   both an image and a label member
6. footer:      y > 0.75
7. hero:        0.2 < y < 0.7 and wider than 60% of the canvas
8. standalone:  everything else

Only single components contribute member types; members of detected groups
(nav bars, card grids) are positioned but not typed here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from itertools import pairwise

from pydantic import BaseModel, ConfigDict

from sketch_site.detection.component_types import ComponentType, SingleType
from sketch_site.detection.config import LayoutConfig
from sketch_site.detection.detected_component import DetectedComponent
from sketch_site.detection.geometry import CanvasSize, Rect, bounding_rect, ieee_divide

logger = logging.getLogger(__name__)

DEFAULT_SPACING = 16.0

_HEADER_TYPES = frozenset({ComponentType.NAVBAR, ComponentType.TAB})
_NAVIGATION_TYPES = frozenset(
    {ComponentType.NAVBAR, ComponentType.BREADCRUMB, ComponentType.TAB}
)
_FORM_TYPES = frozenset(
    {ComponentType.FORM_CONTROL, ComponentType.TEXTAREA, ComponentType.DROPDOWN}
)


class SectionType(str, Enum):
    HEADER = "header"
    NAVIGATION = "navigation"
    HERO_SECTION = "heroSection"
    CARD_GRID = "cardGrid"
    FORM_SECTION = "formSection"
    BUTTON_GROUP = "buttonGroup"
    FOOTER = "footer"
    STANDALONE = "standalone"

    @property
    def display_name(self) -> str:
        return _SECTION_NAMES[self]


_SECTION_NAMES: dict[SectionType, str] = {
    SectionType.HEADER: "Header",
    SectionType.NAVIGATION: "Navigation",
    SectionType.HERO_SECTION: "Hero Section",
    SectionType.CARD_GRID: "Card Grid",
    SectionType.FORM_SECTION: "Form Section",
    SectionType.BUTTON_GROUP: "Button Group",
    SectionType.FOOTER: "Footer",
    SectionType.STANDALONE: "Standalone",
}


class FlexDirection(str, Enum):
    ROW = "row"
    COLUMN = "column"
    GRID = "grid"

    @property
    def display_name(self) -> str:
        return {"row": "horizontal", "column": "vertical"}.get(self.value, self.value)


class Alignment(str, Enum):
    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "spaceBetween"
    SPACE_AROUND = "spaceAround"

    @property
    def css_value(self) -> str:
        return {
            "start": "flex-start",
            "end": "flex-end",
            "spaceBetween": "space-between",
            "spaceAround": "space-around",
        }.get(self.value, self.value)


class LayoutGroup(BaseModel):
    """One layout section: a row of components and how to lay it out."""

    model_config = ConfigDict(frozen=True)

    section_type: SectionType
    components: tuple[DetectedComponent, ...]
    direction: FlexDirection
    alignment: Alignment
    spacing: float
    bounding_rect: Rect

    def __str__(self) -> str:
        return (
            f"{self.section_type.display_name} - {self.direction.display_name} - "
            f"{len(self.components)} components"
        )


def _variance(values: Sequence[float]) -> float:
    """Population variance; 0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def split_rows(
    components: Sequence[DetectedComponent], tolerance: float
) -> list[list[DetectedComponent]]:
    """Bucket components into rows by vertical centre, each row left to right."""
    remaining = sorted(components, key=lambda c: c.rect.mid_y)
    rows: list[list[DetectedComponent]] = []

    while remaining:
        seed = remaining.pop(0)
        row = [seed]
        rest: list[DetectedComponent] = []
        for component in remaining:
            if abs(component.rect.mid_y - seed.rect.mid_y) <= tolerance:
                row.append(component)
            else:
                rest.append(component)
        remaining = rest
        row.sort(key=lambda c: c.rect.mid_x)
        rows.append(row)

    return rows


def section_type(
    components: Sequence[DetectedComponent],
    bounds: Rect,
    canvas: CanvasSize,
    index: int,
) -> SectionType:
    kinds = {
        c.type.component_type for c in components if isinstance(c.type, SingleType)
    }
    all_single = all(isinstance(c.type, SingleType) for c in components)
    y = ieee_divide(bounds.mid_y, canvas.height)

    if y < 0.25 and (kinds & _HEADER_TYPES or index == 0):
        return SectionType.HEADER
    if kinds & _NAVIGATION_TYPES:
        return SectionType.NAVIGATION
    if kinds & _FORM_TYPES:
        return SectionType.FORM_SECTION
    if len(components) > 1 and all_single and kinds == {ComponentType.BUTTON}:
        return SectionType.BUTTON_GROUP
    if {ComponentType.IMAGE, ComponentType.LABEL} <= kinds:
        return SectionType.CARD_GRID
    if y > 0.75:
        return SectionType.FOOTER
    if 0.2 < y < 0.7 and bounds.width > canvas.width * 0.6:
        return SectionType.HERO_SECTION
    return SectionType.STANDALONE


def flex_direction(components: Sequence[DetectedComponent]) -> FlexDirection:
    """Row when centres spread mostly horizontally, grid for large square-ish sets."""
    if len(components) <= 1:
        return FlexDirection.COLUMN

    xs = [c.rect.mid_x for c in components]
    ys = [c.rect.mid_y for c in components]
    x_spread = max(xs) - min(xs)
    y_spread = max(ys) - min(ys)

    if x_spread > y_spread * 1.5:
        return FlexDirection.ROW
    if len(components) > 4 and abs(x_spread - y_spread) < min(x_spread, y_spread) * 0.5:
        return FlexDirection.GRID
    return FlexDirection.COLUMN


def alignment(
    components: Sequence[DetectedComponent],
    direction: FlexDirection,
    config: LayoutConfig,
) -> Alignment:
    """Centre when members line up across the main axis, otherwise start."""
    if len(components) <= 1:
        return Alignment.START

    if direction == FlexDirection.ROW:
        centres = [c.rect.mid_y for c in components]
    else:
        centres = [c.rect.mid_x for c in components]

    if _variance(centres) < config.alignment_variance:
        return Alignment.CENTER
    return Alignment.START


def measured_spacing(
    components: Sequence[DetectedComponent],
    direction: FlexDirection,
    config: LayoutConfig,
) -> float:
    """Median positive gap along the main axis, clamped to the configured range.

    Grid sections measure vertical gaps.
    """
    if len(components) <= 1:
        return DEFAULT_SPACING

    if direction == FlexDirection.ROW:
        ordered = sorted(components, key=lambda c: c.rect.mid_x)
        gaps = [b.rect.min_x - a.rect.max_x for a, b in pairwise(ordered)]
    else:
        ordered = sorted(components, key=lambda c: c.rect.mid_y)
        gaps = [b.rect.min_y - a.rect.max_y for a, b in pairwise(ordered)]

    positive = sorted(g for g in gaps if g > 0)
    # Upper median for even counts.
    median = positive[len(positive) // 2] if positive else DEFAULT_SPACING
    return max(config.min_spacing, min(config.max_spacing, median))


# Per-section overrides: (direction, alignment, multiple of component_gap).
_SECTION_RULES: dict[SectionType, tuple[FlexDirection, Alignment, float]] = {
    SectionType.HEADER: (FlexDirection.ROW, Alignment.SPACE_BETWEEN, 1.0),
    SectionType.NAVIGATION: (FlexDirection.ROW, Alignment.SPACE_BETWEEN, 1.0),
    SectionType.BUTTON_GROUP: (FlexDirection.ROW, Alignment.CENTER, 0.5),
    SectionType.FORM_SECTION: (FlexDirection.COLUMN, Alignment.START, 1.0),
    SectionType.CARD_GRID: (FlexDirection.GRID, Alignment.START, 1.5),
}


def _apply_section_rules(group: LayoutGroup, config: LayoutConfig) -> LayoutGroup:
    rule = _SECTION_RULES.get(group.section_type)
    if rule is None:
        return group
    direction, align, gap_factor = rule
    return group.model_copy(
        update={
            "direction": direction,
            "alignment": align,
            "spacing": config.component_gap * gap_factor,
        }
    )


def _standalone(component: DetectedComponent) -> LayoutGroup:
    return LayoutGroup(
        section_type=SectionType.STANDALONE,
        components=(component,),
        direction=FlexDirection.COLUMN,
        alignment=Alignment.START,
        spacing=0.0,
        bounding_rect=component.rect,
    )


def process_layout(
    components: Sequence[DetectedComponent],
    canvas: CanvasSize,
    config: LayoutConfig | None = None,
) -> list[LayoutGroup]:
    """Arrange components into layout sections, top to bottom.

    When layout is disabled every component becomes its own standalone
    section with zero spacing.
    """
    cfg = config or LayoutConfig()
    if not cfg.enabled or not components:
        return [_standalone(c) for c in components]

    groups: list[LayoutGroup] = []
    for index, row in enumerate(split_rows(components, cfg.alignment_tolerance)):
        bounds = bounding_rect(c.rect for c in row)
        direction = flex_direction(row)
        group = LayoutGroup(
            section_type=section_type(row, bounds, canvas, index),
            components=tuple(row),
            direction=direction,
            alignment=alignment(row, direction, cfg),
            spacing=measured_spacing(row, direction, cfg),
            bounding_rect=bounds,
        )
        groups.append(_apply_section_rules(group, cfg))

    logger.info(
        "Arranged %d components into %d layout sections", len(components), len(groups)
    )
    for i, group in enumerate(groups):
        logger.debug("  Section %d: %s", i + 1, group)
    return groups


def describe_layout(groups: Sequence[LayoutGroup]) -> str:
    """Describe each section as a short block, separated by blank lines.

    Example::

        Section 1 (Header): button, button
        - Layout: horizontal with space-between alignment
        - Spacing: 16px gaps
        - Components: 2
    """
    blocks = []
    for index, group in enumerate(groups):
        members = ", ".join(str(c.type) for c in group.components)
        blocks.append(
            f"Section {index + 1} ({group.section_type.display_name}): {members}\n"
            f"- Layout: {group.direction.display_name} with "
            f"{group.alignment.css_value} alignment\n"
            f"- Spacing: {int(group.spacing)}px gaps\n"
            f"- Components: {len(group.components)}"
        )
    return "\n\n".join(blocks)
