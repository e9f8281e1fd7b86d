"""
Heuristic type classification for single rectangles and groups.

Both classifiers are ordered decision lists evaluated first-match-wins, so
the order of the tables below matters: a rectangle that satisfies several
rules takes the type of the earliest one. Every list ends in an
unconditional fallback, making both classifiers total.

Single rectangles consult the annotation label first (case-folded substring
match against ``KEYWORD_RULES``) and only fall back to geometry when no
keyword matches.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from sketch_site.detection.component_types import ComponentType, GroupType
from sketch_site.detection.geometry import (
    CanvasSize,
    Rect,
    bounding_rect,
    ieee_divide,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RectMetrics:
    """Canvas-relative measurements of a single rectangle."""

    rel_width: float
    rel_height: float
    aspect: float

    @classmethod
    def of(cls, rect: Rect, canvas: CanvasSize) -> RectMetrics:
        return cls(
            rel_width=ieee_divide(rect.width, canvas.width),
            rel_height=ieee_divide(rect.height, canvas.height),
            aspect=rect.aspect,
        )


@dataclass(frozen=True)
class GroupMetrics:
    """Canvas-relative measurements of a group's bounding box."""

    count: int
    rel_width: float
    rel_height: float

    @classmethod
    def of(cls, group: Sequence[Rect], canvas: CanvasSize) -> GroupMetrics:
        bounds = bounding_rect(group)
        return cls(
            count=len(group),
            rel_width=ieee_divide(bounds.width, canvas.width),
            rel_height=ieee_divide(bounds.height, canvas.height),
        )


@dataclass(frozen=True)
class DecisionRule[T]:
    """One entry of an ordered decision list."""

    name: str
    predicate: Callable[..., bool]
    result: T


# Annotation keywords, checked in order. The first keyword found anywhere in
# the lower-cased label decides the type.
KEYWORD_RULES: tuple[tuple[tuple[str, ...], ComponentType], ...] = (
    (("img", "photo", "avatar"), ComponentType.IMAGE),
    (("icon",), ComponentType.ICON),
    (("btn", "button"), ComponentType.BUTTON),
    (("nav",), ComponentType.NAVBAR),
    (("input", "field", "form"), ComponentType.FORM_CONTROL),
    (("card",), ComponentType.MEDIA_OBJECT),
    (("list",), ComponentType.LIST_GROUP),
    (("tab",), ComponentType.TAB),
    (("badge",), ComponentType.BADGE),
    (("progress",), ComponentType.PROGRESS_BAR),
    (("dropdown",), ComponentType.DROPDOWN),
    (("table",), ComponentType.TABLE),
)

RECT_RULES: tuple[DecisionRule[ComponentType], ...] = (
    DecisionRule(
        "wide_short_bar",
        lambda m: m.rel_width > 0.8 and m.rel_height < 0.15,
        ComponentType.NAVBAR,
    ),
    DecisionRule(
        "very_wide_strip",
        lambda m: m.aspect > 3 and m.rel_height < 0.1,
        ComponentType.BUTTON_GROUP,
    ),
    DecisionRule(
        "wide_short_box",
        lambda m: m.aspect > 1.5 and m.rel_height < 0.2,
        ComponentType.BUTTON,
    ),
    DecisionRule(
        "tall_narrow_box",
        lambda m: m.aspect < 0.7 and m.rel_height > 0.2,
        ComponentType.FORM_CONTROL,
    ),
    DecisionRule(
        "large_box",
        lambda m: m.rel_width > 0.3 and m.rel_height > 0.3,
        ComponentType.IMAGE,
    ),
    DecisionRule("fallback", lambda m: True, ComponentType.LABEL),
)

GROUP_RULES: tuple[DecisionRule[GroupType], ...] = (
    DecisionRule(
        "wide_short_row",
        lambda m: m.rel_width > 0.8 and m.rel_height < 0.15,
        GroupType.NAVBAR,
    ),
    DecisionRule(
        "large_grid",
        lambda m: m.count >= 4 and m.rel_width > 0.5 and m.rel_height > 0.3,
        GroupType.CARD_GRID,
    ),
    DecisionRule(
        "short_row",
        lambda m: m.count >= 2 and m.rel_width > 0.3 and m.rel_height < 0.2,
        GroupType.BUTTON_GROUP,
    ),
    DecisionRule("fallback", lambda m: True, GroupType.FORM_FIELD_GROUP),
)


def _first_match[T](rules: Sequence[DecisionRule[T]], metrics: object) -> DecisionRule[T]:
    for rule in rules:
        if rule.predicate(metrics):
            return rule
    # The tables end with an unconditional fallback.
    raise AssertionError("decision list has no fallback rule")


def keyword_type(annotation_label: str | None) -> ComponentType | None:
    """Return the type implied by an annotation label, or None if no keyword matches."""
    if not annotation_label:
        return None
    label = annotation_label.lower()
    for keywords, component_type in KEYWORD_RULES:
        if any(keyword in label for keyword in keywords):
            return component_type
    return None


def explain_rect(
    rect: Rect, canvas: CanvasSize, annotation_label: str | None = None
) -> tuple[ComponentType, str]:
    """Classify ``rect`` and name the rule that decided it.

    The rule name is ``keyword`` when the annotation decided the type,
    otherwise the name of the geometric rule.
    """
    by_keyword = keyword_type(annotation_label)
    if by_keyword is not None:
        return by_keyword, "keyword"
    rule = _first_match(RECT_RULES, RectMetrics.of(rect, canvas))
    return rule.result, rule.name


def classify_rect(
    rect: Rect, canvas: CanvasSize, annotation_label: str | None = None
) -> ComponentType:
    """Infer the UI type of one rectangle, preferring annotation keywords."""
    component_type, rule_name = explain_rect(rect, canvas, annotation_label)
    logger.debug(
        "Classified %s as %s via %s (label=%r)",
        rect,
        component_type.value,
        rule_name,
        annotation_label,
    )
    return component_type


def classify_group(group: Sequence[Rect], canvas: CanvasSize) -> GroupType:
    """Infer the group type from the bounding box of all members.

    Raises:
        ValueError: If ``group`` is empty.
    """
    rule = _first_match(GROUP_RULES, GroupMetrics.of(group, canvas))
    logger.debug(
        "Classified group of %d as %s via %s", len(group), rule.result.value, rule.name
    )
    return rule.result
