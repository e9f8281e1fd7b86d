"""Axis-aligned rectangle geometry in canvas space.

Everything here is a pure function of its inputs. Rectangles use a top-left
origin with ``y`` growing downwards, the same frame as the canvas they were
sketched on.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum
from typing import Annotated

from annotated_types import Ge
from pydantic import BaseModel, ConfigDict

# Type alias for non-negative floats
NonNegativeFloat = Annotated[float, Ge(0)]

Point = tuple[float, float]
"""An (x, y) point in canvas space."""


class CanvasSize(BaseModel):
    """The width and height of the drawing surface.

    Every proportional threshold in detection is a fraction of this size.
    Callers must provide a positive size; a zero dimension yields NaN or inf
    relative sizes rather than an error.
    """

    model_config = ConfigDict(frozen=True)

    width: float
    height: float

    def __init__(
        self,
        width: float | None = None,
        height: float | None = None,
        /,
        **kwargs,
    ):
        if width is not None and height is not None:
            super().__init__(width=width, height=height, **kwargs)
        else:
            super().__init__(**kwargs)

    def __str__(self) -> str:
        return f"{self.width:.0f}x{self.height:.0f}"

    @property
    def max_dimension(self) -> float:
        return max(self.width, self.height)

    @property
    def bounds(self) -> Rect:
        """The canvas as a rectangle anchored at the origin."""
        return Rect(0.0, 0.0, self.width, self.height)


class Rect(BaseModel):
    """An axis-aligned rectangle ``{x, y, width, height}``.

    Rects are frozen and compare by value. Code that needs to track which
    rectangles have been visited should track indices, not Rect values.
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: NonNegativeFloat
    height: NonNegativeFloat

    def __init__(
        self,
        x: float | None = None,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
        /,
        **kwargs,
    ):
        """Initialize Rect with positional or keyword arguments.

        Supports both:
        - Rect(0, 0, 10, 10)  # positional
        - Rect(x=0, y=0, width=10, height=10)  # keyword
        """
        if x is not None and y is not None and width is not None and height is not None:
            super().__init__(x=x, y=y, width=width, height=height, **kwargs)
        else:
            super().__init__(**kwargs)

    def __str__(self) -> str:
        """Return a compact string representation of the rectangle."""
        return f"({self.x:.1f},{self.y:.1f} {self.width:.1f}x{self.height:.1f})"

    @classmethod
    def from_edges(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> Rect:
        """Create a Rect from its four edges."""
        return cls(
            x=min_x, y=min_y, width=max(0.0, max_x - min_x), height=max(0.0, max_y - min_y)
        )

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def center(self) -> Point:
        """Return the (x, y) center point of the rectangle."""
        return (self.mid_x, self.mid_y)

    @property
    def area(self) -> NonNegativeFloat:
        return self.width * self.height

    @property
    def aspect(self) -> float:
        """Width over height, with the height clamped to at least 1."""
        return self.width / max(self.height, 1.0)

    def intersects(self, other: Rect) -> bool:
        """True if the rectangles share any point, edges included."""
        return (
            self.min_x <= other.max_x
            and other.min_x <= self.max_x
            and self.min_y <= other.max_y
            and other.min_y <= self.max_y
        )

    def contains(self, other: Rect) -> bool:
        """True if ``other`` lies entirely inside this rectangle."""
        return (
            other.min_x >= self.min_x
            and other.min_y >= self.min_y
            and other.max_x <= self.max_x
            and other.max_y <= self.max_y
        )

    def intersection_area(self, other: Rect) -> float:
        """Return the area of intersection between this rect and another."""
        w = max(0.0, min(self.max_x, other.max_x) - max(self.min_x, other.min_x))
        h = max(0.0, min(self.max_y, other.max_y) - max(self.min_y, other.min_y))
        return w * h

    def union(self, other: Rect) -> Rect:
        """Return the smallest rectangle containing both rectangles."""
        return Rect.from_edges(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def iou(self, other: Rect) -> float:
        """Intersection over Union with another rect.

        Returns 0.0 when there is no overlap or union is zero.
        """
        inter = self.intersection_area(other)
        if inter == 0.0:
            return 0.0
        ua = self.area + other.area - inter
        if ua <= 0.0:
            return 0.0
        return inter / ua

    def edge_distance(self, other: Rect) -> float:
        """Euclidean distance between the nearest edges of two rectangles.

        Returns 0.0 if the rectangles overlap or touch.
        """
        dx = max(0.0, max(other.min_x - self.max_x, self.min_x - other.max_x))
        dy = max(0.0, max(other.min_y - self.max_y, self.min_y - other.max_y))
        return math.hypot(dx, dy)

    def offset_by(self, dx: float, dy: float) -> Rect:
        """Return this rectangle moved by (dx, dy), keeping its size."""
        return self.model_copy(update={"x": self.x + dx, "y": self.y + dy})

    def with_origin(self, x: float, y: float) -> Rect:
        return self.model_copy(update={"x": x, "y": y})


def bounding_rect(rects: Iterable[Rect]) -> Rect:
    """Return the bounding box of all rects.

    Raises:
        ValueError: If ``rects`` is empty.
    """
    rect_list = list(rects)
    if not rect_list:
        raise ValueError("bounding_rect() requires at least one rectangle")
    return Rect.from_edges(
        min(r.min_x for r in rect_list),
        min(r.min_y for r in rect_list),
        max(r.max_x for r in rect_list),
        max(r.max_y for r in rect_list),
    )


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do: x/0 is +-inf and 0/0 is NaN, never an exception."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def point_distance(p1: Point, p2: Point) -> float:
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def overlap_ratio(rect: Rect, other: Rect) -> float:
    """Fraction of ``rect``'s own area covered by ``other``.

    This is directional: ``overlap_ratio(a, b)`` and ``overlap_ratio(b, a)``
    differ when the rectangles have different areas. A zero-area ``rect``
    has a ratio of 0.
    """
    area = rect.area
    if area <= 0.0:
        return 0.0
    return rect.intersection_area(other) / area


def has_significant_overlap(rect1: Rect, rect2: Rect, threshold: float = 0.7) -> bool:
    """True if either rectangle is covered by the other beyond ``threshold``."""
    return max(overlap_ratio(rect1, rect2), overlap_ratio(rect2, rect1)) > threshold


def clamp_to_canvas(rect: Rect, canvas: CanvasSize) -> Rect:
    """Shift ``rect`` so it lies inside the canvas, preserving its size.

    The left and top edges win when a rectangle is larger than the canvas.
    """
    x = max(0.0, min(rect.x, canvas.width - rect.width))
    y = max(0.0, min(rect.y, canvas.height - rect.height))

    if x == rect.x and y == rect.y:
        return rect
    return rect.with_origin(x, y)


def rect_at_position(
    position: Point, width: float, height: float, canvas: CanvasSize
) -> Rect:
    """Create a rect of the given size centred on ``position``, clamped to the canvas."""
    rect = Rect(position[0] - width / 2.0, position[1] - height / 2.0, width, height)
    return clamp_to_canvas(rect, canvas)


def is_within_bounds(rect: Rect, canvas: CanvasSize) -> bool:
    return canvas.bounds.contains(rect)


def is_valid_size(rect: Rect, min_size: float = 20.0) -> bool:
    return rect.width >= min_size and rect.height >= min_size


def position_description(rect: Rect, canvas: CanvasSize) -> str:
    """Describe where ``rect`` sits on the canvas, e.g. ``top-left`` or ``center``.

    The canvas is split into thirds at 0.33 and 0.66 on each axis.
    """
    x = ieee_divide(rect.mid_x, canvas.width)
    y = ieee_divide(rect.mid_y, canvas.height)

    if x < 0.33:
        column = "left"
    elif x > 0.66:
        column = "right"
    else:
        column = "center"

    if y < 0.33:
        return f"top-{column}"
    if y > 0.66:
        return f"bottom-{column}"
    return "center" if column == "center" else f"middle-{column}"


class HandlePosition(str, Enum):
    """The eight resize handles around a component."""

    TOP_LEFT = "topLeft"
    TOP_RIGHT = "topRight"
    BOTTOM_LEFT = "bottomLeft"
    BOTTOM_RIGHT = "bottomRight"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def moves_left_edge(self) -> bool:
        return self in (HandlePosition.TOP_LEFT, HandlePosition.BOTTOM_LEFT, HandlePosition.LEFT)

    @property
    def moves_right_edge(self) -> bool:
        return self in (
            HandlePosition.TOP_RIGHT,
            HandlePosition.BOTTOM_RIGHT,
            HandlePosition.RIGHT,
        )

    @property
    def moves_top_edge(self) -> bool:
        return self in (HandlePosition.TOP_LEFT, HandlePosition.TOP_RIGHT, HandlePosition.TOP)

    @property
    def moves_bottom_edge(self) -> bool:
        return self in (
            HandlePosition.BOTTOM_LEFT,
            HandlePosition.BOTTOM_RIGHT,
            HandlePosition.BOTTOM,
        )


def resize_rect(
    handle: HandlePosition,
    translation: Point,
    rect: Rect,
    min_size: float = 20.0,
) -> Rect:
    """Resize ``rect`` by dragging ``handle`` by ``translation``.

    The edge opposite the dragged handle stays fixed and neither dimension
    shrinks below ``min_size``.

    Args:
        handle: The handle being dragged.
        translation: The (dx, dy) drag distance.
        rect: The rectangle before the drag.
        min_size: Smallest allowed width and height.

    Returns:
        The resized rectangle.
    """
    dx, dy = translation
    x, y, width, height = rect.x, rect.y, rect.width, rect.height

    if handle.moves_left_edge:
        width = max(min_size, rect.width - dx)
        x = rect.max_x - width
    elif handle.moves_right_edge:
        width = max(min_size, rect.width + dx)

    if handle.moves_top_edge:
        height = max(min_size, rect.height - dy)
        y = rect.max_y - height
    elif handle.moves_bottom_edge:
        height = max(min_size, rect.height + dy)

    return Rect(x, y, width, height)


def handle_offset(
    handle: HandlePosition, width: float, height: float, handle_size: float
) -> Point:
    """Offset of a resize handle from the centre of a ``width`` x ``height`` box.

    Handles sit just outside the box, half a handle away from each edge.
    """
    half_width = width / 2.0
    half_height = height / 2.0
    offset = handle_size / 2.0

    ox = 0.0
    oy = 0.0
    if handle.moves_left_edge:
        ox = -half_width - offset
    elif handle.moves_right_edge:
        ox = half_width + offset
    if handle.moves_top_edge:
        oy = -half_height - offset
    elif handle.moves_bottom_edge:
        oy = half_height + offset
    return (ox, oy)
