"""Configuration for the rectangle quality filter."""

from __future__ import annotations

from pydantic import BaseModel, Field


class QualityFilterConfig(BaseModel):
    """Configuration for discarding implausible rectangles before grouping.

    Size thresholds are fractions of the canvas so the filter behaves the
    same at any resolution.
    """

    min_width_fraction: float = Field(
        default=0.05, ge=0, description="Minimum width as a fraction of canvas width."
    )

    min_height_fraction: float = Field(
        default=0.05,
        ge=0,
        description="Minimum height as a fraction of canvas height.",
    )

    min_area_fraction: float = Field(
        default=0.003,
        ge=0,
        description=(
            "Minimum area as a fraction of canvas area. Catches thin slivers "
            "that pass the width and height checks."
        ),
    )

    min_aspect_ratio: float = Field(
        default=0.1, gt=0, description="Smallest allowed width/height ratio."
    )

    max_aspect_ratio: float = Field(
        default=10.0, gt=0, description="Largest allowed width/height ratio."
    )

    canvas_overscan: float = Field(
        default=10.0,
        ge=0,
        description="How far a rectangle may extend past each canvas edge.",
    )
