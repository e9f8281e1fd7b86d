"""Configuration for spatial grouping."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GroupingConfig(BaseModel):
    """Thresholds for detecting rows and columns.

    Both are fractions of the larger canvas dimension.
    """

    size_fraction: float = Field(
        default=0.05,
        ge=0,
        description="Maximum height (rows) or width (columns) difference.",
    )

    align_fraction: float = Field(
        default=0.02,
        ge=0,
        description="Maximum top edge (rows) or left edge (columns) difference.",
    )
