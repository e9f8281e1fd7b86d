"""Configuration for arranging components into layout sections."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LayoutConfig(BaseModel):
    """Thresholds and spacings for auto layout.

    Distances are in canvas units.
    """

    enabled: bool = Field(
        default=True,
        description="When false every component becomes its own standalone section.",
    )

    alignment_tolerance: float = Field(
        default=20.0,
        ge=0,
        description="Maximum vertical centre difference for components sharing a row.",
    )

    component_gap: float = Field(
        default=16.0,
        ge=0,
        description="Gap between related components in header, navigation and forms.",
    )

    section_gap: float = Field(
        default=48.0, ge=0, description="Gap between consecutive sections."
    )

    container_padding: float = Field(
        default=32.0, ge=0, description="Margin around the whole layout."
    )

    min_spacing: float = Field(
        default=8.0, ge=0, description="Lower clamp for measured spacing."
    )

    max_spacing: float = Field(
        default=48.0, ge=0, description="Upper clamp for measured spacing."
    )

    alignment_variance: float = Field(
        default=100.0,
        ge=0,
        description="Centre variance below which a section counts as centred.",
    )
