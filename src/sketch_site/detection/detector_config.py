"""Configuration for the detector."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sketch_site.detection.config import (
    AnnotationConfig,
    GroupingConfig,
    LayoutConfig,
    OverlapConfig,
    QualityFilterConfig,
)


class DetectorConfig(BaseModel):
    """Configuration for the whole detection pipeline."""

    quality_filter: QualityFilterConfig = Field(default_factory=QualityFilterConfig)
    """Configuration for the rectangle quality filter."""

    grouping: GroupingConfig = Field(default_factory=GroupingConfig)
    """Configuration for row and column grouping."""

    annotation: AnnotationConfig = Field(default_factory=AnnotationConfig)
    """Configuration for annotation matching."""

    overlap: OverlapConfig = Field(default_factory=OverlapConfig)
    """Configuration for overlap resolution."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    """Configuration for arranging components into layout sections."""
