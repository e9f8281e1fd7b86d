"""Configuration classes for the detection pipeline."""

from sketch_site.detection.config.annotation_config import (
    AnnotationConfig,
    MatchPolicy,
)
from sketch_site.detection.config.grouping_config import GroupingConfig
from sketch_site.detection.config.layout_config import LayoutConfig
from sketch_site.detection.config.overlap_config import OverlapConfig
from sketch_site.detection.config.quality_filter_config import (
    QualityFilterConfig,
)

__all__ = [
    "AnnotationConfig",
    "GroupingConfig",
    "LayoutConfig",
    "MatchPolicy",
    "OverlapConfig",
    "QualityFilterConfig",
]
