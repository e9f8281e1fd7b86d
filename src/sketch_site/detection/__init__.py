"""Detection package entry point and logging configuration.

This module exposes the top-level helpers and sets up optional logging
configuration based on environment variables:

- LOG_LEVEL: Global log level (e.g., DEBUG, INFO). If set and logging
        is not already configured by the application, configure a basic
        handler at this level.

Detection pipeline order
------------------------
1) Quality filter  → drop implausible rectangles
2) Grouping        → rows, columns, singletons
3) Classification  → component / group type plus annotation label
4) Overlap pass    → spread out heavily overlapping components
5) Auto layout     → optional: arrange components into layout sections
"""

import logging
import os

from .annotation_matcher import Annotation, match_annotation
from .auto_layout import LayoutGroup, SectionType, describe_layout, process_layout
from .component_types import (
    ComponentType,
    DetectedComponentType,
    GroupKind,
    GroupType,
    SingleType,
    UnknownType,
)
from .detected_component import DetectedComponent
from .detector import DetectionResult, detect_components, run_detection
from .detector_config import DetectorConfig
from .geometry import CanvasSize, Rect
from .grouping import group_rectangles
from .overlap_resolver import resolve_overlaps
from .properties import ComponentProperties, default_properties
from .quality_filter import RejectionReason, filter_quality_rectangles
from .type_classifier import classify_group, classify_rect

__all__ = [
    "Annotation",
    "CanvasSize",
    "ComponentProperties",
    "ComponentType",
    "DetectedComponent",
    "DetectedComponentType",
    "DetectionResult",
    "DetectorConfig",
    "GroupKind",
    "GroupType",
    "LayoutGroup",
    "Rect",
    "RejectionReason",
    "SectionType",
    "SingleType",
    "UnknownType",
    "classify_group",
    "classify_rect",
    "default_properties",
    "describe_layout",
    "detect_components",
    "filter_quality_rectangles",
    "group_rectangles",
    "match_annotation",
    "process_layout",
    "resolve_overlaps",
    "run_detection",
]

_level = os.getenv("LOG_LEVEL")
if _level and not logging.getLogger().handlers:
    # Only configure if no handlers are present so apps/tests can override.
    logging.basicConfig(level=getattr(logging, _level.upper(), logging.INFO))
