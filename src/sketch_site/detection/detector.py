"""
Detection pipeline: rectangles and annotations in, typed components out.

Stages, in order:

1) Quality filter   → drop implausible rectangles
2) Grouping         → rows, then columns, then singletons
3) Classification   → a ComponentType per singleton, a GroupType per group,
                      an annotation label per rectangle
4) Assembly         → one DetectedComponent per rectangle, clamped to canvas
5) Overlap pass     → nudge heavily overlapping components apart

The whole pipeline is a pure function of its inputs. Each call builds a new
component list; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from sketch_site.detection.annotation_matcher import (
    Annotation,
    AnnotationsLike,
    match_annotation,
    normalize_annotations,
)
from sketch_site.detection.component_types import GroupKind, SingleType
from sketch_site.detection.detected_component import DetectedComponent
from sketch_site.detection.detector_config import DetectorConfig
from sketch_site.detection.geometry import CanvasSize, Rect, clamp_to_canvas
from sketch_site.detection.grouping import group_indices
from sketch_site.detection.overlap_resolver import resolve_overlaps
from sketch_site.detection.quality_filter import (
    RejectionReason,
    filter_quality_rectangles_with_reasons,
)
from sketch_site.detection.type_classifier import classify_group, classify_rect
from sketch_site.utils import SerializationMixin

logger = logging.getLogger(__name__)


class DetectionResult(SerializationMixin, BaseModel):
    """The outcome of a single detection run."""

    canvas: CanvasSize
    components: list[DetectedComponent] = Field(default_factory=list)

    rejected: dict[int, RejectionReason] = Field(default_factory=dict)
    """Input index of each rectangle dropped by the quality filter."""

    groups: list[list[int]] = Field(default_factory=list)
    """Indices into the filtered rectangles, one list per group."""

    @property
    def group_count(self) -> int:
        return sum(1 for g in self.groups if len(g) > 1)

    @property
    def singleton_count(self) -> int:
        return sum(1 for g in self.groups if len(g) == 1)


def _assemble(
    rects: Sequence[Rect],
    groups: Sequence[Sequence[int]],
    annotations: Sequence[Annotation],
    canvas: CanvasSize,
    config: DetectorConfig,
) -> list[DetectedComponent]:
    components: list[DetectedComponent] = []
    for group in groups:
        members = [rects[i] for i in group]
        if len(members) == 1:
            rect = members[0]
            label = match_annotation(rect, annotations, config.annotation)
            component_type = classify_rect(rect, canvas, label)
            components.append(
                DetectedComponent(
                    rect=clamp_to_canvas(rect, canvas),
                    type=SingleType(component_type=component_type),
                    label=label,
                )
            )
            continue

        group_type = classify_group(members, canvas)
        for rect in members:
            label = match_annotation(rect, annotations, config.annotation)
            components.append(
                DetectedComponent(
                    rect=clamp_to_canvas(rect, canvas),
                    type=GroupKind(group_type=group_type),
                    label=label,
                )
            )
    return components


def run_detection(
    rects: Sequence[Rect],
    canvas: CanvasSize,
    annotations: AnnotationsLike | None = None,
    config: DetectorConfig | None = None,
) -> DetectionResult:
    """Run the full pipeline and keep the intermediate diagnostics.

    Args:
        rects: Rectangles in canvas space, in the order they were detected.
        canvas: The canvas size; must be positive in both dimensions.
        annotations: Optional label → rect mapping (or list of Annotation).
        config: Pipeline thresholds, defaults if omitted.

    Returns:
        A DetectionResult holding the components and filter/grouping details.
    """
    cfg = config or DetectorConfig()
    annotation_list = normalize_annotations(annotations)

    filtered, rejected = filter_quality_rectangles_with_reasons(
        rects, canvas, cfg.quality_filter
    )
    logger.debug("Filtered rectangles: %d -> %d", len(rects), len(filtered))

    groups = group_indices(filtered, canvas, cfg.grouping)
    components = _assemble(filtered, groups, annotation_list, canvas, cfg)
    components = resolve_overlaps(components, canvas, cfg.overlap)

    logger.info(
        "Detected %d components from %d rectangles (%d rejected, %d annotations)",
        len(components),
        len(rects),
        len(rejected),
        len(annotation_list),
    )
    return DetectionResult(
        canvas=canvas,
        components=components,
        rejected=rejected,
        groups=groups,
    )


def detect_components(
    rects: Sequence[Rect],
    canvas: CanvasSize,
    annotations: AnnotationsLike | None = None,
    config: DetectorConfig | None = None,
) -> list[DetectedComponent]:
    """Detect and classify UI components from sketched rectangles.

    Never raises for geometric input: an empty list gives an empty result and
    implausible rectangles are dropped rather than reported.
    """
    return run_detection(rects, canvas, annotations, config).components
