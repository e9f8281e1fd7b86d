"""Attach free-text annotation labels to rectangles by proximity."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict

from sketch_site.detection.config import AnnotationConfig, MatchPolicy
from sketch_site.detection.geometry import Rect

logger = logging.getLogger(__name__)


class Annotation(BaseModel):
    """A text label found on the canvas and the region it was found in."""

    model_config = ConfigDict(frozen=True)

    label: str
    rect: Rect


AnnotationsLike = Mapping[str, Rect] | Sequence[Annotation]
"""Annotations as a label → rect mapping or as a list of Annotation."""


def normalize_annotations(annotations: AnnotationsLike | None) -> list[Annotation]:
    """Return annotations as a list, preserving insertion order."""
    if not annotations:
        return []
    if isinstance(annotations, Mapping):
        return [Annotation(label=label, rect=rect) for label, rect in annotations.items()]
    return list(annotations)


def _candidates(
    rect: Rect, annotations: Iterable[Annotation], max_distance: float
) -> Iterable[tuple[Annotation, float]]:
    for annotation in annotations:
        if rect.intersects(annotation.rect):
            yield annotation, 0.0
            continue
        distance = rect.edge_distance(annotation.rect)
        if distance < max_distance:
            yield annotation, distance


def match_annotation(
    rect: Rect,
    annotations: AnnotationsLike | None,
    config: AnnotationConfig | None = None,
) -> str | None:
    """Return the label of an annotation that overlaps or is near ``rect``.

    An annotation qualifies when its rectangle intersects ``rect`` or its
    edge-to-edge distance is below ``config.max_distance``. With the
    ``first`` policy the earliest qualifying annotation wins; with
    ``nearest`` the closest one wins, ties going to the earliest.

    Returns:
        The matched label, or None when no annotation qualifies.
    """
    cfg = config or AnnotationConfig()
    candidates = _candidates(rect, normalize_annotations(annotations), cfg.max_distance)

    if cfg.policy == MatchPolicy.FIRST:
        match = next(candidates, None)
    elif cfg.policy == MatchPolicy.NEAREST:
        match = min(candidates, key=lambda c: c[1], default=None)
    else:
        raise ValueError(f"Unknown match policy: {cfg.policy!r}")

    if match is None:
        return None

    annotation, distance = match
    logger.debug(
        "Matched annotation %r to %s (distance %.1f)", annotation.label, rect, distance
    )
    return annotation.label
