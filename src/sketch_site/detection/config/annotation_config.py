"""Configuration for annotation matching."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class MatchPolicy(str, Enum):
    """How to choose between several annotations near one rectangle."""

    FIRST = "first"
    """First candidate in insertion order."""

    NEAREST = "nearest"
    """Candidate with the smallest edge-to-edge distance."""


class AnnotationConfig(BaseModel):
    """Configuration for attaching annotation labels to rectangles."""

    max_distance: float = Field(
        default=20.0,
        ge=0,
        description="Annotations closer than this (edge to edge) are candidates.",
    )

    policy: MatchPolicy = Field(
        default=MatchPolicy.FIRST,
        description="Which candidate wins when several qualify.",
    )
