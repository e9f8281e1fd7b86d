"""Configuration for overlap resolution."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OverlapConfig(BaseModel):
    """Configuration for nudging overlapping components apart."""

    threshold: float = Field(
        default=0.7,
        ge=0,
        le=1,
        description=(
            "A component is moved when this fraction of its own area is covered "
            "by an already placed component."
        ),
    )

    offset: float = Field(
        default=20.0, gt=0, description="Distance moved along each axis per attempt."
    )

    max_attempts: int = Field(
        default=5, ge=1, description="Attempts per component before giving up."
    )
