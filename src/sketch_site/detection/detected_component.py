"""The DetectedComponent output entity."""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sketch_site.detection.component_types import (
    DETECTED_COMPONENT_TYPE_ADAPTER,
    DetectedComponentType,
    GroupKind,
    SingleType,
)
from sketch_site.detection.geometry import Rect
from sketch_site.detection.properties import ComponentProperties, default_properties
from sketch_site.utils import SerializationMixin


class DetectedComponent(SerializationMixin, BaseModel):
    """A classified, positioned UI component.

    Contract:
    - ``id`` is assigned once at creation and survives every copy made with
      ``with_rect`` or ``reseed_for``.
    - ``properties`` are seeded from the template for ``type`` when not given
      explicitly; detection never edits them afterwards.
    - Components are frozen; callers change them by copying.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    rect: Rect
    type: DetectedComponentType
    label: str | None = None
    text_content: str | None = None
    properties: ComponentProperties

    @model_validator(mode="before")
    @classmethod
    def _seed_properties(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("properties") is None and "type" in data:
            component_type = DETECTED_COMPONENT_TYPE_ADAPTER.validate_python(data["type"])
            data = {**data, "properties": default_properties(component_type)}
        return data

    def __str__(self) -> str:
        label = f" {self.label!r}" if self.label else ""
        return f"{self.type}{label} {self.rect}"

    @property
    def is_group_member(self) -> bool:
        return isinstance(self.type, GroupKind)

    @property
    def is_single(self) -> bool:
        return isinstance(self.type, SingleType)

    def with_rect(self, rect: Rect) -> DetectedComponent:
        """Return a copy at a new position, keeping id, type and properties."""
        return self.model_copy(update={"rect": rect})

    def reseed_for(self, component_type: DetectedComponentType) -> DetectedComponent:
        """Return a copy retyped to ``component_type`` with fresh default properties."""
        return self.model_copy(
            update={
                "type": component_type,
                "properties": default_properties(component_type),
            }
        )
