"""
Component and group type vocabularies.

A detected component is either a single UI element (``SingleType``), a member
of a multi-rectangle group (``GroupKind``), or unclassified (``UnknownType``).
The three variants form a pydantic discriminated union so that component
lists round-trip through JSON.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, TypeAdapter


class ComponentType(str, Enum):
    """Semantic UI type of a single rectangle."""

    ALERT = "alert"
    BADGE = "badge"
    BREADCRUMB = "breadcrumb"
    BUTTON = "button"
    BUTTON_GROUP = "buttonGroup"
    CAROUSEL = "carousel"
    COLLAPSE = "collapse"
    DROPDOWN = "dropdown"
    FORM = "form"
    FORM_CONTROL = "formControl"
    ICON = "icon"
    IMAGE = "image"
    LABEL = "label"
    LIST_GROUP = "listGroup"
    MEDIA_OBJECT = "mediaObject"
    MODAL = "modal"
    NAVBAR = "navbar"
    NAVS = "navs"
    PAGINATION = "pagination"
    PROGRESS_BAR = "progressBar"
    TABLE = "table"
    TAB = "tab"
    TEXTAREA = "textarea"
    THUMBNAIL = "thumbnail"
    TOOLTIP = "tooltip"
    WELL = "well"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self.value, self.value)


class GroupType(str, Enum):
    """Semantic type of a multi-rectangle group."""

    NAVBAR = "navbar"
    CARD_GRID = "cardGrid"
    BUTTON_GROUP = "buttonGroup"
    FORM_FIELD_GROUP = "formFieldGroup"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get(self.value, self.value)


# Human readable names used in logs and layout descriptions.
_DISPLAY_NAMES: dict[str, str] = {
    "buttonGroup": "button group",
    "formControl": "form control",
    "listGroup": "list group",
    "mediaObject": "media object",
    "progressBar": "progress bar",
    "cardGrid": "card grid",
    "formFieldGroup": "form field group",
}


class SingleType(BaseModel):
    """A single UI component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tag: Literal["Single"] = Field(default="Single", alias="__tag__", frozen=True)
    component_type: ComponentType

    def __str__(self) -> str:
        return self.component_type.display_name


class GroupKind(BaseModel):
    """A member of a grouped component such as a nav bar or card grid."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tag: Literal["Group"] = Field(default="Group", alias="__tag__", frozen=True)
    group_type: GroupType

    def __str__(self) -> str:
        return self.group_type.display_name


class UnknownType(BaseModel):
    """Fallback for an unclassified component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tag: Literal["Unknown"] = Field(default="Unknown", alias="__tag__", frozen=True)

    def __str__(self) -> str:
        return "unknown"


# Exactly one variant is active per component. The Discriminator lets pydantic
# deserialize JSON into the right variant from the ``__tag__`` field.
DetectedComponentType = Annotated[
    SingleType | GroupKind | UnknownType, Discriminator("tag")
]

DETECTED_COMPONENT_TYPE_ADAPTER: TypeAdapter[DetectedComponentType] = TypeAdapter(
    DetectedComponentType
)
