"""
Editable component properties and their per-type defaults.

Detection only seeds these: each new component receives a fresh
``ComponentProperties`` built from the template registered for its type.
Editing happens elsewhere, by copying (``model_copy``) since every model here
is frozen.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sketch_site.detection.component_types import (
    ComponentType,
    DetectedComponentType,
    GroupKind,
    GroupType,
    SingleType,
)

DEFAULT_MAX_NAVIGATION_ITEMS = 8


class TextStyle(str, Enum):
    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"
    HEADING = "heading"
    CAPTION = "caption"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class TextAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ColorRole(str, Enum):
    """Semantic role a colour plays in the generated markup."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    BACKGROUND = "background"
    TEXT = "text"
    BORDER = "border"
    ACCENT = "accent"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class BooleanProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    current_value: bool = False


class InstanceSwapProperty(BaseModel):
    """A choice between a fixed set of named variants."""

    model_config = ConfigDict(frozen=True)

    name: str
    options: tuple[str, ...]
    current_option: str

    @model_validator(mode="after")
    def _check_option(self) -> InstanceSwapProperty:
        if self.current_option not in self.options:
            raise ValueError(
                f"current_option {self.current_option!r} is not one of {self.options}"
            )
        return self


class TextProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    content: str
    style: TextStyle = TextStyle.REGULAR
    alignment: TextAlignment = TextAlignment.LEFT


class ColorProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    current_color: str
    """Hex colour string, e.g. ``#007AFF``."""
    semantic_role: ColorRole


class NavigationItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    is_active: bool = False
    icon: str | None = None


class NavigationItemsProperty(BaseModel):
    """An ordered list of navigation entries with an upper bound on count."""

    model_config = ConfigDict(frozen=True)

    name: str
    items: tuple[NavigationItem, ...] = ()
    max_items: int = Field(default=DEFAULT_MAX_NAVIGATION_ITEMS, gt=0)

    @model_validator(mode="after")
    def _check_item_count(self) -> NavigationItemsProperty:
        if len(self.items) > self.max_items:
            raise ValueError(
                f"{self.name} has {len(self.items)} items, "
                f"more than the maximum of {self.max_items}"
            )
        return self

    @property
    def can_add_item(self) -> bool:
        return len(self.items) < self.max_items


class ComponentProperties(BaseModel):
    """All editable properties of one component."""

    model_config = ConfigDict(frozen=True)

    boolean_properties: tuple[BooleanProperty, ...] = ()
    instance_swap_properties: tuple[InstanceSwapProperty, ...] = ()
    text_properties: tuple[TextProperty, ...] = ()
    color_properties: tuple[ColorProperty, ...] = ()
    navigation_items_properties: tuple[NavigationItemsProperty, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (
            self.boolean_properties
            or self.instance_swap_properties
            or self.text_properties
            or self.color_properties
            or self.navigation_items_properties
        )


# --- Templates -------------------------------------------------------------


def _default_navigation(name: str = "Navigation Items") -> NavigationItemsProperty:
    return NavigationItemsProperty(
        name=name,
        items=(
            NavigationItem(text="Home", is_active=True),
            NavigationItem(text="About"),
            NavigationItem(text="Services"),
            NavigationItem(text="Contact"),
        ),
    )


def _orientation(current: str = "Horizontal") -> InstanceSwapProperty:
    return InstanceSwapProperty(
        name="Orientation",
        options=("Horizontal", "Vertical"),
        current_option=current,
    )


def _button_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(
            BooleanProperty(name="Has Icon"),
            BooleanProperty(name="Is Disabled"),
            BooleanProperty(name="Loading State"),
        ),
        instance_swap_properties=(
            InstanceSwapProperty(
                name="Button Style",
                options=("Primary", "Secondary", "Outline", "Link"),
                current_option="Primary",
            ),
        ),
        text_properties=(
            TextProperty(
                name="Button Text",
                content="Button",
                style=TextStyle.BOLD,
                alignment=TextAlignment.CENTER,
            ),
        ),
        color_properties=(
            ColorProperty(
                name="Background Color",
                current_color="#007AFF",
                semantic_role=ColorRole.PRIMARY,
            ),
            ColorProperty(
                name="Text Color", current_color="#FFFFFF", semantic_role=ColorRole.TEXT
            ),
        ),
    )


def _navbar_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(BooleanProperty(name="Show Logo", current_value=True),),
        instance_swap_properties=(
            InstanceSwapProperty(
                name="Navigation Style",
                options=("Horizontal", "Vertical", "Hamburger"),
                current_option="Horizontal",
            ),
        ),
        text_properties=(
            TextProperty(name="Brand", content="Brand", style=TextStyle.HEADING),
        ),
        color_properties=(
            ColorProperty(
                name="Background Color",
                current_color="#F8F9FA",
                semantic_role=ColorRole.BACKGROUND,
            ),
            ColorProperty(
                name="Link Color", current_color="#007AFF", semantic_role=ColorRole.PRIMARY
            ),
        ),
        navigation_items_properties=(_default_navigation(),),
    )


def _tab_properties() -> ComponentProperties:
    return ComponentProperties(
        instance_swap_properties=(_orientation(),),
        color_properties=(
            ColorProperty(
                name="Active Color",
                current_color="#007AFF",
                semantic_role=ColorRole.PRIMARY,
            ),
        ),
        navigation_items_properties=(_default_navigation("Tabs"),),
    )


def _breadcrumb_properties() -> ComponentProperties:
    return ComponentProperties(
        navigation_items_properties=(
            NavigationItemsProperty(
                name="Breadcrumb Items",
                items=(
                    NavigationItem(text="Home"),
                    NavigationItem(text="Library"),
                    NavigationItem(text="Data", is_active=True),
                ),
            ),
        ),
    )


def _pagination_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(BooleanProperty(name="Show Previous/Next", current_value=True),),
        navigation_items_properties=(
            NavigationItemsProperty(
                name="Pages",
                items=(
                    NavigationItem(text="1", is_active=True),
                    NavigationItem(text="2"),
                    NavigationItem(text="3"),
                ),
            ),
        ),
    )


def _form_control_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(
            BooleanProperty(name="Is Required"),
            BooleanProperty(name="Has Error"),
            BooleanProperty(name="Is Disabled"),
        ),
        instance_swap_properties=(
            InstanceSwapProperty(
                name="Input Type",
                options=("Text", "Email", "Password", "Number", "Search"),
                current_option="Text",
            ),
        ),
        text_properties=(
            TextProperty(name="Placeholder", content="Enter text..."),
            TextProperty(name="Field Label", content="Label", style=TextStyle.BOLD),
        ),
        color_properties=(
            ColorProperty(
                name="Border Color", current_color="#CED4DA", semantic_role=ColorRole.BORDER
            ),
        ),
    )


def _textarea_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(
            BooleanProperty(name="Is Required"),
            BooleanProperty(name="Is Resizable", current_value=True),
        ),
        text_properties=(TextProperty(name="Placeholder", content="Enter a message..."),),
        color_properties=(
            ColorProperty(
                name="Border Color", current_color="#CED4DA", semantic_role=ColorRole.BORDER
            ),
        ),
    )


def _alert_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(
            BooleanProperty(name="Dismissible", current_value=True),
            BooleanProperty(name="Show Icon", current_value=True),
        ),
        instance_swap_properties=(
            InstanceSwapProperty(
                name="Alert Type",
                options=("Info", "Success", "Warning", "Error"),
                current_option="Info",
            ),
        ),
        text_properties=(TextProperty(name="Message", content="This is an alert"),),
        color_properties=(
            ColorProperty(
                name="Background Color",
                current_color="#CFE2FF",
                semantic_role=ColorRole.BACKGROUND,
            ),
        ),
    )


def _icon_properties() -> ComponentProperties:
    return ComponentProperties(
        instance_swap_properties=(
            InstanceSwapProperty(
                name="Icon Type",
                options=("star", "heart", "home", "search", "user", "settings"),
                current_option="star",
            ),
        ),
        color_properties=(
            ColorProperty(
                name="Icon Color", current_color="#212529", semantic_role=ColorRole.TEXT
            ),
        ),
    )


def _image_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(BooleanProperty(name="Rounded Corners"),),
        instance_swap_properties=(
            InstanceSwapProperty(
                name="Fit",
                options=("Cover", "Contain", "Fill"),
                current_option="Cover",
            ),
        ),
        text_properties=(TextProperty(name="Alt Text", content="Image"),),
    )


def _label_properties() -> ComponentProperties:
    return ComponentProperties(
        text_properties=(TextProperty(name="Text", content="Label"),),
        color_properties=(
            ColorProperty(
                name="Text Color", current_color="#212529", semantic_role=ColorRole.TEXT
            ),
        ),
    )


def _badge_properties() -> ComponentProperties:
    return ComponentProperties(
        text_properties=(
            TextProperty(
                name="Badge Text",
                content="New",
                style=TextStyle.CAPTION,
                alignment=TextAlignment.CENTER,
            ),
        ),
        color_properties=(
            ColorProperty(
                name="Background Color",
                current_color="#6C757D",
                semantic_role=ColorRole.SECONDARY,
            ),
        ),
    )


def _progress_bar_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(
            BooleanProperty(name="Striped"),
            BooleanProperty(name="Show Label"),
        ),
        color_properties=(
            ColorProperty(
                name="Bar Color", current_color="#198754", semantic_role=ColorRole.SUCCESS
            ),
        ),
    )


def _dropdown_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(BooleanProperty(name="Is Disabled"),),
        text_properties=(TextProperty(name="Placeholder", content="Select an option"),),
        navigation_items_properties=(
            NavigationItemsProperty(
                name="Options",
                items=(
                    NavigationItem(text="Option 1"),
                    NavigationItem(text="Option 2"),
                    NavigationItem(text="Option 3"),
                ),
            ),
        ),
    )


def _button_group_properties() -> ComponentProperties:
    return ComponentProperties(
        instance_swap_properties=(
            _orientation(),
            InstanceSwapProperty(
                name="Button Style",
                options=("Primary", "Secondary", "Outline", "Link"),
                current_option="Outline",
            ),
        ),
    )


def _card_grid_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(BooleanProperty(name="Show Shadow", current_value=True),),
        instance_swap_properties=(
            InstanceSwapProperty(
                name="Columns",
                options=("2", "3", "4"),
                current_option="3",
            ),
        ),
    )


def _form_field_group_properties() -> ComponentProperties:
    return ComponentProperties(
        boolean_properties=(BooleanProperty(name="Is Required"),),
        instance_swap_properties=(_orientation("Vertical"),),
    )


def _no_properties() -> ComponentProperties:
    return ComponentProperties()


PropertyTemplate = Callable[[], ComponentProperties]

COMPONENT_PROPERTY_TEMPLATES: dict[ComponentType, PropertyTemplate] = {
    ComponentType.ALERT: _alert_properties,
    ComponentType.BADGE: _badge_properties,
    ComponentType.BREADCRUMB: _breadcrumb_properties,
    ComponentType.BUTTON: _button_properties,
    ComponentType.BUTTON_GROUP: _button_group_properties,
    ComponentType.DROPDOWN: _dropdown_properties,
    ComponentType.FORM_CONTROL: _form_control_properties,
    ComponentType.ICON: _icon_properties,
    ComponentType.IMAGE: _image_properties,
    ComponentType.THUMBNAIL: _image_properties,
    ComponentType.LABEL: _label_properties,
    ComponentType.NAVBAR: _navbar_properties,
    ComponentType.NAVS: _tab_properties,
    ComponentType.PAGINATION: _pagination_properties,
    ComponentType.PROGRESS_BAR: _progress_bar_properties,
    ComponentType.TAB: _tab_properties,
    ComponentType.TEXTAREA: _textarea_properties,
}
"""Property template per single component type. Unlisted types get none."""

GROUP_PROPERTY_TEMPLATES: dict[GroupType, PropertyTemplate] = {
    GroupType.NAVBAR: _navbar_properties,
    GroupType.CARD_GRID: _card_grid_properties,
    GroupType.BUTTON_GROUP: _button_group_properties,
    GroupType.FORM_FIELD_GROUP: _form_field_group_properties,
}


def default_properties(component_type: DetectedComponentType) -> ComponentProperties:
    """Return freshly seeded properties for ``component_type``."""
    if isinstance(component_type, SingleType):
        template = COMPONENT_PROPERTY_TEMPLATES.get(
            component_type.component_type, _no_properties
        )
    elif isinstance(component_type, GroupKind):
        template = GROUP_PROPERTY_TEMPLATES.get(component_type.group_type, _no_properties)
    else:
        template = _no_properties
    return template()
