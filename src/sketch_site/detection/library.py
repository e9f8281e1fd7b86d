"""
Pre-built component templates that can be placed on the canvas.

Templates describe a component type with a default size. Placing one scales it
to fit the canvas (at most 80% of the width and 60% of the height, keeping the
template's aspect ratio, never below 20 units) and centres it on the requested
point.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from sketch_site.detection.component_types import ComponentType, SingleType
from sketch_site.detection.detected_component import DetectedComponent
from sketch_site.detection.geometry import CanvasSize, Point, rect_at_position

logger = logging.getLogger(__name__)

MAX_WIDTH_FRACTION = 0.8
MAX_HEIGHT_FRACTION = 0.6
MIN_SIZE = 20.0


class ComponentCategory(str, Enum):
    BASIC = "Basic"
    NAVIGATION = "Navigation"
    FORMS = "Forms"
    MEDIA = "Media"
    LAYOUT = "Layout"
    FEEDBACK = "Feedback"


class ComponentTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: ComponentType
    category: ComponentCategory
    description: str
    default_width: float
    default_height: float

    @property
    def aspect_ratio(self) -> float:
        return self.default_width / self.default_height


def _t(
    name: str,
    component_type: ComponentType,
    category: ComponentCategory,
    description: str,
    width: float,
    height: float,
) -> ComponentTemplate:
    return ComponentTemplate(
        name=name,
        type=component_type,
        category=category,
        description=description,
        default_width=width,
        default_height=height,
    )


_C = ComponentCategory
_T = ComponentType

TEMPLATES: tuple[ComponentTemplate, ...] = (
    _t("Button", _T.BUTTON, _C.BASIC, "Standard action button", 120, 44),
    _t("Text Label", _T.LABEL, _C.BASIC, "Text content display", 100, 24),
    _t("Icon", _T.ICON, _C.BASIC, "Small icon or symbol", 32, 32),
    _t("Badge", _T.BADGE, _C.BASIC, "Small status indicator", 60, 24),
    _t("Navigation Bar", _T.NAVBAR, _C.NAVIGATION, "Top navigation bar", 320, 64),
    _t("Tab Bar", _T.TAB, _C.NAVIGATION, "Bottom tab navigation", 320, 80),
    _t("Breadcrumb", _T.BREADCRUMB, _C.NAVIGATION, "Navigation breadcrumb trail", 250, 32),
    _t("Pagination", _T.PAGINATION, _C.NAVIGATION, "Page navigation controls", 200, 40),
    _t("Text Input", _T.FORM_CONTROL, _C.FORMS, "Single line text input", 200, 44),
    _t("Text Area", _T.TEXTAREA, _C.FORMS, "Multi-line text input", 200, 100),
    _t("Dropdown", _T.DROPDOWN, _C.FORMS, "Selection dropdown menu", 160, 44),
    _t("Form Container", _T.FORM, _C.FORMS, "Complete form layout", 280, 200),
    _t("Image", _T.IMAGE, _C.MEDIA, "Image placeholder", 150, 150),
    _t("Avatar", _T.IMAGE, _C.MEDIA, "User profile image", 60, 60),
    _t("Thumbnail", _T.THUMBNAIL, _C.MEDIA, "Small preview image", 80, 80),
    _t("Carousel", _T.CAROUSEL, _C.MEDIA, "Image carousel slider", 300, 200),
    _t("Card", _T.MEDIA_OBJECT, _C.LAYOUT, "Content card container", 200, 150),
    _t("List Item", _T.LIST_GROUP, _C.LAYOUT, "Single list item", 250, 60),
    _t("Table", _T.TABLE, _C.LAYOUT, "Data table", 300, 200),
    _t("Well", _T.WELL, _C.LAYOUT, "Content well container", 200, 100),
    _t("Alert", _T.ALERT, _C.FEEDBACK, "Alert notification", 280, 80),
    _t("Progress Bar", _T.PROGRESS_BAR, _C.FEEDBACK, "Progress indicator", 200, 20),
    _t("Modal", _T.MODAL, _C.FEEDBACK, "Modal dialog", 300, 200),
    _t("Tooltip", _T.TOOLTIP, _C.FEEDBACK, "Contextual tooltip", 120, 40),
)


def templates_for(category: ComponentCategory) -> list[ComponentTemplate]:
    return [t for t in TEMPLATES if t.category == category]


def find_template(name: str) -> ComponentTemplate | None:
    """Look up a template by name, ignoring case."""
    wanted = name.lower()
    return next((t for t in TEMPLATES if t.name.lower() == wanted), None)


def responsive_size(template: ComponentTemplate, canvas: CanvasSize) -> tuple[float, float]:
    """Scale the template's default size down to fit the canvas."""
    max_width = canvas.width * MAX_WIDTH_FRACTION
    max_height = canvas.height * MAX_HEIGHT_FRACTION

    width = template.default_width
    height = template.default_height

    if width > max_width:
        width = max_width
        height = width / template.aspect_ratio

    if height > max_height:
        height = max_height
        width = height * template.aspect_ratio

    return max(width, MIN_SIZE), max(height, MIN_SIZE)


def create_component(
    template: ComponentTemplate,
    canvas: CanvasSize,
    position: Point | None = None,
) -> DetectedComponent:
    """Place ``template`` centred on ``position`` (canvas centre by default)."""
    if position is None:
        position = (canvas.width / 2.0, canvas.height / 2.0)
    width, height = responsive_size(template, canvas)
    rect = rect_at_position(position, width, height, canvas)
    logger.debug("Placed template %r at %s", template.name, rect)
    return DetectedComponent(
        rect=rect,
        type=SingleType(component_type=template.type),
        label=template.name,
    )
