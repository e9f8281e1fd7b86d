import logging
from collections.abc import Sequence
from pathlib import Path

from PIL import Image, ImageDraw
from pydantic import BaseModel, ConfigDict

from sketch_site.detection import CanvasSize, DetectedComponent, Rect

logger = logging.getLogger(__name__)

# Colors assigned to component types in order of first appearance.
TYPE_COLORS = ["red", "green", "blue", "orange", "purple", "teal", "magenta", "brown"]


class DrawableItem(BaseModel):
    """A unified structure for things to draw on the canvas."""

    model_config = ConfigDict(frozen=True)

    rect: Rect
    """The rectangle to draw."""

    label: str
    """Label text to display."""

    color: str

    is_group_member: bool = False
    """Group members are drawn with thinner outlines."""


def create_drawable_items(
    components: Sequence[DetectedComponent],
) -> list[DrawableItem]:
    """Turn components into drawable items, one color per component type."""
    colors: dict[str, str] = {}
    items: list[DrawableItem] = []
    for index, component in enumerate(components):
        type_name = str(component.type)
        if type_name not in colors:
            colors[type_name] = TYPE_COLORS[len(colors) % len(TYPE_COLORS)]

        label = f"{index + 1}: {type_name}"
        if component.label:
            label = f"{label} ({component.label})"

        items.append(
            DrawableItem(
                rect=component.rect,
                label=label,
                color=colors[type_name],
                is_group_member=component.is_group_member,
            )
        )
    return items


def _draw_item(
    draw: ImageDraw.ImageDraw, item: DrawableItem, scale_x: float, scale_y: float
) -> None:
    rect = item.rect
    scaled = (
        rect.min_x * scale_x,
        rect.min_y * scale_y,
        rect.max_x * scale_x,
        rect.max_y * scale_y,
    )
    draw.rectangle(scaled, outline=item.color, width=1 if item.is_group_member else 2)
    # Above top-left, inside the box when it touches the top edge
    text_y = scaled[1] - 12 if scaled[1] >= 12 else scaled[1] + 2
    draw.text((scaled[0] + 2, text_y), item.label, fill=item.color)


def draw_components(
    components: Sequence[DetectedComponent],
    canvas: CanvasSize,
    output_path: Path,
    *,
    background: Path | None = None,
) -> Path:
    """Render component boxes and labels to a PNG.

    Args:
        components: Components to draw, in canvas coordinates.
        canvas: Canvas size the components were detected on.
        output_path: Where to write the PNG.
        background: Optional sketch image to draw on. It is used at its own
            resolution and the components are scaled to fit it.

    Returns:
        The path written.
    """
    if background is not None:
        img = Image.open(background).convert("RGB")
    else:
        img = Image.new(
            "RGB", (max(1, round(canvas.width)), max(1, round(canvas.height))), "white"
        )

    scale_x = img.width / canvas.width
    scale_y = img.height / canvas.height

    draw = ImageDraw.Draw(img)
    for item in create_drawable_items(components):
        _draw_item(draw, item, scale_x, scale_y)

    img.save(output_path)
    logger.info("Saved image with %d components to %s", len(components), output_path)
    return output_path
