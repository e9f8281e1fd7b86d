"""Tests for drawing detected components."""

from PIL import Image

from sketch_site.detection import (
    CanvasSize,
    ComponentType,
    DetectedComponent,
    GroupKind,
    GroupType,
    Rect,
    SingleType,
)
from sketch_site.drawing import create_drawable_items, draw_components

WHITE = (255, 255, 255)


def _button(rect: Rect, label: str | None = None) -> DetectedComponent:
    return DetectedComponent(
        rect=rect, type=SingleType(component_type=ComponentType.BUTTON), label=label
    )


class TestCreateDrawableItems:
    """Tests for create_drawable_items."""

    def test_labels_and_colors(self) -> None:
        components = [
            _button(Rect(0, 0, 50, 20), "ok"),
            DetectedComponent(
                rect=Rect(0, 50, 50, 20), type=GroupKind(group_type=GroupType.NAVBAR)
            ),
            _button(Rect(100, 0, 50, 20)),
        ]
        items = create_drawable_items(components)

        assert [item.label for item in items] == [
            "1: button (ok)",
            "2: navbar",
            "3: button",
        ]
        assert items[0].color == items[2].color
        assert items[0].color != items[1].color
        assert items[1].is_group_member
        assert not items[0].is_group_member

    def test_empty(self) -> None:
        assert create_drawable_items([]) == []


class TestDrawComponents:
    """Tests for draw_components."""

    def test_blank_canvas(self, tmp_path) -> None:
        output = tmp_path / "out.png"
        result = draw_components([_button(Rect(10, 10, 100, 50))], CanvasSize(400, 300), output)

        assert result == output
        with Image.open(output) as img:
            assert img.size == (400, 300)
            rgb = img.convert("RGB")
            assert rgb.getpixel((10, 35)) != WHITE
            assert rgb.getpixel((200, 200)) == WHITE

    def test_background_scaled(self, tmp_path) -> None:
        background = tmp_path / "sketch.png"
        Image.new("RGB", (200, 150), "white").save(background)
        output = tmp_path / "out.png"

        draw_components(
            [_button(Rect(100, 100, 100, 50))],
            CanvasSize(400, 300),
            output,
            background=background,
        )

        with Image.open(output) as img:
            assert img.size == (200, 150)
            # Left edge of the box at x = 100 * 0.5.
            assert img.convert("RGB").getpixel((50, 60)) != WHITE
