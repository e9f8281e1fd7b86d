"""Tests for arranging components into layout sections."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sketch_site.detection.auto_layout import (
    Alignment,
    FlexDirection,
    LayoutGroup,
    SectionType,
    alignment,
    describe_layout,
    flex_direction,
    measured_spacing,
    process_layout,
    split_rows,
)
from sketch_site.detection.component_types import (
    ComponentType,
    GroupKind,
    GroupType,
    SingleType,
)
from sketch_site.detection.config import LayoutConfig
from sketch_site.detection.detected_component import DetectedComponent
from sketch_site.detection.geometry import CanvasSize, Rect

CANVAS = CanvasSize(400, 400)


def _single(
    rect: Rect, component_type: ComponentType = ComponentType.LABEL
) -> DetectedComponent:
    return DetectedComponent(rect=rect, type=SingleType(component_type=component_type))


def _top_row() -> DetectedComponent:
    """A small label at the very top, so later rows are not the first row."""
    return _single(Rect(10, 5, 50, 10))


@st.composite
def components(draw):
    x = draw(st.integers(min_value=0, max_value=350))
    y = draw(st.integers(min_value=0, max_value=350))
    w = draw(st.integers(min_value=1, max_value=50))
    h = draw(st.integers(min_value=1, max_value=50))
    return _single(Rect(x, y, w, h))


@given(st.lists(components(), max_size=12))
def test_every_component_in_exactly_one_section(items):
    groups = process_layout(items, CANVAS)
    placed = [c.id for g in groups for c in g.components]
    assert sorted(placed) == sorted(c.id for c in items)


@given(st.lists(components(), max_size=12))
def test_spacing_within_clamp(items):
    config = LayoutConfig()
    for group in process_layout(items, CANVAS, config):
        assert config.min_spacing / 2 <= group.spacing <= config.max_spacing


class TestSplitRows:
    """Tests for split_rows."""

    def test_rows_top_to_bottom_left_to_right(self) -> None:
        a = _single(Rect(200, 10, 20, 20))
        b = _single(Rect(10, 20, 20, 20))
        c = _single(Rect(10, 100, 20, 20))
        assert split_rows([c, a, b], 20) == [[b, a], [c]]

    def test_tolerance_measured_from_seed(self) -> None:
        """Centres at 10, 25 and 40: the third is 30 from the seed."""
        a = _single(Rect(0, 0, 20, 20))
        b = _single(Rect(50, 15, 20, 20))
        c = _single(Rect(100, 30, 20, 20))
        assert split_rows([a, b, c], 20) == [[a, b], [c]]

    def test_empty(self) -> None:
        assert split_rows([], 20) == []


class TestFlexDirection:
    """Tests for flex_direction."""

    def test_single_is_column(self) -> None:
        assert flex_direction([_single(Rect(0, 0, 20, 20))]) == FlexDirection.COLUMN

    def test_horizontal_spread_is_row(self) -> None:
        row = [_single(Rect(x, 0, 20, 20)) for x in (0, 100, 200)]
        assert flex_direction(row) == FlexDirection.ROW

    def test_vertical_spread_is_column(self) -> None:
        column = [_single(Rect(0, 0, 20, 20)), _single(Rect(0, 100, 20, 20))]
        assert flex_direction(column) == FlexDirection.COLUMN

    def test_square_spread_with_many_members_is_grid(self) -> None:
        points = [(0, 0), (100, 0), (0, 100), (100, 100), (50, 50)]
        grid = [_single(Rect(x, y, 20, 20)) for x, y in points]
        assert flex_direction(grid) == FlexDirection.GRID

    def test_square_spread_with_few_members_is_column(self) -> None:
        points = [(0, 0), (100, 0), (0, 100), (100, 100)]
        square = [_single(Rect(x, y, 20, 20)) for x, y in points]
        assert flex_direction(square) == FlexDirection.COLUMN


class TestAlignment:
    """Tests for alignment."""

    def test_single_is_start(self) -> None:
        only = [_single(Rect(0, 0, 20, 20))]
        assert alignment(only, FlexDirection.ROW, LayoutConfig()) == Alignment.START

    def test_row_with_level_centres(self) -> None:
        row = [_single(Rect(0, 0, 20, 20)), _single(Rect(100, 0, 20, 20))]
        assert alignment(row, FlexDirection.ROW, LayoutConfig()) == Alignment.CENTER

    def test_row_with_uneven_centres(self) -> None:
        """Centres 0 and 30 apart have variance 225."""
        row = [_single(Rect(0, 0, 20, 20)), _single(Rect(100, 30, 20, 20))]
        assert alignment(row, FlexDirection.ROW, LayoutConfig()) == Alignment.START

    def test_column_checks_horizontal_centres(self) -> None:
        column = [_single(Rect(0, 0, 20, 20)), _single(Rect(0, 100, 20, 20))]
        config = LayoutConfig()
        assert alignment(column, FlexDirection.COLUMN, config) == Alignment.CENTER
        assert alignment(column, FlexDirection.ROW, config) == Alignment.START


class TestMeasuredSpacing:
    """Tests for measured_spacing."""

    def _row(self, *xs: int) -> list[DetectedComponent]:
        return [_single(Rect(x, 0, 20, 20)) for x in xs]

    def test_single_gets_default(self) -> None:
        assert measured_spacing(self._row(0), FlexDirection.ROW, LayoutConfig()) == 16

    def test_small_gap_clamped_up(self) -> None:
        spacing = measured_spacing(self._row(0, 22), FlexDirection.ROW, LayoutConfig())
        assert spacing == 8

    def test_large_gap_clamped_down(self) -> None:
        spacing = measured_spacing(self._row(0, 120), FlexDirection.ROW, LayoutConfig())
        assert spacing == 48

    def test_median_gap(self) -> None:
        """Gaps 10, 30 and 20 give a median of 20."""
        row = self._row(0, 30, 80, 120)
        assert measured_spacing(row, FlexDirection.ROW, LayoutConfig()) == 20

    def test_even_count_takes_upper_median(self) -> None:
        """Gaps 10 and 30 give 30."""
        row = self._row(0, 30, 80)
        assert measured_spacing(row, FlexDirection.ROW, LayoutConfig()) == 30

    def test_overlapping_members_get_default(self) -> None:
        row = self._row(0, 10)
        assert measured_spacing(row, FlexDirection.ROW, LayoutConfig()) == 16

    def test_column_measures_vertical_gaps(self) -> None:
        column = [_single(Rect(0, 0, 20, 20)), _single(Rect(0, 40, 20, 20))]
        assert measured_spacing(column, FlexDirection.COLUMN, LayoutConfig()) == 20


class TestProcessLayout:
    """Tests for section typing and per-section overrides."""

    def test_empty(self) -> None:
        assert process_layout([], CANVAS) == []

    def test_disabled_gives_standalone_sections(self) -> None:
        items = [_single(Rect(0, 0, 50, 50)), _single(Rect(60, 0, 50, 50))]
        groups = process_layout(items, CANVAS, LayoutConfig(enabled=False))

        assert len(groups) == 2
        for group, item in zip(groups, items, strict=True):
            assert group.section_type == SectionType.STANDALONE
            assert group.components == (item,)
            assert group.direction == FlexDirection.COLUMN
            assert group.alignment == Alignment.START
            assert group.spacing == 0
            assert group.bounding_rect == item.rect

    def test_first_row_at_top_is_header(self) -> None:
        row = [
            _single(Rect(10, 10, 80, 30), ComponentType.BUTTON),
            _single(Rect(300, 10, 80, 30), ComponentType.BUTTON),
        ]
        [group] = process_layout(row, CANVAS)

        assert group.section_type == SectionType.HEADER
        assert group.direction == FlexDirection.ROW
        assert group.alignment == Alignment.SPACE_BETWEEN
        assert group.spacing == 16
        assert group.bounding_rect == Rect(10, 10, 370, 30)

    def test_tab_row_near_top_is_header(self) -> None:
        tab = _single(Rect(10, 50, 100, 20), ComponentType.TAB)
        groups = process_layout([_top_row(), tab], CANVAS)
        assert [g.section_type for g in groups] == [SectionType.HEADER] * 2

    def test_first_row_lower_down_is_not_header(self) -> None:
        [group] = process_layout([_single(Rect(10, 150, 50, 20))], CANVAS)
        assert group.section_type == SectionType.STANDALONE

    def test_navbar_mid_canvas_is_navigation(self) -> None:
        navbar = _single(Rect(10, 200, 100, 20), ComponentType.NAVBAR)
        groups = process_layout([_top_row(), navbar], CANVAS)
        assert groups[1].section_type == SectionType.NAVIGATION
        assert groups[1].alignment == Alignment.SPACE_BETWEEN

    def test_form_section(self) -> None:
        field = _single(Rect(10, 200, 100, 20), ComponentType.FORM_CONTROL)
        groups = process_layout([_top_row(), field], CANVAS)
        assert groups[1].section_type == SectionType.FORM_SECTION
        assert groups[1].direction == FlexDirection.COLUMN
        assert groups[1].spacing == 16

    def test_button_group_uses_half_gap(self) -> None:
        buttons = [
            _single(Rect(100, 200, 60, 20), ComponentType.BUTTON),
            _single(Rect(200, 200, 60, 20), ComponentType.BUTTON),
        ]
        groups = process_layout([_top_row(), *buttons], CANVAS)

        assert groups[1].section_type == SectionType.BUTTON_GROUP
        assert groups[1].direction == FlexDirection.ROW
        assert groups[1].alignment == Alignment.CENTER
        assert groups[1].spacing == 8

    def test_group_members_are_not_a_button_group(self) -> None:
        members = [
            DetectedComponent(
                rect=Rect(x, 200, 40, 20),
                type=GroupKind(group_type=GroupType.BUTTON_GROUP),
            )
            for x in (100, 160)
        ]
        groups = process_layout([_top_row(), *members], CANVAS)
        assert groups[1].section_type == SectionType.STANDALONE

    def test_card_grid_uses_wider_gap(self) -> None:
        card = [
            _single(Rect(100, 180, 60, 60), ComponentType.IMAGE),
            _single(Rect(180, 200, 60, 20), ComponentType.LABEL),
        ]
        groups = process_layout([_top_row(), *card], CANVAS)

        assert groups[1].section_type == SectionType.CARD_GRID
        assert groups[1].direction == FlexDirection.GRID
        assert groups[1].alignment == Alignment.START
        assert groups[1].spacing == 24

    def test_footer(self) -> None:
        groups = process_layout([_top_row(), _single(Rect(10, 340, 50, 20))], CANVAS)
        assert groups[1].section_type == SectionType.FOOTER
        assert groups[1].spacing == 16

    def test_wide_central_row_is_hero(self) -> None:
        """Hero sections keep their measured direction, alignment and spacing."""
        labels = [_single(Rect(10, 200, 40, 20)), _single(Rect(300, 200, 40, 20))]
        groups = process_layout([_top_row(), *labels], CANVAS)

        assert groups[1].section_type == SectionType.HERO_SECTION
        assert groups[1].direction == FlexDirection.ROW
        assert groups[1].alignment == Alignment.CENTER
        assert groups[1].spacing == 48

    def test_component_gap_config(self) -> None:
        buttons = [
            _single(Rect(100, 200, 60, 20), ComponentType.BUTTON),
            _single(Rect(200, 200, 60, 20), ComponentType.BUTTON),
        ]
        config = LayoutConfig(component_gap=20)
        groups = process_layout([_top_row(), *buttons], CANVAS, config)
        assert groups[0].spacing == 20
        assert groups[1].spacing == 10

    @pytest.mark.parametrize("tolerance,expected", [(20, 2), (60, 1)])
    def test_alignment_tolerance(self, tolerance: float, expected: int) -> None:
        items = [_single(Rect(10, 10, 50, 20)), _single(Rect(100, 50, 50, 20))]
        config = LayoutConfig(alignment_tolerance=tolerance)
        assert len(process_layout(items, CANVAS, config)) == expected


class TestDescribeLayout:
    """Tests for describe_layout."""

    def test_sections(self) -> None:
        buttons = [
            _single(Rect(10, 10, 80, 30), ComponentType.BUTTON),
            _single(Rect(300, 10, 80, 30), ComponentType.BUTTON),
        ]
        footer = _single(Rect(10, 340, 50, 20))
        text = describe_layout(process_layout([*buttons, footer], CANVAS))

        assert text == (
            "Section 1 (Header): button, button\n"
            "- Layout: horizontal with space-between alignment\n"
            "- Spacing: 16px gaps\n"
            "- Components: 2\n"
            "\n"
            "Section 2 (Footer): label\n"
            "- Layout: vertical with flex-start alignment\n"
            "- Spacing: 16px gaps\n"
            "- Components: 1"
        )

    def test_empty(self) -> None:
        assert describe_layout([]) == ""

    def test_group_str(self) -> None:
        group = LayoutGroup(
            section_type=SectionType.CARD_GRID,
            components=(),
            direction=FlexDirection.GRID,
            alignment=Alignment.START,
            spacing=24,
            bounding_rect=Rect(0, 0, 10, 10),
        )
        assert str(group) == "Card Grid - grid - 0 components"
