"""End-to-end tests for the detection pipeline."""

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from sketch_site.detection import (
    Annotation,
    CanvasSize,
    ComponentType,
    DetectionResult,
    DetectorConfig,
    GroupKind,
    GroupType,
    Rect,
    RejectionReason,
    SingleType,
    default_properties,
    detect_components,
    run_detection,
)
from sketch_site.detection.config import QualityFilterConfig
from sketch_site.detection.geometry import is_within_bounds

CANVAS = CanvasSize(400, 400)


@st.composite
def rects(draw):
    x = draw(st.integers(min_value=-20, max_value=420))
    y = draw(st.integers(min_value=-20, max_value=420))
    w = draw(st.integers(min_value=0, max_value=300))
    h = draw(st.integers(min_value=0, max_value=300))
    return Rect(x, y, w, h)


@settings(max_examples=50)
@given(st.lists(rects(), max_size=12))
def test_components_always_on_canvas(candidates):
    for component in detect_components(candidates, CANVAS):
        assert is_within_bounds(component.rect, CANVAS)


@settings(max_examples=50)
@given(st.lists(rects(), max_size=12))
def test_one_component_per_kept_rect(candidates):
    result = run_detection(candidates, CANVAS)
    assert len(result.components) + len(result.rejected) == len(candidates)


class TestDetectComponents:
    """Tests for detect_components on small sketches."""

    def test_empty(self) -> None:
        assert detect_components([], CANVAS) == []

    def test_aligned_row_becomes_navbar(self) -> None:
        rects = [Rect(10, 10, 100, 20), Rect(150, 10, 100, 20), Rect(290, 10, 100, 20)]
        components = detect_components(rects, CANVAS)

        assert len(components) == 3
        navbar = GroupKind(group_type=GroupType.NAVBAR)
        assert all(c.type == navbar for c in components)
        assert [c.rect for c in components] == rects
        assert components[0].properties == default_properties(navbar)

    def test_annotation_keyword_decides_type(self) -> None:
        components = detect_components(
            [Rect(50, 150, 60, 60)],
            CANVAS,
            {"nav menu": Rect(55, 155, 10, 10)},
        )
        assert len(components) == 1
        assert components[0].type == SingleType(component_type=ComponentType.NAVBAR)
        assert components[0].label == "nav menu"

    def test_nearby_button_annotation(self) -> None:
        components = detect_components(
            [Rect(100, 200, 80, 20)],
            CANVAS,
            [Annotation(label="btn-submit", rect=Rect(185, 200, 30, 10))],
        )
        assert components[0].type == SingleType(component_type=ComponentType.BUTTON)
        assert components[0].label == "btn-submit"

    def test_narrow_rect_dropped(self) -> None:
        assert detect_components([Rect(10, 10, 5, 100)], CANVAS) == []

    def test_unlabelled_single_uses_geometry(self) -> None:
        components = detect_components([Rect(50, 50, 200, 200)], CANVAS)
        assert components[0].type == SingleType(component_type=ComponentType.IMAGE)
        assert components[0].label is None

    def test_group_members_keep_own_labels(self) -> None:
        rects = [Rect(10, 10, 100, 20), Rect(150, 10, 100, 20), Rect(290, 10, 100, 20)]
        components = detect_components(rects, CANVAS, {"home": Rect(20, 12, 10, 5)})
        assert [c.label for c in components] == ["home", None, None]

    def test_overscan_rect_clamped(self) -> None:
        components = detect_components([Rect(-5, 100, 60, 60)], CANVAS)
        assert components[0].rect == Rect(0, 100, 60, 60)

    def test_overlapping_rects_spread_out(self) -> None:
        components = detect_components(
            [Rect(100, 100, 100, 100), Rect(100, 100, 100, 100)], CANVAS
        )
        assert components[0].rect == Rect(100, 100, 100, 100)
        assert components[1].rect == Rect(120, 120, 100, 100)

    def test_config_passed_through(self) -> None:
        config = DetectorConfig(
            quality_filter=QualityFilterConfig(
                min_width_fraction=0, min_height_fraction=0, min_area_fraction=0
            )
        )
        assert len(detect_components([Rect(10, 10, 5, 30)], CANVAS, config=config)) == 1

    def test_fresh_ids_each_run(self) -> None:
        rects = [Rect(50, 50, 200, 200)]
        first = detect_components(rects, CANVAS)
        second = detect_components(rects, CANVAS)
        assert first[0].id != second[0].id
        assert first[0].type == second[0].type


class TestRunDetection:
    """Tests for the diagnostics in DetectionResult."""

    def test_result_details(self) -> None:
        rects = [
            Rect(10, 10, 100, 20),
            Rect(10, 10, 5, 100),
            Rect(150, 10, 100, 20),
            Rect(200, 200, 100, 100),
        ]
        result = run_detection(rects, CANVAS)

        assert result.rejected == {1: RejectionReason.TOO_SMALL}
        assert result.groups == [[0, 1], [2]]
        assert result.group_count == 1
        assert result.singleton_count == 1
        assert len(result.components) == 3

    def test_json_round_trip(self) -> None:
        rects = [Rect(10, 10, 100, 20), Rect(10, 10, 5, 100)]
        result = run_detection(rects, CANVAS, {"nav": Rect(10, 10, 10, 10)})

        data = json.loads(result.to_json())
        assert data["canvas"] == {"width": 400, "height": 400}
        assert data["rejected"] == {"1": "too_small"}
        assert data["components"][0]["type"]["__tag__"] == "Single"

        parsed = DetectionResult.from_json(result.to_json())
        assert parsed.rejected == result.rejected
        assert [c.id for c in parsed.components] == [c.id for c in result.components]
