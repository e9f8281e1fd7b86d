"""Tests for the rectangle quality filter."""

from hypothesis import given
from hypothesis import strategies as st

from sketch_site.detection.config import QualityFilterConfig
from sketch_site.detection.geometry import CanvasSize, Rect
from sketch_site.detection.quality_filter import (
    RejectionReason,
    filter_quality_rectangles,
    filter_quality_rectangles_with_reasons,
    rejection_reason,
)

CANVAS = CanvasSize(400, 400)


@st.composite
def rects(draw):
    x = draw(st.integers(min_value=-50, max_value=450))
    y = draw(st.integers(min_value=-50, max_value=450))
    w = draw(st.integers(min_value=0, max_value=450))
    h = draw(st.integers(min_value=0, max_value=450))
    return Rect(x, y, w, h)


@given(st.lists(rects(), max_size=20))
def test_output_is_ordered_subset(candidates):
    kept = filter_quality_rectangles(candidates, CANVAS)
    remaining = iter(candidates)
    # Each kept rect appears in the input after the previous one.
    assert all(any(r is c for c in remaining) for r in kept)


@given(st.lists(rects(), max_size=20))
def test_every_rect_kept_or_rejected(candidates):
    kept, rejected = filter_quality_rectangles_with_reasons(candidates, CANVAS)
    assert len(kept) + len(rejected) == len(candidates)


class TestRejectionReason:
    """Tests for the individual quality checks."""

    def test_plausible_rect_passes(self) -> None:
        assert rejection_reason(Rect(50, 50, 100, 40), CANVAS) is None

    def test_too_narrow(self) -> None:
        """A 5-wide rect on a 400-wide canvas is too small."""
        assert rejection_reason(Rect(10, 10, 5, 100), CANVAS) == RejectionReason.TOO_SMALL

    def test_too_short(self) -> None:
        assert rejection_reason(Rect(10, 10, 100, 19), CANVAS) == RejectionReason.TOO_SMALL

    def test_insufficient_area(self) -> None:
        """20x20 passes the side checks but 400 < 0.003 * 160000."""
        assert (
            rejection_reason(Rect(0, 0, 20, 20), CANVAS)
            == RejectionReason.INSUFFICIENT_AREA
        )

    def test_extreme_aspect_ratio(self) -> None:
        assert (
            rejection_reason(Rect(0, 0, 300, 25), CANVAS)
            == RejectionReason.EXTREME_ASPECT_RATIO
        )
        assert (
            rejection_reason(Rect(0, 0, 25, 300), CANVAS)
            == RejectionReason.EXTREME_ASPECT_RATIO
        )

    def test_aspect_bounds_inclusive(self) -> None:
        assert rejection_reason(Rect(0, 0, 300, 30), CANVAS) is None

    def test_outside_canvas(self) -> None:
        assert (
            rejection_reason(Rect(395, 0, 30, 30), CANVAS)
            == RejectionReason.OUTSIDE_CANVAS
        )

    def test_overscan_allowed(self) -> None:
        """Rects may extend up to 10 units past each edge."""
        assert rejection_reason(Rect(-10, -10, 50, 50), CANVAS) is None
        assert rejection_reason(Rect(360, 360, 50, 50), CANVAS) is None

    def test_first_failure_reported(self) -> None:
        """Size is checked before area."""
        assert rejection_reason(Rect(0, 0, 5, 5), CANVAS) == RejectionReason.TOO_SMALL

    def test_custom_config(self) -> None:
        config = QualityFilterConfig(min_width_fraction=0.0, min_height_fraction=0.0)
        assert (
            rejection_reason(Rect(0, 0, 5, 5), CANVAS, config)
            == RejectionReason.INSUFFICIENT_AREA
        )


class TestFilterQualityRectangles:
    """Tests for filtering whole lists."""

    def test_empty(self) -> None:
        kept, rejected = filter_quality_rectangles_with_reasons([], CANVAS)
        assert kept == []
        assert rejected == {}

    def test_reasons_keyed_by_input_index(self) -> None:
        rects = [
            Rect(10, 10, 100, 40),
            Rect(10, 10, 5, 100),
            Rect(200, 200, 60, 60),
            Rect(395, 0, 30, 30),
        ]
        kept, rejected = filter_quality_rectangles_with_reasons(rects, CANVAS)
        assert kept == [rects[0], rects[2]]
        assert rejected == {
            1: RejectionReason.TOO_SMALL,
            3: RejectionReason.OUTSIDE_CANVAS,
        }

    def test_duplicates_both_kept(self) -> None:
        """Equal rects are filtered independently."""
        r = Rect(10, 10, 100, 40)
        assert filter_quality_rectangles([r, r], CANVAS) == [r, r]
