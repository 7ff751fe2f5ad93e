"""Unit tests for draw-rect layout."""

import pytest

from circular_progress.core.errors import InvalidConfigurationError
from circular_progress.core.geometry import DrawRect, compute_draw_rect


class TestComputeDrawRect:
    """Tests for the centered, inset square."""

    def test_square_widget(self):
        rect = compute_draw_rect(100, 100, 10)
        assert rect == DrawRect(6, 6, 94, 94)
        assert rect.radius == 44

    def test_wide_widget_is_centered_horizontally(self):
        assert compute_draw_rect(200, 100, 10) == DrawRect(56, 6, 144, 94)

    def test_tall_widget_is_centered_vertically(self):
        assert compute_draw_rect(100, 200, 10) == DrawRect(6, 56, 94, 144)

    def test_rect_is_square(self):
        rect = compute_draw_rect(317, 120, 3)
        assert rect.width == pytest.approx(rect.height)

    def test_center_matches_widget_center(self):
        assert compute_draw_rect(240, 90, 4).center == (120, 45)

    def test_background_stroke_ignored_when_not_drawn(self):
        assert compute_draw_rect(100, 100, 2, 20) == compute_draw_rect(100, 100, 2)

    def test_background_stroke_counts_when_drawn(self):
        rect = compute_draw_rect(100, 100, 2, 20, draw_background_stroke=True)
        assert rect == DrawRect(11, 11, 89, 89)

    def test_thicker_foreground_wins(self):
        rect = compute_draw_rect(100, 100, 10, 2, draw_background_stroke=True)
        assert rect == DrawRect(6, 6, 94, 94)

    @pytest.mark.parametrize("size", [(0, 100), (100, 0), (-5, 50)])
    def test_no_area_gives_empty_rect(self, size):
        rect = compute_draw_rect(*size, 3)
        assert rect == DrawRect()
        assert rect.empty

    def test_negative_stroke_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            compute_draw_rect(100, 100, -1)
        with pytest.raises(InvalidConfigurationError):
            compute_draw_rect(100, 100, 1, -1, draw_background_stroke=True)


class TestDrawRect:
    def test_dimensions(self):
        rect = DrawRect(10, 20, 50, 60)
        assert rect.width == 40
        assert rect.height == 40
        assert rect.radius == 20
        assert not rect.empty
