"""Unit tests for determinate progress angle resolution and transitions."""

import numpy as np
import pytest

from circular_progress.core.errors import InvalidConfigurationError
from circular_progress.core.easing import linear
from circular_progress.core.progress import ProgressAngleResolver, resolve_progress_angles


class TestResolveProgressAngles:
    """Tests for the stateless progress -> (start, sweep) mapping."""

    def test_half_progress(self):
        """Half of the maximum sweeps half a circle from the start angle."""
        assert resolve_progress_angles(50, 100, 270) == (270, 180)

    def test_overflow_saturates(self):
        """Progress beyond the maximum is clamped to a full circle, not wrapped."""
        _, sweep = resolve_progress_angles(150, 100, 270)
        assert sweep == 360

    def test_progress_equal_to_maximum_is_full_circle(self):
        """Reaching the maximum exactly gives a full circle."""
        assert resolve_progress_angles(100, 100, 0) == (0, 360)

    def test_negative_progress_sweeps_backwards(self):
        """Opposite signs of progress and maximum give a negative sweep."""
        assert resolve_progress_angles(-25, 100, 0) == (0, -90)
        assert resolve_progress_angles(25, -100, 0) == (0, -90)

    def test_negative_overflow_saturates_by_magnitude(self):
        """Magnitude comparison governs saturation regardless of sign."""
        assert resolve_progress_angles(-150, 100, 0)[1] == 360

    def test_zero_maximum_raises(self):
        """A zero maximum is an invalid configuration, not a silent default."""
        with pytest.raises(InvalidConfigurationError):
            resolve_progress_angles(10, 0, 270)

    def test_invalid_configuration_is_value_error(self):
        """InvalidConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            resolve_progress_angles(10, 0, 270)

    @pytest.mark.parametrize("maximum", [-100.0, -7.5, 0.5, 3.0, 100.0])
    def test_sweep_bounded_by_full_circle(self, maximum):
        """|sweep| <= 360, with equality exactly when |progress| >= |maximum|."""
        for progress in np.linspace(-300.0, 300.0, 121):
            _, sweep = resolve_progress_angles(float(progress), maximum, 0.0)
            assert abs(sweep) <= 360.0
            assert (abs(sweep) == 360.0) == (abs(progress) >= abs(maximum))

    @pytest.mark.parametrize("start_angle", [-360.0, -90.0, 0.0, 270.0, 360.0])
    def test_start_angle_never_altered(self, start_angle):
        """Progress resolution returns the start angle unchanged."""
        for progress in (-500.0, 0.0, 33.3, 100.0, 1e6):
            assert resolve_progress_angles(progress, 100.0, start_angle)[0] == start_angle


class TestProgressAngleResolver:
    """Tests for the stateful resolver and its eased transitions."""

    def test_defaults(self):
        """Defaults: maximum 100, start angle 270, progress 0."""
        resolver = ProgressAngleResolver()
        assert resolver.maximum == 100
        assert resolver.start_angle == 270
        assert resolver.progress == 0
        assert resolver.angles() == (270, 0)

    def test_set_progress_without_animation_is_immediate(self):
        """A non-animated write is displayed at once."""
        resolver = ProgressAngleResolver()
        resolver.set_progress(50)
        assert resolver.progress == 50
        assert not resolver.animating
        assert resolver.angles() == (270, 180)

    def test_animated_transition_decelerates(self):
        """Transition follows the decelerating curve: 75% of the way at half time."""
        resolver = ProgressAngleResolver(animation_duration_ms=100)
        resolver.set_progress(100, animate=True)
        assert resolver.animating
        assert resolver.progress == 0
        assert resolver.target_progress == 100

        assert resolver.advance(50) is True
        assert resolver.progress == pytest.approx(75.0)

        assert resolver.advance(50) is False
        assert resolver.progress == 100
        assert not resolver.animating

    def test_new_write_restarts_from_interpolated_value(self):
        """Last write wins: a new target starts from the current displayed value."""
        resolver = ProgressAngleResolver(animation_duration_ms=100, easing=linear)
        resolver.set_progress(100, animate=True)
        resolver.advance(40)
        assert resolver.progress == pytest.approx(40.0)

        resolver.set_progress(0, animate=True)
        assert resolver.progress == pytest.approx(40.0)
        resolver.advance(50)
        assert resolver.progress == pytest.approx(20.0)
        resolver.advance(50)
        assert resolver.progress == 0

    def test_non_animated_write_cancels_transition(self):
        """An immediate write discards any in-flight transition."""
        resolver = ProgressAngleResolver(animation_duration_ms=100)
        resolver.set_progress(100, animate=True)
        resolver.advance(30)
        resolver.set_progress(10)
        assert not resolver.animating
        assert resolver.progress == 10
        resolver.advance(100)
        assert resolver.progress == 10

    def test_zero_duration_is_immediate(self):
        """With a zero duration animated writes apply at once."""
        resolver = ProgressAngleResolver(animation_duration_ms=0)
        resolver.set_progress(60, animate=True)
        assert not resolver.animating
        assert resolver.progress == 60

    def test_end_transition_jumps_to_target(self):
        resolver = ProgressAngleResolver(animation_duration_ms=100)
        resolver.set_progress(80, animate=True)
        resolver.advance(10)
        resolver.end_transition()
        assert resolver.progress == 80
        assert not resolver.animating

    def test_cancel_transition_freezes_value(self):
        resolver = ProgressAngleResolver(animation_duration_ms=100, easing=linear)
        resolver.set_progress(80, animate=True)
        resolver.advance(50)
        resolver.cancel_transition()
        assert resolver.progress == pytest.approx(40.0)
        assert resolver.target_progress == pytest.approx(40.0)
        assert not resolver.animating

    def test_changing_duration_ends_transition(self):
        """Reconfiguring the transition settles it at the target first."""
        resolver = ProgressAngleResolver(animation_duration_ms=100)
        resolver.set_progress(90, animate=True)
        resolver.advance(10)
        resolver.animation_duration_ms = 500
        assert resolver.progress == 90
        assert not resolver.animating
        assert resolver.animation_duration_ms == 500

    def test_zero_maximum_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            ProgressAngleResolver(maximum=0)
        resolver = ProgressAngleResolver()
        with pytest.raises(InvalidConfigurationError):
            resolver.maximum = 0
        assert resolver.maximum == 100

    @pytest.mark.parametrize("angle", [-360.5, 361.0, 720.0])
    def test_start_angle_out_of_range_rejected(self, angle):
        resolver = ProgressAngleResolver()
        with pytest.raises(InvalidConfigurationError):
            resolver.start_angle = angle
        assert resolver.start_angle == 270

    def test_negative_duration_rejected(self):
        resolver = ProgressAngleResolver()
        with pytest.raises(InvalidConfigurationError):
            resolver.animation_duration_ms = -1

    def test_missing_easing_rejected(self):
        resolver = ProgressAngleResolver()
        with pytest.raises(InvalidConfigurationError):
            resolver.easing = None
