"""Unit tests for easing curves."""

import numpy as np
import pytest

from circular_progress.core.easing import (
    EASINGS,
    decelerate,
    get_easing,
    linear,
    make_decelerate,
    validate_easing,
)
from circular_progress.core.errors import InvalidConfigurationError


class TestCurves:
    def test_linear(self):
        assert linear(0.3) == 0.3

    def test_decelerate_endpoints(self):
        assert decelerate(0.0) == 0.0
        assert decelerate(1.0) == 1.0
        assert decelerate(0.5) == pytest.approx(0.75)

    def test_decelerate_monotonic(self):
        values = np.array([decelerate(t) for t in np.linspace(0.0, 1.0, 101)])
        assert np.all(np.diff(values) >= 0)
        assert np.all(values >= linear(0.0))

    def test_make_decelerate_default_is_decelerate(self):
        assert make_decelerate() is decelerate

    def test_make_decelerate_stronger_factor(self):
        curve = make_decelerate(2.0)
        assert curve(0.5) == pytest.approx(1.0 - 0.5**4)
        assert curve(1.0) == 1.0

    @pytest.mark.parametrize("factor", [0.0, -1.0])
    def test_make_decelerate_rejects_non_positive(self, factor):
        with pytest.raises(InvalidConfigurationError):
            make_decelerate(factor)


class TestLookup:
    def test_known_names(self):
        assert get_easing("linear") is linear
        assert get_easing("decelerate") is decelerate
        assert set(EASINGS) == {"linear", "decelerate"}

    def test_unknown_name(self):
        with pytest.raises(InvalidConfigurationError, match="Unknown easing"):
            get_easing("bounce")

    def test_validate_easing(self):
        assert validate_easing(linear) is linear
        with pytest.raises(InvalidConfigurationError):
            validate_easing(None)
        with pytest.raises(InvalidConfigurationError, match="42"):
            validate_easing(42)
