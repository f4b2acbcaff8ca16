# tests/scoring/test_scoring_curve.py
"""Tests for scoring curves."""
import pytest

from src.scoring.scoring_curve import (
    CurveBand,
    ScoringCurve,
    clamp,
    interpolate,
    ratio_curve,
    recovery_factor_curve,
)


class TestHelpers:
    """Tests for clamp and interpolate."""

    def test_clamp(self):
        assert clamp(-5.0) == 0.0
        assert clamp(150.0) == 100.0
        assert clamp(42.0) == 42.0

    def test_interpolate_midpoint(self):
        assert interpolate(1.5, 1.0, 2.0, 10.0, 20.0) == pytest.approx(15.0)

    def test_interpolate_clamps_ends(self):
        assert interpolate(0.5, 1.0, 2.0, 10.0, 20.0) == 10.0
        assert interpolate(2.5, 1.0, 2.0, 10.0, 20.0) == 20.0


class TestRatioCurve:
    """Tests for the default profit factor / avg W/L curve."""

    def test_below_first_band_scores_minimum(self):
        curve = ratio_curve()

        assert curve.score(0.0) == 20.0
        assert curve.score(1.79) == 20.0

    def test_band_start_and_interpolation(self):
        curve = ratio_curve()

        assert curve.score(1.8) == pytest.approx(50.0)
        assert curve.score(1.845) == pytest.approx(54.5)
        assert curve.score(2.0) == pytest.approx(70.0)

    def test_gap_between_bands_scores_band_top(self):
        """A value between two bands should keep the lower band's high score."""
        assert ratio_curve().score(1.895) == pytest.approx(59.0)

    def test_full_score(self):
        curve = ratio_curve()

        assert curve.score(2.6) == 100.0
        assert curve.score(999.0) == 100.0

    def test_nan_scores_minimum(self):
        assert ratio_curve().score(float("nan")) == 20.0

    def test_monotonic(self):
        """Scores should never decrease as the value grows."""
        curve = ratio_curve()
        values = [i / 100 for i in range(0, 300)]
        scores = [curve.score(v) for v in values]

        assert scores == sorted(scores)


class TestRecoveryFactorCurve:
    """Tests for the default recovery factor curve."""

    def test_points(self):
        curve = recovery_factor_curve()

        assert curve.score(0.5) == 0.0
        assert curve.score(1.0) == pytest.approx(1.0)
        assert curve.score(3.0) == pytest.approx(70.0)
        assert curve.score(3.5) == 100.0


class TestCurveValidation:
    """Tests for curve and band validation."""

    def test_band_upper_must_exceed_lower(self):
        with pytest.raises(ValueError):
            CurveBand(lower=2.0, upper=1.0, low_score=10, high_score=20)

    def test_band_scores_must_not_decrease(self):
        with pytest.raises(ValueError):
            CurveBand(lower=1.0, upper=2.0, low_score=30, high_score=20)

    def test_overlapping_bands_rejected(self):
        with pytest.raises(ValueError):
            ScoringCurve(
                full_score_at=5.0,
                bands=[
                    CurveBand(lower=1.0, upper=2.0, low_score=10, high_score=20),
                    CurveBand(lower=1.5, upper=3.0, low_score=30, high_score=40),
                ],
            )

    def test_full_score_inside_last_band_rejected(self):
        with pytest.raises(ValueError):
            ScoringCurve(
                full_score_at=1.5,
                bands=[CurveBand(lower=1.0, upper=2.0, low_score=10, high_score=20)],
            )

    def test_curve_without_bands(self):
        curve = ScoringCurve(minimum=10.0, full_score_at=1.0)

        assert curve.score(0.5) == 10.0
        assert curve.score(1.0) == 100.0
