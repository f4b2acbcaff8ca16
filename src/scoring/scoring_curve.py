# src/scoring/scoring_curve.py
"""Piecewise-linear scoring curves mapping a metric value to a 0-100 score."""
import math

from pydantic import BaseModel, Field, model_validator


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """Clamp value to [lower, upper]."""
    return max(lower, min(upper, value))


def interpolate(value: float, x0: float, x1: float, y0: float, y1: float) -> float:
    """Linear interpolation of value from [x0, x1] onto [y0, y1], clamped at the ends."""
    if value <= x0:
        return y0
    if value >= x1:
        return y1
    return y0 + (value - x0) * (y1 - y0) / (x1 - x0)


class CurveBand(BaseModel):
    """One breakpoint range: values in [lower, upper] score low_score..high_score."""

    lower: float
    upper: float
    low_score: float = Field(ge=0, le=100)
    high_score: float = Field(ge=0, le=100)

    @model_validator(mode="after")
    def validate_range(self) -> "CurveBand":
        if self.upper <= self.lower:
            raise ValueError(f"Band upper ({self.upper}) must exceed lower ({self.lower})")
        if self.high_score < self.low_score:
            raise ValueError("Band high_score must not be below low_score")
        return self


class ScoringCurve(BaseModel):
    """Breakpoint table turning a metric value into a score.

    Below the first band the score is `minimum`; at or above `full_score_at`
    it is 100. A value inside a band is interpolated between the band's
    scores; a value between two bands scores the lower band's high_score.

    Attributes:
        minimum: Score for values below the lowest band.
        full_score_at: Threshold from which the score is 100.
        bands: Breakpoint ranges, ascending and non-overlapping.
    """

    minimum: float = Field(default=0.0, ge=0, le=100)
    full_score_at: float
    bands: list[CurveBand] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_bands(self) -> "ScoringCurve":
        for previous, current in zip(self.bands, self.bands[1:]):
            if current.lower < previous.upper:
                raise ValueError("Curve bands must be ascending and non-overlapping")
            if current.low_score < previous.high_score:
                raise ValueError("Curve band scores must not decrease")
        if self.bands and self.bands[-1].upper > self.full_score_at:
            raise ValueError("full_score_at must not fall inside the last band")
        return self

    def score(self, value: float) -> float:
        """Score a metric value.

        Args:
            value: Metric value. NaN scores the minimum.

        Returns:
            Score in [0, 100].
        """
        if math.isnan(value):
            return self.minimum
        if value >= self.full_score_at:
            return 100.0

        for band in reversed(self.bands):
            if value >= band.lower:
                return interpolate(
                    value, band.lower, band.upper, band.low_score, band.high_score
                )

        return self.minimum


def ratio_curve() -> ScoringCurve:
    """Default curve for profit factor and average win/loss ratio."""
    return ScoringCurve(
        minimum=20.0,
        full_score_at=2.6,
        bands=[
            CurveBand(lower=1.8, upper=1.89, low_score=50, high_score=59),
            CurveBand(lower=1.9, upper=1.99, low_score=60, high_score=69),
            CurveBand(lower=2.0, upper=2.19, low_score=70, high_score=79),
            CurveBand(lower=2.2, upper=2.39, low_score=80, high_score=89),
            CurveBand(lower=2.4, upper=2.59, low_score=90, high_score=99),
        ],
    )


def recovery_factor_curve() -> ScoringCurve:
    """Default curve for the recovery factor (net profit / max drawdown)."""
    return ScoringCurve(
        minimum=0.0,
        full_score_at=3.5,
        bands=[
            CurveBand(lower=1.0, upper=1.49, low_score=1, high_score=29),
            CurveBand(lower=1.5, upper=1.99, low_score=30, high_score=49),
            CurveBand(lower=2.0, upper=2.49, low_score=50, high_score=59),
            CurveBand(lower=2.5, upper=2.99, low_score=60, high_score=69),
            CurveBand(lower=3.0, upper=3.49, low_score=70, high_score=89),
        ],
    )
