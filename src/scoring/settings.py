# src/scoring/settings.py
"""Settings for the Wolf Score."""
from pydantic import BaseModel, Field, model_validator

from src.scoring.scoring_curve import ScoringCurve, ratio_curve, recovery_factor_curve


class MetricWeights(BaseModel):
    """Weight of each sub-score in the composite. Must sum to 1.0."""

    win_rate: float = Field(default=0.15, ge=0, le=1)
    profit_factor: float = Field(default=0.25, ge=0, le=1)
    avg_win_loss_ratio: float = Field(default=0.20, ge=0, le=1)
    recovery_factor: float = Field(default=0.10, ge=0, le=1)
    max_drawdown_score: float = Field(default=0.20, ge=0, le=1)
    consistency: float = Field(default=0.10, ge=0, le=1)

    @model_validator(mode="after")
    def validate_total(self) -> "MetricWeights":
        total = sum(self.model_dump().values())
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Metric weights must sum to 1.0, got {total:.4f}")
        return self


class CurveSettings(BaseModel):
    """Breakpoint tables of the curve-scored metrics."""

    profit_factor: ScoringCurve = Field(default_factory=ratio_curve)
    avg_win_loss_ratio: ScoringCurve = Field(default_factory=ratio_curve)
    recovery_factor: ScoringCurve = Field(default_factory=recovery_factor_curve)


class WolfScoreSettings(BaseModel):
    """Configuration of the Wolf Score engine.

    Attributes:
        weights: Per-metric weights of the composite score.
        curves: Per-metric breakpoint tables.
        win_rate_target: Win rate (%) that earns the full win-rate score.
        neutral_score: Score given when a ratio is undefined for lack of data.
    """

    weights: MetricWeights = Field(default_factory=MetricWeights)
    curves: CurveSettings = Field(default_factory=CurveSettings)
    win_rate_target: float = Field(default=60.0, gt=0, le=100)
    neutral_score: float = Field(default=50.0, ge=0, le=100)
