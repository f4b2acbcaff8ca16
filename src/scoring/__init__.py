# src/scoring/__init__.py
"""Scoring module for the Wolf Score."""

from .models import ScoreGrade, WolfScoreMetrics, WolfScoreResult
from .scoring_curve import CurveBand, ScoringCurve
from .settings import CurveSettings, MetricWeights, WolfScoreSettings
from .wolf_score import WolfScoreEngine

__all__ = [
    "CurveBand",
    "CurveSettings",
    "MetricWeights",
    "ScoreGrade",
    "ScoringCurve",
    "WolfScoreEngine",
    "WolfScoreMetrics",
    "WolfScoreResult",
    "WolfScoreSettings",
]
