# src/scoring/models.py
"""Data models for the Wolf Score."""
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class ScoreGrade(str, Enum):
    """Letter grade of a composite Wolf Score."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @classmethod
    def from_score(cls, score: float) -> "ScoreGrade":
        """Get the grade for a numeric score.

        Args:
            score: Composite score from 0-100.

        Returns:
            ScoreGrade based on thresholds:
                - score >= 90 -> S
                - score >= 80 -> A
                - score >= 70 -> B
                - score >= 60 -> C
                - score >= 50 -> D
                - score < 50 -> F
        """
        if score >= 90:
            return cls.S
        elif score >= 80:
            return cls.A
        elif score >= 70:
            return cls.B
        elif score >= 60:
            return cls.C
        elif score >= 50:
            return cls.D
        else:
            return cls.F

    @property
    def color(self) -> str:
        return _GRADE_DISPLAY[self][0]

    @property
    def description(self) -> str:
        return _GRADE_DISPLAY[self][1]


_GRADE_DISPLAY = {
    ScoreGrade.S: ("#a855f7", "Elite"),
    ScoreGrade.A: ("#22c55e", "Excellent"),
    ScoreGrade.B: ("#84cc16", "Good"),
    ScoreGrade.C: ("#eab308", "Average"),
    ScoreGrade.D: ("#f97316", "Below Average"),
    ScoreGrade.F: ("#ef4444", "Needs Improvement"),
}


@dataclass
class WolfScoreMetrics:
    """The six normalized sub-scores, each in [0, 100].

    Attributes:
        win_rate: Win rate relative to the target win rate.
        profit_factor: Profit factor scored on the ratio curve.
        avg_win_loss_ratio: Average win / average loss scored on the ratio curve.
        recovery_factor: Net profit / max drawdown scored on the recovery curve.
        max_drawdown_score: 100 minus max drawdown as % of initial balance.
        consistency: Penalty for daily pnl variance relative to total profit.
    """

    win_rate: float
    profit_factor: float
    avg_win_loss_ratio: float
    recovery_factor: float
    max_drawdown_score: float
    consistency: float


@dataclass
class WolfScoreResult:
    """Composite Wolf Score with grade and display details.

    Attributes:
        score: Weighted composite from 0-100, one decimal.
        metrics: Sub-scores the composite was built from.
        grade: Letter grade of score.
        grade_color: Display color of the grade.
        description: Display text of the grade.
    """

    score: float
    metrics: WolfScoreMetrics
    grade: ScoreGrade
    grade_color: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["grade"] = self.grade.value
        return data
