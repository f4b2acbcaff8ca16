# src/analytics/models.py
"""Data models for the combined performance report."""
from dataclasses import dataclass, field
from typing import Any

from src.journal.models import (
    DrawdownResult,
    HoldTimeStats,
    MonthlyMetrics,
    RiskRatios,
    StreakResult,
    TradeMetrics,
)
from src.playbook.models import BreakdownNode, TagMetrics
from src.scoring.models import WolfScoreResult


@dataclass
class PerformanceReport:
    """Every analytics output for one trade collection.

    Attributes:
        initial_balance: Account balance the report was computed against.
        metrics: Basic metrics.
        drawdown: Equity curve and maximum drawdown.
        streaks: Win/loss streaks.
        ratios: Sharpe-like and Calmar-like ratios.
        hold_times: Average hold times.
        wolf_score: Composite score with grade.
        monthly: Month-by-month breakdown.
        tags: Per-tag metrics.
        playbook: Breakdown tree over the playbook review chain.
    """

    initial_balance: float
    metrics: TradeMetrics
    drawdown: DrawdownResult
    streaks: StreakResult
    ratios: RiskRatios
    hold_times: HoldTimeStats
    wolf_score: WolfScoreResult
    monthly: list[MonthlyMetrics] = field(default_factory=list)
    tags: list[TagMetrics] = field(default_factory=list)
    playbook: list[BreakdownNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "initial_balance": self.initial_balance,
            "metrics": self.metrics.to_dict(),
            "drawdown": self.drawdown.to_dict(),
            "streaks": self.streaks.to_dict(),
            "ratios": self.ratios.to_dict(),
            "hold_times": self.hold_times.to_dict(),
            "wolf_score": self.wolf_score.to_dict(),
            "monthly": [m.to_dict() for m in self.monthly],
            "tags": [t.to_dict() for t in self.tags],
            "playbook": [node.to_dict() for node in self.playbook],
        }
