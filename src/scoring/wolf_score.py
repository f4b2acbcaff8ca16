# src/scoring/wolf_score.py
"""Wolf Score: weighted composite of six normalized performance sub-scores."""
import math
from collections.abc import Iterable

from src.journal.drawdown_tracker import DrawdownTracker
from src.journal.metrics_calculator import MetricsCalculator, require_trades
from src.journal.models import (
    PROFIT_FACTOR_UNDEFINED_SENTINEL,
    RECOVERY_FACTOR_UNDEFINED_SENTINEL,
    Trade,
    TradeMetrics,
)
from src.journal.risk_ratio_calculator import daily_pnl, population_std
from src.scoring.models import ScoreGrade, WolfScoreMetrics, WolfScoreResult
from src.scoring.scoring_curve import clamp
from src.scoring.settings import WolfScoreSettings

RADAR_LABELS = {
    "win_rate": "Win %",
    "profit_factor": "Profit Factor",
    "avg_win_loss_ratio": "Avg W/L",
    "recovery_factor": "Recovery",
    "max_drawdown_score": "Max DD",
    "consistency": "Consistency",
}


class WolfScoreEngine:
    """Combines performance metrics into the composite Wolf Score.

    Pipeline:
    1. Basic metrics (win rate, profit factor, averages, total pnl)
    2. Max drawdown over the exit-ordered equity curve
    3. Six sub-scores, each clamped to 0-100
    4. Weighted sum, clamped and rounded to one decimal
    5. Grade lookup

    Attributes:
        settings: Weights and scoring curves.
    """

    def __init__(
        self,
        settings: WolfScoreSettings | None = None,
        metrics_calculator: MetricsCalculator | None = None,
        drawdown_tracker: DrawdownTracker | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            settings: Weights and curves; defaults when None.
            metrics_calculator: Calculator for the basic metrics.
            drawdown_tracker: Tracker for the maximum drawdown.
        """
        self._settings = settings or WolfScoreSettings()
        self._metrics_calculator = metrics_calculator or MetricsCalculator()
        self._drawdown_tracker = drawdown_tracker or DrawdownTracker()

    @property
    def settings(self) -> WolfScoreSettings:
        return self._settings

    def calculate(
        self,
        trades: Iterable[Trade],
        initial_balance: float,
        metrics: TradeMetrics | None = None,
        max_drawdown: float | None = None,
    ) -> WolfScoreResult:
        """Calculate the Wolf Score of an account.

        Args:
            trades: Trade collection in any order.
            initial_balance: Account balance before the first trade.
            metrics: Precomputed basic metrics of the same trades.
            max_drawdown: Precomputed maximum drawdown of the same trades.

        Returns:
            WolfScoreResult with composite score, sub-scores and grade.

        Raises:
            ValueError: If initial_balance is not positive.
        """
        wolf_metrics = self.calculate_metrics(trades, initial_balance, metrics, max_drawdown)
        weights = self._settings.weights

        raw_score = (
            wolf_metrics.win_rate * weights.win_rate
            + wolf_metrics.profit_factor * weights.profit_factor
            + wolf_metrics.avg_win_loss_ratio * weights.avg_win_loss_ratio
            + wolf_metrics.recovery_factor * weights.recovery_factor
            + wolf_metrics.max_drawdown_score * weights.max_drawdown_score
            + wolf_metrics.consistency * weights.consistency
        )

        # Half-up rounding to one decimal
        final_score = math.floor(clamp(raw_score) * 10 + 0.5) / 10
        grade = ScoreGrade.from_score(final_score)

        return WolfScoreResult(
            score=final_score,
            metrics=wolf_metrics,
            grade=grade,
            grade_color=grade.color,
            description=grade.description,
        )

    def calculate_metrics(
        self,
        trades: Iterable[Trade],
        initial_balance: float,
        metrics: TradeMetrics | None = None,
        max_drawdown: float | None = None,
    ) -> WolfScoreMetrics:
        """Calculate the six sub-scores without combining them.

        Pending trades never move a sub-score: the recovery factor uses the
        pnl of closed trades, like the drawdown it is divided by.
        """
        if initial_balance <= 0:
            raise ValueError(f"initial_balance must be positive, got {initial_balance}")

        trades = require_trades(trades)
        if metrics is None:
            metrics = self._metrics_calculator.calculate(trades)
        if max_drawdown is None:
            max_drawdown = self._drawdown_tracker.calculate(trades, initial_balance).max_drawdown

        closed_pnl = sum(t.pnl for t in trades if t.is_closed and t.pnl is not None)

        return WolfScoreMetrics(
            win_rate=clamp(self.win_rate_score(metrics.win_rate)),
            profit_factor=clamp(self.profit_factor_score(metrics.profit_factor)),
            avg_win_loss_ratio=clamp(self.avg_win_loss_score(metrics.avg_win, metrics.avg_loss)),
            recovery_factor=clamp(self.recovery_factor_score(closed_pnl, max_drawdown)),
            max_drawdown_score=clamp(self.max_drawdown_score(max_drawdown, initial_balance)),
            consistency=clamp(self.consistency_score(trades)),
        )

    def win_rate_score(self, win_rate: float) -> float:
        """Win rate as a share of the target win rate (60% -> 100)."""
        return clamp(win_rate / self._settings.win_rate_target * 100)

    def profit_factor_score(self, profit_factor: float) -> float:
        return self._settings.curves.profit_factor.score(profit_factor)

    def avg_win_loss_score(self, avg_win: float, avg_loss: float) -> float:
        """Score the average win / average loss ratio.

        Without losses the ratio is treated as unbounded when there are wins
        and as undefined (neutral score) when there are none.
        """
        if avg_loss == 0:
            if avg_win > 0:
                return self._settings.curves.avg_win_loss_ratio.score(
                    PROFIT_FACTOR_UNDEFINED_SENTINEL
                )
            return self._settings.neutral_score
        return self._settings.curves.avg_win_loss_ratio.score(avg_win / avg_loss)

    def recovery_factor_score(self, total_pnl: float, max_drawdown: float) -> float:
        """Score net profit / max drawdown.

        With no drawdown a profitable account gets the sentinel recovery
        factor; an unprofitable one gets the neutral score.
        """
        if max_drawdown == 0:
            if total_pnl > 0:
                return self._settings.curves.recovery_factor.score(
                    RECOVERY_FACTOR_UNDEFINED_SENTINEL
                )
            return self._settings.neutral_score
        return self._settings.curves.recovery_factor.score(total_pnl / max_drawdown)

    def max_drawdown_score(self, max_drawdown: float, initial_balance: float) -> float:
        """100 minus the max drawdown as a percentage of the initial balance."""
        return clamp(100 - max_drawdown / initial_balance * 100)

    def consistency_score(self, trades: Iterable[Trade]) -> float:
        """Penalize day-to-day pnl variance relative to total profit.

        Returns:
            0 when total profit is not positive, otherwise
            100 - stddev(daily pnl) / total profit * 100, clamped.
        """
        daily = list(daily_pnl(require_trades(trades)).values())
        total_profit = sum(daily)
        if total_profit <= 0:
            return 0.0

        ratio = population_std(daily) / total_profit
        return clamp(100 - ratio * 100)

    def radar_data(self, metrics: WolfScoreMetrics) -> list[dict]:
        """Sub-scores as label/value rows for a radar chart."""
        return [
            {"metric": label, "value": getattr(metrics, name), "full_mark": 100}
            for name, label in RADAR_LABELS.items()
        ]
