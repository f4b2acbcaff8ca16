# src/journal/risk_ratio_calculator.py
"""Calculator for risk-adjusted return ratios and hold times."""
import math
from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from src.journal.drawdown_tracker import DrawdownTracker
from src.journal.metrics_calculator import require_trades
from src.journal.models import (
    CALMAR_RATIO_UNDEFINED_SENTINEL,
    HoldTimeStats,
    RiskRatios,
    Trade,
    TradeOutcome,
)


def daily_pnl(trades: Iterable[Trade]) -> dict[date, float]:
    """Sum the pnl of closed trades per calendar day (exit date, else entry)."""
    totals: dict[date, float] = defaultdict(float)
    for trade in trades:
        if not trade.is_closed or trade.pnl is None:
            continue
        totals[trade.close_date] += trade.pnl
    return dict(sorted(totals.items()))


def population_std(values: list[float]) -> float:
    """Population standard deviation, 0.0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    mean = sum(values) / len(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


class RiskRatioCalculator:
    """Calculates Sharpe-like and Calmar-like ratios and average hold time."""

    def __init__(self, drawdown_tracker: DrawdownTracker | None = None) -> None:
        """Initialize the calculator.

        Args:
            drawdown_tracker: Tracker used for the Calmar denominator.
        """
        self._drawdown_tracker = drawdown_tracker or DrawdownTracker()

    def calculate(self, trades: Iterable[Trade], initial_balance: float) -> RiskRatios:
        """Calculate both ratios for an account."""
        trades = require_trades(trades)
        return RiskRatios(
            sharpe_ratio=self.sharpe_ratio(trades),
            calmar_ratio=self.calmar_ratio(trades, initial_balance),
        )

    def sharpe_ratio(self, trades: Iterable[Trade]) -> float:
        """Mean daily pnl over its population standard deviation.

        Returns:
            The ratio, or 0.0 when the daily pnl has no variance.
        """
        returns = list(daily_pnl(require_trades(trades)).values())
        std_dev = population_std(returns)
        if std_dev == 0:
            return 0.0
        return (sum(returns) / len(returns)) / std_dev

    def calmar_ratio(self, trades: Iterable[Trade], initial_balance: float) -> float:
        """Total return (% of initial balance) over max drawdown (%).

        Returns:
            The ratio. With no drawdown: CALMAR_RATIO_UNDEFINED_SENTINEL for a
            positive return, 0.0 otherwise.

        Raises:
            ValueError: If initial_balance is not positive.
        """
        trades = require_trades(trades)
        drawdown = self._drawdown_tracker.calculate(trades, initial_balance)

        total_pnl = sum(t.pnl for t in trades if t.is_closed and t.pnl is not None)
        return_percent = total_pnl / initial_balance * 100

        if drawdown.max_drawdown_percent == 0:
            return CALMAR_RATIO_UNDEFINED_SENTINEL if return_percent > 0 else 0.0

        return return_percent / drawdown.max_drawdown_percent

    def hold_times(self, trades: Iterable[Trade]) -> HoldTimeStats:
        """Average duration between entry and exit, in minutes.

        Trades without an exit date and time are skipped; a missing entry
        time counts as midnight of the entry date.

        Args:
            trades: Trade collection.

        Returns:
            HoldTimeStats for winners, losers and all timed trades.
        """
        winner_durations: list[float] = []
        loser_durations: list[float] = []
        all_durations: list[float] = []

        for trade in require_trades(trades):
            if trade.exit_date is None or trade.exit_time is None:
                continue

            duration_seconds = (trade.exit_timestamp - trade.entry_timestamp).total_seconds()
            duration_minutes = duration_seconds / 60.0

            all_durations.append(duration_minutes)
            if trade.outcome == TradeOutcome.WIN:
                winner_durations.append(duration_minutes)
            elif trade.outcome == TradeOutcome.LOSS:
                loser_durations.append(duration_minutes)

        def _mean(values: list[float]) -> float:
            return sum(values) / len(values) if values else 0.0

        return HoldTimeStats(
            avg_winner_minutes=_mean(winner_durations),
            avg_loser_minutes=_mean(loser_durations),
            avg_all_minutes=_mean(all_durations),
            winner_count=len(winner_durations),
            loser_count=len(loser_durations),
        )
