# src/journal/metrics_calculator.py
"""Calculator for basic trading performance metrics."""
from collections.abc import Iterable

from src.journal.models import (
    PROFIT_FACTOR_UNDEFINED_SENTINEL,
    Trade,
    TradeMetrics,
    TradeOutcome,
)


def require_trades(trades: Iterable[Trade] | None) -> list[Trade]:
    """Materialize a trade collection, rejecting None.

    Raises:
        TypeError: If trades is None or not iterable.
    """
    if trades is None:
        raise TypeError("trades must be a collection of Trade, not None")
    return list(trades)


def profit_factor(gross_profit: float, gross_loss: float) -> float:
    """Gross profit over gross loss magnitude.

    Returns PROFIT_FACTOR_UNDEFINED_SENTINEL when there is profit but no
    loss, and 0.0 when both are zero.
    """
    if gross_loss > 0:
        return gross_profit / gross_loss
    return PROFIT_FACTOR_UNDEFINED_SENTINEL if gross_profit > 0 else 0.0


class MetricsCalculator:
    """Calculates win rate, profit factor, averages and P&L totals."""

    def calculate(self, trades: Iterable[Trade]) -> TradeMetrics:
        """Calculate basic metrics from a trade collection.

        Args:
            trades: Trades in any order. Pending and breakeven trades count
                toward total_trades but not toward the win rate.

        Returns:
            TradeMetrics with all calculated values.
        """
        trades = require_trades(trades)

        winners = [t for t in trades if t.outcome == TradeOutcome.WIN]
        losers = [t for t in trades if t.outcome == TradeOutcome.LOSS]
        breakeven = sum(1 for t in trades if t.outcome == TradeOutcome.BREAKEVEN)
        pending = sum(1 for t in trades if t.outcome == TradeOutcome.PENDING)

        decided = len(winners) + len(losers)
        win_rate = len(winners) / decided * 100 if decided > 0 else 0.0

        gross_profit = sum(t.pnl or 0.0 for t in winners)
        gross_loss = abs(sum(t.pnl or 0.0 for t in losers))

        avg_win = gross_profit / len(winners) if winners else 0.0
        avg_loss = gross_loss / len(losers) if losers else 0.0

        pf = profit_factor(avg_win * len(winners), avg_loss * len(losers))

        pnls = [t.pnl for t in trades if t.pnl is not None]
        total_pnl = sum(pnls)

        return TradeMetrics(
            total_trades=len(trades),
            wins=len(winners),
            losses=len(losers),
            breakeven=breakeven,
            pending=pending,
            win_rate=win_rate,
            profit_factor=pf,
            total_pnl=total_pnl,
            avg_win=avg_win,
            avg_loss=avg_loss,
            best_trade=max(pnls) if pnls else 0.0,
            worst_trade=min(pnls) if pnls else 0.0,
        )
