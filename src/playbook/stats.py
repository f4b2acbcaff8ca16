# src/playbook/stats.py
"""Aggregate statistics shared by breakdown trees and tag analytics."""
from src.journal.models import Trade, TradeOutcome
from src.journal.r_multiple import trade_r_multiple
from src.playbook.models import BaseStats


def build_base_stats(trades: list[Trade]) -> BaseStats:
    """Compute BaseStats for a group of trades.

    Args:
        trades: Trades of one group.

    Returns:
        BaseStats. Trades without a defined R-multiple are left out of avg_rr.
    """
    wins = sum(1 for t in trades if t.outcome == TradeOutcome.WIN)
    losses = sum(1 for t in trades if t.outcome == TradeOutcome.LOSS)
    pnl = sum(t.pnl or 0.0 for t in trades)

    r_multiples = [r for r in (trade_r_multiple(t) for t in trades) if r is not None]

    decided = wins + losses
    return BaseStats(
        wins=wins,
        losses=losses,
        pnl=pnl,
        win_rate=wins / decided * 100 if decided > 0 else 0.0,
        avg_rr=sum(r_multiples) / len(r_multiples) if r_multiples else None,
        total_trades=len(trades),
    )


def gross_profit_and_loss(trades: list[Trade]) -> tuple[float, float]:
    """Sum of winning pnl and magnitude of the sum of losing pnl."""
    gross_profit = sum(t.pnl or 0.0 for t in trades if t.outcome == TradeOutcome.WIN)
    gross_loss = abs(sum(t.pnl or 0.0 for t in trades if t.outcome == TradeOutcome.LOSS))
    return gross_profit, gross_loss
