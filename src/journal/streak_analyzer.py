# src/journal/streak_analyzer.py
"""Consecutive win/loss run tracking."""
from collections.abc import Iterable
from datetime import time

from src.journal.metrics_calculator import require_trades
from src.journal.models import CurrentStreak, StreakResult, Trade, TradeOutcome


class StreakAnalyzer:
    """Finds the longest and the current win/loss streaks."""

    def analyze(self, trades: Iterable[Trade]) -> StreakResult:
        """Analyze streaks over trades ordered by entry date.

        A breakeven or pending trade ends the running streak without
        starting a new one.

        Args:
            trades: Trade collection in any order.

        Returns:
            StreakResult with the current streak and the maxima.
        """
        ordered = sorted(
            require_trades(trades),
            key=lambda t: (t.entry_date, t.entry_time or time.min, t.id),
        )

        max_win_streak = 0
        max_loss_streak = 0
        current_type = "none"
        current_count = 0

        for trade in ordered:
            if trade.outcome == TradeOutcome.WIN:
                kind = "win"
            elif trade.outcome == TradeOutcome.LOSS:
                kind = "loss"
            else:
                current_type, current_count = "none", 0
                continue

            if kind == current_type:
                current_count += 1
            else:
                current_type, current_count = kind, 1

            if kind == "win":
                max_win_streak = max(max_win_streak, current_count)
            else:
                max_loss_streak = max(max_loss_streak, current_count)

        return StreakResult(
            current_streak=CurrentStreak(type=current_type, count=current_count),
            max_win_streak=max_win_streak,
            max_loss_streak=max_loss_streak,
        )
