# tests/journal/test_streak_analyzer.py
"""Tests for StreakAnalyzer."""
from datetime import date, time

from src.journal.models import Direction, Trade
from src.journal.streak_analyzer import StreakAnalyzer


def make_trade(trade_id: str, pnl: float | None, day: int, exit_price: float | None = 1.06) -> Trade:
    """Create a trade entered on October `day` for testing."""
    return Trade(
        id=trade_id,
        direction=Direction.LONG,
        entry_price=1.05,
        entry_date=date(2023, 10, day),
        entry_time=time(10, 0),
        exit_price=exit_price,
        pnl=pnl,
    )


class TestStreakAnalyzer:
    """Tests for StreakAnalyzer."""

    def test_no_trades(self):
        result = StreakAnalyzer().analyze([])

        assert result.current_streak.type == "none"
        assert result.current_streak.count == 0
        assert result.max_win_streak == 0
        assert result.max_loss_streak == 0

    def test_max_streaks(self):
        """Longest runs of wins and losses should be tracked separately."""
        pnls = [10.0, 20.0, 30.0, -5.0, -5.0, 15.0, -10.0, -10.0, -10.0]
        trades = [make_trade(str(i), pnl, i + 1) for i, pnl in enumerate(pnls)]

        result = StreakAnalyzer().analyze(trades)

        assert result.max_win_streak == 3
        assert result.max_loss_streak == 3
        assert result.current_streak.type == "loss"
        assert result.current_streak.count == 3

    def test_input_order_irrelevant(self):
        """Trades should be ordered by entry date before counting."""
        trades = [
            make_trade("c", 30.0, 3),
            make_trade("a", 10.0, 1),
            make_trade("b", -20.0, 2),
        ]

        result = StreakAnalyzer().analyze(trades)

        assert result.max_win_streak == 1
        assert result.current_streak.type == "win"
        assert result.current_streak.count == 1

    def test_breakeven_resets_current_streak(self):
        """A breakeven trade should end the running streak."""
        trades = [
            make_trade("1", 10.0, 1),
            make_trade("2", 10.0, 2),
            make_trade("3", 0.0, 3),
            make_trade("4", 10.0, 4),
        ]

        result = StreakAnalyzer().analyze(trades)

        assert result.max_win_streak == 2
        assert result.current_streak.count == 1

    def test_pending_last_gives_no_current_streak(self):
        trades = [
            make_trade("1", -10.0, 1),
            make_trade("2", None, 2, exit_price=None),
        ]

        result = StreakAnalyzer().analyze(trades)

        assert result.max_loss_streak == 1
        assert result.current_streak.type == "none"
        assert result.current_streak.count == 0
