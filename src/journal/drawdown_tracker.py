# src/journal/drawdown_tracker.py
"""Running-peak drawdown tracking over time-ordered trades."""
from collections.abc import Iterable

from src.journal.metrics_calculator import require_trades
from src.journal.models import DrawdownResult, EquityPoint, Trade


def exit_order_key(trade: Trade) -> tuple:
    """Sort key: exit timestamp (falling back to entry), then trade id."""
    return (trade.exit_timestamp or trade.entry_timestamp, trade.id)


class DrawdownTracker:
    """Tracks peak equity and maximum drawdown for an account."""

    def calculate(
        self,
        trades: Iterable[Trade],
        initial_balance: float,
    ) -> DrawdownResult:
        """Walk the trades in exit order and measure drawdown.

        The input order is irrelevant; trades are sorted by exit timestamp
        (entry when not closed on record) with ties broken by id. Pending
        trades and trades without pnl are skipped.

        Args:
            trades: Trade collection.
            initial_balance: Account balance before the first trade.

        Returns:
            DrawdownResult with the absolute and percentage maximum drawdown.

        Raises:
            ValueError: If initial_balance is not positive.
        """
        if initial_balance <= 0:
            raise ValueError(f"initial_balance must be positive, got {initial_balance}")

        closed = [t for t in require_trades(trades) if t.is_closed and t.pnl is not None]
        ordered = sorted(closed, key=exit_order_key)

        balance = initial_balance
        peak = initial_balance
        max_drawdown = 0.0
        curve: list[EquityPoint] = []

        for trade in ordered:
            balance += trade.pnl
            if balance > peak:
                peak = balance
            drawdown = peak - balance
            if drawdown > max_drawdown:
                max_drawdown = drawdown
            curve.append(
                EquityPoint(trade_id=trade.id, balance=balance, peak=peak, drawdown=drawdown)
            )

        return DrawdownResult(
            initial_balance=initial_balance,
            final_balance=balance,
            peak_balance=peak,
            max_drawdown=max_drawdown,
            max_drawdown_percent=max_drawdown / initial_balance * 100,
            equity_curve=curve,
        )
