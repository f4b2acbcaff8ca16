# src/journal/monthly_report.py
"""Month-by-month performance breakdown."""
import calendar
from collections.abc import Iterable

import pandas as pd

from src.journal.metrics_calculator import require_trades
from src.journal.models import MonthlyMetrics, Trade, TradeOutcome


def trades_to_frame(trades: Iterable[Trade]) -> pd.DataFrame:
    """Build a DataFrame with one row per trade.

    Columns: id, entry_date, outcome, pnl. Missing pnl becomes 0.0.
    """
    rows = [
        {
            "id": t.id,
            "entry_date": pd.Timestamp(t.entry_date),
            "outcome": t.outcome.value,
            "pnl": t.pnl if t.pnl is not None else 0.0,
        }
        for t in require_trades(trades)
    ]
    return pd.DataFrame(rows, columns=["id", "entry_date", "outcome", "pnl"])


class MonthlyReport:
    """Groups trades by entry month and summarizes each month."""

    def calculate(self, trades: Iterable[Trade]) -> list[MonthlyMetrics]:
        """Calculate metrics per calendar month.

        Args:
            trades: Trade collection in any order.

        Returns:
            One MonthlyMetrics per month with at least one trade, oldest
            first, labelled like "November 2023".
        """
        df = trades_to_frame(trades)
        if df.empty:
            return []

        df["month"] = df["entry_date"].dt.to_period("M")
        df["is_win"] = df["outcome"] == TradeOutcome.WIN.value
        df["is_loss"] = df["outcome"] == TradeOutcome.LOSS.value

        grouped = df.groupby("month", sort=True).agg(
            trades=("id", "count"),
            wins=("is_win", "sum"),
            losses=("is_loss", "sum"),
            pnl=("pnl", "sum"),
        )

        results: list[MonthlyMetrics] = []
        for period, row in grouped.iterrows():
            wins = int(row["wins"])
            losses = int(row["losses"])
            decided = wins + losses
            results.append(
                MonthlyMetrics(
                    month=f"{calendar.month_name[period.month]} {period.year}",
                    trades=int(row["trades"]),
                    wins=wins,
                    losses=losses,
                    pnl=float(row["pnl"]),
                    win_rate=wins / decided * 100 if decided > 0 else 0.0,
                )
            )

        return results
