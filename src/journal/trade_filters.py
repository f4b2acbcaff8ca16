# src/journal/trade_filters.py
"""Filtering of trade collections."""
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from src.journal.metrics_calculator import require_trades
from src.journal.models import Direction, Trade, TradeOutcome


@dataclass(frozen=True)
class TradeFilters:
    """Criteria a trade must match. None fields are not checked.

    Date bounds are inclusive and compare against the entry date.
    """

    symbol: str | None = None
    direction: Direction | None = None
    outcome: TradeOutcome | None = None
    strategy: str | None = None
    date_from: date | None = None
    date_to: date | None = None

    def matches(self, trade: Trade) -> bool:
        if self.symbol is not None and trade.symbol != self.symbol:
            return False
        if self.direction is not None and trade.direction != self.direction:
            return False
        if self.outcome is not None and trade.outcome != self.outcome:
            return False
        if self.strategy is not None and trade.strategy != self.strategy:
            return False
        if self.date_from is not None and trade.entry_date < self.date_from:
            return False
        if self.date_to is not None and trade.entry_date > self.date_to:
            return False
        return True


def filter_trades(trades: Iterable[Trade], filters: TradeFilters) -> list[Trade]:
    """Return the trades matching filters, preserving input order."""
    return [t for t in require_trades(trades) if filters.matches(t)]
