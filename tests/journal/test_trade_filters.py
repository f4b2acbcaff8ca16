# tests/journal/test_trade_filters.py
"""Tests for trade filtering."""
from datetime import date

import pytest

from src.journal.models import Direction, Trade, TradeOutcome
from src.journal.trade_filters import TradeFilters, filter_trades


def make_trade(
    trade_id: str,
    symbol: str = "EURUSD",
    direction: Direction = Direction.LONG,
    pnl: float = 100.0,
    day: int = 1,
    strategy: str | None = None,
) -> Trade:
    """Create a closed trade for testing."""
    return Trade(
        id=trade_id,
        direction=direction,
        entry_price=1.05,
        entry_date=date(2023, 10, day),
        exit_price=1.06,
        pnl=pnl,
        symbol=symbol,
        strategy=strategy,
    )


class TestTradeFilters:
    """Tests for TradeFilters and filter_trades."""

    def test_empty_filters_match_everything(self):
        trades = [make_trade("1"), make_trade("2", symbol="GBPUSD")]

        assert filter_trades(trades, TradeFilters()) == trades

    def test_filter_by_symbol_and_direction(self):
        trades = [
            make_trade("1"),
            make_trade("2", symbol="GBPUSD"),
            make_trade("3", direction=Direction.SHORT),
        ]

        result = filter_trades(trades, TradeFilters(symbol="EURUSD", direction=Direction.LONG))

        assert [t.id for t in result] == ["1"]

    def test_filter_by_outcome(self):
        trades = [make_trade("1", pnl=100.0), make_trade("2", pnl=-50.0)]

        result = filter_trades(trades, TradeFilters(outcome=TradeOutcome.LOSS))

        assert [t.id for t in result] == ["2"]

    def test_filter_by_strategy(self):
        trades = [make_trade("1", strategy="ICT"), make_trade("2", strategy="SMC")]

        assert [t.id for t in filter_trades(trades, TradeFilters(strategy="SMC"))] == ["2"]

    def test_date_bounds_inclusive(self):
        """date_from and date_to should both be inclusive."""
        trades = [make_trade(str(day), day=day) for day in range(1, 6)]

        result = filter_trades(
            trades, TradeFilters(date_from=date(2023, 10, 2), date_to=date(2023, 10, 4))
        )

        assert [t.id for t in result] == ["2", "3", "4"]

    def test_none_collection_raises(self):
        with pytest.raises(TypeError):
            filter_trades(None, TradeFilters())
