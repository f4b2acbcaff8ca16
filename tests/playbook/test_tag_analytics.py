# tests/playbook/test_tag_analytics.py
"""Tests for TagAnalytics."""
from datetime import date

import pytest

from src.journal.models import PROFIT_FACTOR_UNDEFINED_SENTINEL, Direction, Trade
from src.playbook.settings import PlaybookSettings
from src.playbook.tag_analytics import (
    TagAnalytics,
    get_all_unique_tags,
    parse_tags_from_string,
)


def make_trade(
    trade_id: str,
    pnl: float | None,
    tags: str | None = None,
    analysis_timeframe: str | None = None,
    entry_timeframe: str | None = None,
    strategy: str | None = None,
    stop_loss: float = 0.0,
) -> Trade:
    """Create a closed long trade for testing."""
    return Trade(
        id=trade_id,
        direction=Direction.LONG,
        entry_price=100.0,
        entry_date=date(2023, 10, 1),
        exit_price=102.0 if pnl is None or pnl >= 0 else 99.0,
        stop_loss=stop_loss,
        pnl=pnl,
        tags=tags,
        analysis_timeframe=analysis_timeframe,
        entry_timeframe=entry_timeframe,
        strategy=strategy,
    )


class TestParseTags:
    """Tests for tag parsing helpers."""

    def test_parse_trims_and_drops_empty(self):
        assert parse_tags_from_string(" FVG , OB,, Liquidity ") == ["FVG", "OB", "Liquidity"]

    def test_parse_none(self):
        assert parse_tags_from_string(None) == []
        assert parse_tags_from_string("") == []

    def test_parse_custom_separator(self):
        assert parse_tags_from_string("FVG;OB", separator=";") == ["FVG", "OB"]

    def test_unique_tags_sorted(self):
        trades = [
            make_trade("1", 100.0, "tag1, tag2"),
            make_trade("2", 100.0, "tag2, tag3"),
            make_trade("3", 100.0, " tag1 ,  tag3 "),
            make_trade("4", 100.0, None),
        ]

        assert get_all_unique_tags(trades) == ["tag1", "tag2", "tag3"]


class TestTagMetrics:
    """Tests for TagAnalytics.calculate_tag_metrics."""

    def test_trade_counts_toward_each_tag(self):
        trades = [
            make_trade("1", 100.0, "tag1, tag2"),
            make_trade("2", -50.0, "tag2, tag3"),
            make_trade("3", 200.0, " tag1 ,  tag3 "),
            make_trade("4", 30.0, None),
        ]

        metrics = {m.tag: m for m in TagAnalytics().calculate_tag_metrics(trades)}

        assert set(metrics) == {"tag1", "tag2", "tag3"}
        tag1 = metrics["tag1"]
        assert tag1.total_trades == 2
        assert tag1.net_pnl == pytest.approx(300.0)
        assert tag1.avg_pnl == pytest.approx(150.0)
        assert tag1.win_rate == 100.0
        assert tag1.profit_factor == PROFIT_FACTOR_UNDEFINED_SENTINEL
        tag2 = metrics["tag2"]
        assert tag2.wins == 1
        assert tag2.losses == 1
        assert tag2.profit_factor == pytest.approx(2.0)

    def test_sorted_by_count_then_tag(self):
        trades = [
            make_trade("1", 10.0, "B"),
            make_trade("2", 10.0, "A"),
            make_trade("3", 10.0, "C, B"),
        ]

        metrics = TagAnalytics().calculate_tag_metrics(trades)

        assert [m.tag for m in metrics] == ["B", "A", "C"]

    def test_duplicate_tag_counted_once_per_trade(self):
        metrics = TagAnalytics().calculate_tag_metrics([make_trade("1", 10.0, "FVG, FVG")])

        assert len(metrics) == 1
        assert metrics[0].total_trades == 1

    def test_breakeven_counted(self):
        trades = [make_trade("1", 0.0, "FVG"), make_trade("2", 100.0, "FVG")]

        metrics = TagAnalytics().calculate_tag_metrics(trades)

        assert metrics[0].breakeven == 1
        assert metrics[0].total_trades == 2
        assert metrics[0].win_rate == 100.0

    def test_avg_rr_from_prices(self):
        trades = [make_trade("1", 100.0, "FVG", stop_loss=99.0)]

        metrics = TagAnalytics().calculate_tag_metrics(trades)

        assert metrics[0].avg_rr == pytest.approx(2.0)

    def test_avg_rr_undefined_without_stops(self):
        metrics = TagAnalytics().calculate_tag_metrics([make_trade("1", 100.0, "FVG")])

        assert metrics[0].avg_rr is None

    def test_custom_separator(self):
        analytics = TagAnalytics(PlaybookSettings(tag_separator="|"))

        metrics = analytics.calculate_tag_metrics([make_trade("1", 10.0, "FVG|OB")])

        assert [m.tag for m in metrics] == ["FVG", "OB"]

    def test_for_strategy(self):
        trades = [
            make_trade("1", 10.0, "FVG", strategy="ICT"),
            make_trade("2", 10.0, "OB", strategy="SMC"),
        ]

        metrics = TagAnalytics().get_tag_metrics_for_strategy(trades, "ICT")

        assert [m.tag for m in metrics] == ["FVG"]


class TestTimeframeMetrics:
    """Tests for TagAnalytics.calculate_timeframe_metrics."""

    def test_grouped_by_analysis_timeframe(self):
        trades = [
            make_trade("1", 100.0, analysis_timeframe="4H"),
            make_trade("2", -50.0, analysis_timeframe="4H"),
            make_trade("3", 100.0, analysis_timeframe="Daily"),
            make_trade("4", 100.0, analysis_timeframe="  "),
        ]

        metrics = TagAnalytics().calculate_timeframe_metrics(trades)

        assert [m.timeframe for m in metrics] == ["4H", "Daily", "undefined"]
        assert metrics[0].win_rate == pytest.approx(50.0)
        assert metrics[0].profit_factor == pytest.approx(2.0)

    def test_entry_timeframe_extractor(self):
        trades = [
            make_trade("1", 100.0, entry_timeframe="M5"),
            make_trade("2", 100.0, entry_timeframe="M15"),
            make_trade("3", 100.0, entry_timeframe="M5"),
        ]

        metrics = TagAnalytics().calculate_timeframe_metrics(
            trades, timeframe_of=lambda t: t.entry_timeframe
        )

        assert [(m.timeframe, m.total_trades) for m in metrics] == [("5m", 2), ("15m", 1)]

    def test_timeframe_spellings_share_a_bucket(self):
        """H4 and 4H should be counted as one timeframe."""
        trades = [
            make_trade("1", 100.0, analysis_timeframe="H4"),
            make_trade("2", -50.0, analysis_timeframe="4H"),
            make_trade("3", 100.0, analysis_timeframe="D1"),
        ]

        metrics = TagAnalytics().calculate_timeframe_metrics(trades)

        assert [(m.timeframe, m.total_trades) for m in metrics] == [("4H", 2), ("Daily", 1)]

    def test_ties_ordered_by_timeframe_rank(self):
        """Equal counts should list the longer timeframe first."""
        trades = [
            make_trade("1", 100.0, analysis_timeframe="1H"),
            make_trade("2", 100.0, analysis_timeframe="Weekly"),
            make_trade("3", 100.0, analysis_timeframe="4H"),
        ]

        metrics = TagAnalytics().calculate_timeframe_metrics(trades)

        assert [m.timeframe for m in metrics] == ["Weekly", "4H", "1H"]
