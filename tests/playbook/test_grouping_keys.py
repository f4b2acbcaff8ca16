# tests/playbook/test_grouping_keys.py
"""Tests for grouping keys."""
from datetime import date, time

import src.playbook as playbook
from src.journal.models import Direction, Trade
from src.playbook.grouping_keys import (
    ANALYSIS_TIMEFRAME,
    ENTRY_TIMEFRAME,
    PLAYBOOK_REVIEW_CHAIN,
    SETUP,
    STRATEGY,
    TIMEFRAME_ALIGNMENT,
    detected_session_key,
    tag_combination,
    tag_combination_key,
)
from src.playbook.settings import PlaybookSettings


def make_trade(**fields) -> Trade:
    """Create an open trade with the given classification fields."""
    return Trade(
        id="1",
        direction=Direction.LONG,
        entry_price=1.05,
        entry_date=date(2023, 10, 1),
        **fields,
    )


class TestTagCombination:
    """Tests for the tag combination signature."""

    def test_sorted_and_deduplicated(self):
        trade = make_trade(tags="OB, FVG, OB")

        assert tag_combination(trade) == "FVG + OB"

    def test_order_independent(self):
        assert tag_combination(make_trade(tags="A, B")) == tag_combination(make_trade(tags="B,A"))

    def test_no_tags(self):
        assert tag_combination(make_trade(tags=None)) is None
        assert tag_combination(make_trade(tags=" , ")) is None

    def test_key_uses_settings(self):
        key = tag_combination_key(PlaybookSettings(tag_separator=";", tag_combo_joiner="&"))

        assert key.name == "tag_combination"
        assert key.extract(make_trade(tags="OB;FVG")) == "FVG&OB"


class TestDetectedSessionKey:
    """Tests for detected_session_key."""

    def test_recorded_session_preferred(self):
        key = detected_session_key()

        assert key.extract(make_trade(session="Asia", entry_time=time(10, 0))) == "Asia"

    def test_detected_from_entry_time(self):
        key = detected_session_key(timezone_offset_hours=0)

        assert key.extract(make_trade(entry_time=time(8, 0))) == "London"

    def test_no_time_no_session(self):
        assert detected_session_key().extract(make_trade()) is None


class TestChains:
    """Tests for the predefined key chains."""

    def test_field_key(self):
        assert ANALYSIS_TIMEFRAME.extract(make_trade(analysis_timeframe="4H")) == "4H"

    def test_timeframe_keys_normalize(self):
        """Different spellings of a timeframe should land in one group."""
        assert ANALYSIS_TIMEFRAME.extract(make_trade(analysis_timeframe="H4")) == "4H"
        assert ENTRY_TIMEFRAME.extract(make_trade(entry_timeframe="M15")) == "15m"
        assert ENTRY_TIMEFRAME.extract(make_trade()) is None

    def test_strategy_and_setup_keys(self):
        trade = make_trade(strategy="ICT", setup="Silver Bullet")

        assert STRATEGY.name == "strategy"
        assert STRATEGY.extract(trade) == "ICT"
        assert SETUP.name == "setup"
        assert SETUP.extract(trade) == "Silver Bullet"
        assert STRATEGY.extract(make_trade()) is None

    def test_playbook_review_chain_order(self):
        assert [k.name for k in PLAYBOOK_REVIEW_CHAIN] == [
            "analysis_timeframe",
            "session",
            "market_condition",
            "tag_combination",
            "entry_timeframe",
            "entry_quality",
        ]


class TestTimeframeAlignmentKey:
    """Tests for the timeframe alignment dimension."""

    def test_aligned_pair(self):
        trade = make_trade(analysis_timeframe="Daily", entry_timeframe="H4")

        assert TIMEFRAME_ALIGNMENT.extract(trade) == "ST Aligned"

    def test_far_pair_flagged(self):
        trade = make_trade(analysis_timeframe="Daily", entry_timeframe="M5")

        assert TIMEFRAME_ALIGNMENT.extract(trade) == "ST + RE + …"

    def test_missing_timeframe(self):
        assert TIMEFRAME_ALIGNMENT.extract(make_trade(analysis_timeframe="Daily")) is None


class TestPackageExports:
    """Tests for the names re-exported by src.playbook."""

    def test_keys_and_timeframe_helpers_exported(self):
        assert playbook.STRATEGY is STRATEGY
        assert playbook.SETUP is SETUP
        assert playbook.TIMEFRAME_ALIGNMENT is TIMEFRAME_ALIGNMENT
        for name in ("STRATEGY", "SETUP", "validate_alignment", "normalize_timeframe"):
            assert name in playbook.__all__
