# src/playbook/grouping_keys.py
"""Grouping dimensions for breakdown trees."""
from collections.abc import Callable
from dataclasses import dataclass

from src.journal.models import Trade
from src.playbook.sessions import detect_session
from src.playbook.settings import PlaybookSettings
from src.playbook.tag_analytics import parse_tags_from_string
from src.playbook.timeframes import normalize_timeframe, timeframe_alignment


@dataclass(frozen=True)
class GroupingKey:
    """A named dimension that extracts a group value from a trade.

    The extractor returns None (or an empty string) when the trade has no
    value for the dimension.
    """

    name: str
    extract: Callable[[Trade], str | None]


def tag_combination(trade: Trade, joiner: str = " + ", separator: str = ",") -> str | None:
    """Signature of a trade's full tag set: unique tags sorted and joined."""
    tags = sorted(set(parse_tags_from_string(trade.tags, separator)))
    return joiner.join(tags) if tags else None


def tag_combination_key(settings: PlaybookSettings) -> GroupingKey:
    """Tag-combination dimension using the configured separator and joiner."""
    return GroupingKey(
        "tag_combination",
        lambda t: tag_combination(t, settings.tag_combo_joiner, settings.tag_separator),
    )


def detected_session_key(timezone_offset_hours: int = -3) -> GroupingKey:
    """Session dimension derived from the entry time when none is recorded."""

    def _extract(trade: Trade) -> str | None:
        if trade.session:
            return trade.session
        if trade.entry_time is None:
            return None
        return detect_session(trade.entry_time, timezone_offset_hours).value

    return GroupingKey("session", _extract)


def alignment_label(trade: Trade) -> str | None:
    """Alignment label of the entry against the analysis timeframe."""
    if not trade.analysis_timeframe or not trade.entry_timeframe:
        return None
    return timeframe_alignment(trade.analysis_timeframe, trade.entry_timeframe).label


ANALYSIS_TIMEFRAME = GroupingKey(
    "analysis_timeframe", lambda t: normalize_timeframe(t.analysis_timeframe)
)
ENTRY_TIMEFRAME = GroupingKey("entry_timeframe", lambda t: normalize_timeframe(t.entry_timeframe))
TIMEFRAME_ALIGNMENT = GroupingKey("timeframe_alignment", alignment_label)
SESSION = GroupingKey("session", lambda t: t.session)
MARKET_CONDITION = GroupingKey("market_condition", lambda t: t.market_condition)
PD_ARRAY = GroupingKey("pd_array", lambda t: t.pd_array)
TAG_COMBINATION = GroupingKey("tag_combination", tag_combination)
ENTRY_QUALITY = GroupingKey("entry_quality", lambda t: t.entry_quality)
STRATEGY = GroupingKey("strategy", lambda t: t.strategy)
SETUP = GroupingKey("setup", lambda t: t.setup)

# HTF -> Session -> Condition -> Tags -> LTF -> Quality
PLAYBOOK_REVIEW_CHAIN = (
    ANALYSIS_TIMEFRAME,
    SESSION,
    MARKET_CONDITION,
    TAG_COMBINATION,
    ENTRY_TIMEFRAME,
    ENTRY_QUALITY,
)

# HTF -> Condition -> PD array -> Session -> LTF
HTF_CONTEXT_CHAIN = (
    ANALYSIS_TIMEFRAME,
    MARKET_CONDITION,
    PD_ARRAY,
    SESSION,
    ENTRY_TIMEFRAME,
)

# HTF -> Tags -> LTF
CONFLUENCE_CHAIN = (
    ANALYSIS_TIMEFRAME,
    TAG_COMBINATION,
    ENTRY_TIMEFRAME,
)
