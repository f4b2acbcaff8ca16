# src/playbook/__init__.py
"""Playbook module: breakdown trees and tag analytics."""

from .grouping_keys import (
    ANALYSIS_TIMEFRAME,
    CONFLUENCE_CHAIN,
    ENTRY_QUALITY,
    ENTRY_TIMEFRAME,
    HTF_CONTEXT_CHAIN,
    MARKET_CONDITION,
    PD_ARRAY,
    PLAYBOOK_REVIEW_CHAIN,
    SESSION,
    SETUP,
    STRATEGY,
    TAG_COMBINATION,
    TIMEFRAME_ALIGNMENT,
    GroupingKey,
    detected_session_key,
    tag_combination_key,
)
from .hierarchical_aggregator import HierarchicalAggregator
from .models import BaseStats, BreakdownNode, TagMetrics, TimeframeMetrics
from .sessions import TradingSession, detect_session
from .settings import PlaybookSettings
from .tag_analytics import TagAnalytics, get_all_unique_tags, parse_tags_from_string
from .timeframes import (
    AlignmentClassification,
    AlignmentResult,
    AlignmentStatus,
    TimeframeAlignment,
    TimeframeType,
    classify_timeframe,
    normalize_timeframe,
    recommended_entry_timeframe,
    timeframe_alignment,
    timeframe_priority,
    validate_alignment,
)

__all__ = [
    "ANALYSIS_TIMEFRAME",
    "AlignmentClassification",
    "AlignmentResult",
    "AlignmentStatus",
    "BaseStats",
    "BreakdownNode",
    "CONFLUENCE_CHAIN",
    "ENTRY_QUALITY",
    "ENTRY_TIMEFRAME",
    "GroupingKey",
    "HTF_CONTEXT_CHAIN",
    "HierarchicalAggregator",
    "MARKET_CONDITION",
    "PD_ARRAY",
    "PLAYBOOK_REVIEW_CHAIN",
    "PlaybookSettings",
    "SESSION",
    "SETUP",
    "STRATEGY",
    "TAG_COMBINATION",
    "TIMEFRAME_ALIGNMENT",
    "TagAnalytics",
    "TagMetrics",
    "TimeframeAlignment",
    "TimeframeMetrics",
    "TimeframeType",
    "TradingSession",
    "classify_timeframe",
    "detect_session",
    "detected_session_key",
    "get_all_unique_tags",
    "normalize_timeframe",
    "parse_tags_from_string",
    "recommended_entry_timeframe",
    "tag_combination_key",
    "timeframe_alignment",
    "timeframe_priority",
    "validate_alignment",
]
