# src/journal/__init__.py
"""Journal module: trade records and performance calculators."""

from .drawdown_tracker import DrawdownTracker
from .metrics_calculator import MetricsCalculator
from .models import (
    CALMAR_RATIO_UNDEFINED_SENTINEL,
    PROFIT_FACTOR_UNDEFINED_SENTINEL,
    RECOVERY_FACTOR_UNDEFINED_SENTINEL,
    Direction,
    DrawdownResult,
    HoldTimeStats,
    MonthlyMetrics,
    RiskRatios,
    StreakResult,
    Trade,
    TradeMetrics,
    TradeOutcome,
    calculate_trade_pnl,
)
from .monthly_report import MonthlyReport
from .r_multiple import calculate_r_multiple, format_r_multiple
from .risk_ratio_calculator import RiskRatioCalculator
from .settings import JournalSettings
from .streak_analyzer import StreakAnalyzer
from .trade_filters import TradeFilters, filter_trades

__all__ = [
    "CALMAR_RATIO_UNDEFINED_SENTINEL",
    "Direction",
    "DrawdownResult",
    "DrawdownTracker",
    "HoldTimeStats",
    "JournalSettings",
    "MetricsCalculator",
    "MonthlyMetrics",
    "MonthlyReport",
    "PROFIT_FACTOR_UNDEFINED_SENTINEL",
    "RECOVERY_FACTOR_UNDEFINED_SENTINEL",
    "RiskRatioCalculator",
    "RiskRatios",
    "StreakAnalyzer",
    "StreakResult",
    "Trade",
    "TradeFilters",
    "TradeMetrics",
    "TradeOutcome",
    "calculate_r_multiple",
    "calculate_trade_pnl",
    "filter_trades",
    "format_r_multiple",
]
