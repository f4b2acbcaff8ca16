# src/analytics/journal_analytics.py
"""Facade running every analytics component over one trade collection."""
import logging
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from src.analytics.models import PerformanceReport
from src.journal.drawdown_tracker import DrawdownTracker
from src.journal.metrics_calculator import MetricsCalculator, require_trades
from src.journal.models import Trade
from src.journal.monthly_report import MonthlyReport
from src.journal.risk_ratio_calculator import RiskRatioCalculator
from src.journal.settings import JournalSettings
from src.journal.streak_analyzer import StreakAnalyzer
from src.journal.trade_filters import TradeFilters, filter_trades
from src.playbook.grouping_keys import (
    ANALYSIS_TIMEFRAME,
    ENTRY_QUALITY,
    ENTRY_TIMEFRAME,
    MARKET_CONDITION,
    GroupingKey,
    detected_session_key,
    tag_combination_key,
)
from src.playbook.hierarchical_aggregator import HierarchicalAggregator
from src.playbook.settings import PlaybookSettings
from src.playbook.tag_analytics import TagAnalytics
from src.scoring.settings import WolfScoreSettings
from src.scoring.wolf_score import WolfScoreEngine

logger = logging.getLogger(__name__)


class JournalAnalytics:
    """Orchestrates the analytics components into a single report.

    Coordinates MetricsCalculator, DrawdownTracker, StreakAnalyzer,
    RiskRatioCalculator, WolfScoreEngine, MonthlyReport, TagAnalytics and
    HierarchicalAggregator. Holds configuration only, so one instance can
    serve any number of accounts.
    """

    def __init__(
        self,
        journal_settings: JournalSettings | None = None,
        scoring_settings: WolfScoreSettings | None = None,
        playbook_settings: PlaybookSettings | None = None,
    ) -> None:
        """Initialize the analytics with all components.

        Args:
            journal_settings: Journal settings (default balance, timezone).
            scoring_settings: Wolf Score weights and curves.
            playbook_settings: Breakdown and tag settings.
        """
        self._journal_settings = journal_settings or JournalSettings()
        self._playbook_settings = playbook_settings or PlaybookSettings()

        self._metrics_calculator = MetricsCalculator()
        self._drawdown_tracker = DrawdownTracker()
        self._streak_analyzer = StreakAnalyzer()
        self._ratio_calculator = RiskRatioCalculator(self._drawdown_tracker)
        self._wolf_score_engine = WolfScoreEngine(
            scoring_settings, self._metrics_calculator, self._drawdown_tracker
        )
        self._monthly_report = MonthlyReport()
        self._tag_analytics = TagAnalytics(self._playbook_settings)
        self._aggregator = HierarchicalAggregator(self._playbook_settings)

    def playbook_chain(self) -> tuple[GroupingKey, ...]:
        """HTF -> Session -> Condition -> Tags -> LTF -> Quality.

        The session falls back to detection from the entry time.
        """
        return (
            ANALYSIS_TIMEFRAME,
            detected_session_key(self._journal_settings.session_timezone_offset_hours),
            MARKET_CONDITION,
            tag_combination_key(self._playbook_settings),
            ENTRY_TIMEFRAME,
            ENTRY_QUALITY,
        )

    def build_report(
        self,
        trades: Iterable[Trade],
        initial_balance: float | None = None,
        playbook_keys: Sequence[GroupingKey] | None = None,
    ) -> PerformanceReport:
        """Run every component over the trades.

        Args:
            trades: Trade collection in any order.
            initial_balance: Account balance before the first trade; the
                configured default when None.
            playbook_keys: Grouping chain of the breakdown tree; the playbook
                review chain when None.

        Returns:
            PerformanceReport with all results.

        Raises:
            ValueError: If initial_balance is not positive.
        """
        trades = require_trades(trades)
        if initial_balance is None:
            initial_balance = self._journal_settings.default_initial_balance

        logger.debug(f"Building report for {len(trades)} trades, balance {initial_balance}")

        metrics = self._metrics_calculator.calculate(trades)
        drawdown = self._drawdown_tracker.calculate(trades, initial_balance)
        wolf_score = self._wolf_score_engine.calculate(
            trades, initial_balance, metrics=metrics, max_drawdown=drawdown.max_drawdown
        )

        report = PerformanceReport(
            initial_balance=initial_balance,
            metrics=metrics,
            drawdown=drawdown,
            streaks=self._streak_analyzer.analyze(trades),
            ratios=self._ratio_calculator.calculate(trades, initial_balance),
            hold_times=self._ratio_calculator.hold_times(trades),
            wolf_score=wolf_score,
            monthly=self._monthly_report.calculate(trades),
            tags=self._tag_analytics.calculate_tag_metrics(trades),
            playbook=self._aggregator.build(trades, playbook_keys or self.playbook_chain()),
        )

        logger.info(
            f"Report: {metrics.total_trades} trades, win rate {metrics.win_rate:.1f}%, "
            f"Wolf Score {wolf_score.score} ({wolf_score.grade.value})"
        )
        return report

    def get_period_report(
        self,
        trades: Iterable[Trade],
        end_date: date,
        days: int = 7,
        initial_balance: float | None = None,
    ) -> PerformanceReport:
        """Report over the trades entered in the `days` days ending on end_date.

        Raises:
            ValueError: If days is not positive or initial_balance is not positive.
        """
        if days < 1:
            raise ValueError(f"days must be at least 1, got {days}")

        start_date = end_date - timedelta(days=days - 1)
        period_trades = filter_trades(trades, TradeFilters(date_from=start_date, date_to=end_date))
        return self.build_report(period_trades, initial_balance)
