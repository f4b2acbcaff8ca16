# src/playbook/tag_analytics.py
"""Per-tag and per-timeframe performance metrics."""
import logging
from collections import defaultdict
from collections.abc import Callable, Iterable

from src.journal.metrics_calculator import profit_factor, require_trades
from src.journal.models import Trade, TradeOutcome
from src.playbook.models import TagMetrics, TimeframeMetrics
from src.playbook.settings import PlaybookSettings
from src.playbook.stats import build_base_stats, gross_profit_and_loss
from src.playbook.timeframes import normalize_timeframe, timeframe_priority

logger = logging.getLogger(__name__)


def parse_tags_from_string(tags_string: str | None, separator: str = ",") -> list[str]:
    """Split a free-text tag list into trimmed, non-empty tags.

    Args:
        tags_string: Tags such as "FVG, OB , Liquidity". None yields [].
        separator: Tag separator.

    Returns:
        Tags in their original order.
    """
    if not tags_string:
        return []
    return [tag.strip() for tag in tags_string.split(separator) if tag.strip()]


def get_all_unique_tags(trades: Iterable[Trade], separator: str = ",") -> list[str]:
    """Union of the tags of all trades, sorted ascending."""
    unique: set[str] = set()
    for trade in require_trades(trades):
        unique.update(parse_tags_from_string(trade.tags, separator))
    return sorted(unique)


class TagAnalytics:
    """Calculates metrics per confluence tag and per timeframe."""

    def __init__(self, settings: PlaybookSettings | None = None) -> None:
        """Initialize tag analytics.

        Args:
            settings: Playbook settings; defaults when None.
        """
        self._settings = settings or PlaybookSettings()

    def calculate_tag_metrics(self, trades: Iterable[Trade]) -> list[TagMetrics]:
        """Calculate metrics for every tag used by at least one trade.

        A trade with several tags counts toward each of them.

        Args:
            trades: Trade collection.

        Returns:
            TagMetrics sorted by total_trades descending, then tag ascending.
        """
        groups: dict[str, list[Trade]] = defaultdict(list)
        for trade in require_trades(trades):
            for tag in dict.fromkeys(parse_tags_from_string(trade.tags, self._settings.tag_separator)):
                groups[tag].append(trade)

        metrics: list[TagMetrics] = []
        for tag, group in groups.items():
            stats = build_base_stats(group)
            gross_profit, gross_loss = gross_profit_and_loss(group)
            metrics.append(
                TagMetrics(
                    tag=tag,
                    total_trades=stats.total_trades,
                    wins=stats.wins,
                    losses=stats.losses,
                    breakeven=sum(1 for t in group if t.outcome == TradeOutcome.BREAKEVEN),
                    win_rate=stats.win_rate,
                    net_pnl=stats.pnl,
                    avg_pnl=stats.pnl / stats.total_trades,
                    profit_factor=profit_factor(gross_profit, gross_loss),
                    avg_rr=stats.avg_rr,
                )
            )

        logger.debug(f"Calculated metrics for {len(metrics)} tags")
        return sorted(metrics, key=lambda m: (-m.total_trades, m.tag))

    def get_tag_metrics_for_strategy(
        self, trades: Iterable[Trade], strategy: str
    ) -> list[TagMetrics]:
        """Tag metrics restricted to the trades of one strategy."""
        return self.calculate_tag_metrics(
            t for t in require_trades(trades) if t.strategy == strategy
        )

    def calculate_timeframe_metrics(
        self,
        trades: Iterable[Trade],
        timeframe_of: Callable[[Trade], str | None] = lambda t: t.analysis_timeframe,
    ) -> list[TimeframeMetrics]:
        """Calculate metrics per timeframe value.

        Args:
            trades: Trade collection.
            timeframe_of: Extracts the timeframe to group by. Defaults to the
                analysis timeframe; pass `lambda t: t.entry_timeframe` for
                the entry timeframe.

        Returns:
            TimeframeMetrics keyed by normalized timeframe ("H4" and "4H" share
            a bucket), sorted by total_trades descending, then longer
            timeframes first, then name. Trades without a timeframe share the
            undefined bucket.
        """
        groups: dict[str, list[Trade]] = defaultdict(list)
        for trade in require_trades(trades):
            timeframe = normalize_timeframe(timeframe_of(trade)) or self._settings.undefined_label
            groups[timeframe].append(trade)

        metrics: list[TimeframeMetrics] = []
        for timeframe, group in groups.items():
            stats = build_base_stats(group)
            gross_profit, gross_loss = gross_profit_and_loss(group)
            metrics.append(
                TimeframeMetrics(
                    timeframe=timeframe,
                    total_trades=stats.total_trades,
                    wins=stats.wins,
                    losses=stats.losses,
                    win_rate=stats.win_rate,
                    net_pnl=stats.pnl,
                    profit_factor=profit_factor(gross_profit, gross_loss),
                    avg_rr=stats.avg_rr,
                )
            )

        return sorted(
            metrics,
            key=lambda m: (-m.total_trades, -timeframe_priority(m.timeframe), m.timeframe),
        )
