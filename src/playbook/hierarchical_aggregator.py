# src/playbook/hierarchical_aggregator.py
"""Recursive multi-key breakdown of trades for playbook review."""
import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from src.journal.metrics_calculator import require_trades
from src.journal.models import Trade
from src.playbook.grouping_keys import GroupingKey, PLAYBOOK_REVIEW_CHAIN
from src.playbook.models import BreakdownNode
from src.playbook.settings import PlaybookSettings
from src.playbook.stats import build_base_stats

logger = logging.getLogger(__name__)


class HierarchicalAggregator:
    """Builds breakdown trees by grouping trades on an ordered key chain.

    Each level groups the trades of its parent by the level's key; trades
    with no value go to the undefined bucket so no trade is dropped. Siblings
    are ordered by total_trades descending, then by value ascending.

    Attributes:
        settings: Playbook settings (undefined bucket label).
    """

    def __init__(self, settings: PlaybookSettings | None = None) -> None:
        """Initialize the aggregator.

        Args:
            settings: Playbook settings; defaults when None.
        """
        self._settings = settings or PlaybookSettings()

    def build(
        self,
        trades: Iterable[Trade],
        keys: Sequence[GroupingKey] = PLAYBOOK_REVIEW_CHAIN,
    ) -> list[BreakdownNode]:
        """Build a breakdown tree.

        Args:
            trades: Trade collection in any order.
            keys: Grouping chain, outermost level first.

        Returns:
            Top-level nodes. Empty for an empty collection or an empty chain.
        """
        trades = require_trades(trades)
        keys = list(keys)
        if not keys:
            return []

        tree = list(self._build_level(trades, keys))
        logger.debug(
            f"Built breakdown over {len(trades)} trades: "
            f"{' -> '.join(k.name for k in keys)}, {len(tree)} top-level groups"
        )
        return tree

    def _build_level(
        self, trades: list[Trade], keys: list[GroupingKey]
    ) -> tuple[BreakdownNode, ...]:
        key, rest = keys[0], keys[1:]

        groups: dict[str, list[Trade]] = defaultdict(list)
        for trade in trades:
            groups[self._group_value(key, trade)].append(trade)

        nodes = [
            BreakdownNode(
                dimension=key.name,
                value=value,
                stats=build_base_stats(group),
                children=self._build_level(group, rest) if rest else (),
            )
            for value, group in groups.items()
        ]
        nodes.sort(key=lambda n: (-n.total_trades, n.value))
        return tuple(nodes)

    def _group_value(self, key: GroupingKey, trade: Trade) -> str:
        value = key.extract(trade)
        if value is None:
            return self._settings.undefined_label
        value = str(value).strip()
        return value or self._settings.undefined_label
