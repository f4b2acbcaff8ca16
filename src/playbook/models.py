# src/playbook/models.py
"""Data models for playbook breakdowns."""
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class BaseStats:
    """Aggregate shape computed for every group of trades.

    Attributes:
        wins: Trades with outcome win.
        losses: Trades with outcome loss.
        pnl: Sum of pnl of all trades in the group.
        win_rate: wins / (wins + losses) as a percentage, 0 when undecided.
        avg_rr: Mean R-multiple of trades with a defined R, None if none.
        total_trades: Every trade in the group, whatever its outcome.
    """

    wins: int
    losses: int
    pnl: float
    win_rate: float
    avg_rr: float | None
    total_trades: int


@dataclass(frozen=True)
class BreakdownNode:
    """One group at one level of a breakdown tree.

    Attributes:
        dimension: Name of the grouping key of this level.
        value: Key value shared by every trade in the group.
        stats: Aggregates of the group.
        children: Groups at the next level, largest first.
    """

    dimension: str
    value: str
    stats: BaseStats
    children: tuple["BreakdownNode", ...] = field(default_factory=tuple)

    @property
    def total_trades(self) -> int:
        return self.stats.total_trades

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def leaves(self) -> list["BreakdownNode"]:
        """All leaf nodes under (and including) this node, depth first."""
        if self.is_leaf:
            return [self]
        return [leaf for child in self.children for leaf in child.leaves()]

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension,
            "value": self.value,
            **asdict(self.stats),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class TagMetrics:
    """Performance of trades carrying one confluence tag."""

    tag: str
    total_trades: int
    wins: int
    losses: int
    breakeven: int
    win_rate: float
    net_pnl: float
    avg_pnl: float
    profit_factor: float
    avg_rr: float | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TimeframeMetrics:
    """Performance of trades sharing one timeframe value."""

    timeframe: str
    total_trades: int
    wins: int
    losses: int
    win_rate: float
    net_pnl: float
    profit_factor: float
    avg_rr: float | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
