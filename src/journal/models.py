# src/journal/models.py
"""Data models for the trading journal."""
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any

# Stand-in for "no losses to divide by". A display convention for the
# dashboard, not a derived value.
PROFIT_FACTOR_UNDEFINED_SENTINEL = 999.0
RECOVERY_FACTOR_UNDEFINED_SENTINEL = 999.0
CALMAR_RATIO_UNDEFINED_SENTINEL = 999.0


class Direction(str, Enum):
    """Trade direction enumeration."""

    LONG = "Long"
    SHORT = "Short"


class TradeOutcome(str, Enum):
    """Result classification of a trade."""

    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "breakeven"
    PENDING = "pending"

    @classmethod
    def from_pnl(cls, exit_price: float | None, pnl: float | None) -> "TradeOutcome":
        """Derive the outcome of a trade.

        Args:
            exit_price: Exit price, None while the trade is open.
            pnl: Realized profit or loss.

        Returns:
            PENDING when there is no exit price, otherwise WIN, LOSS or
            BREAKEVEN from the sign of pnl.
        """
        if not exit_price:
            return cls.PENDING

        pnl = pnl or 0.0
        if pnl > 0:
            return cls.WIN
        elif pnl < 0:
            return cls.LOSS
        return cls.BREAKEVEN


# camelCase keys used by the persistence layer
_RECORD_KEYS = {
    "entryPrice": "entry_price",
    "exitPrice": "exit_price",
    "stopLoss": "stop_loss",
    "takeProfit": "take_profit",
    "entryDate": "entry_date",
    "entryTime": "entry_time",
    "exitDate": "exit_date",
    "exitTime": "exit_time",
    "tfAnalise": "analysis_timeframe",
    "tfEntrada": "entry_timeframe",
    "marketCondition": "market_condition",
    "market_condition_v2": "market_condition",
    "pdArray": "pd_array",
    "entryQuality": "entry_quality",
    "rMultiple": "r_multiple",
    "type": "direction",
}


def _parse_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_time(value: Any) -> time | None:
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    return time.fromisoformat(str(value))


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class Trade:
    """A single closed or open trade as supplied by the persistence layer.

    Prices of 0.0 for stop_loss and take_profit mean "not set". When outcome
    is not given it is derived from exit_price and pnl. from_dict ignores a
    stored outcome whenever the record carries both exit_price and pnl.
    """

    id: str
    direction: Direction
    entry_price: float
    entry_date: date

    exit_price: float | None = None
    stop_loss: float = 0.0
    take_profit: float = 0.0
    lot: float = 1.0

    entry_time: time | None = None
    exit_date: date | None = None
    exit_time: time | None = None

    outcome: TradeOutcome | None = None
    pnl: float | None = None
    r_multiple: float | None = None

    # Classification
    symbol: str | None = None
    tags: str | None = None
    strategy: str | None = None
    setup: str | None = None
    analysis_timeframe: str | None = None
    entry_timeframe: str | None = None
    session: str | None = None
    market_condition: str | None = None
    pd_array: str | None = None
    entry_quality: str | None = None

    def __post_init__(self) -> None:
        if self.outcome is None:
            object.__setattr__(
                self, "outcome", TradeOutcome.from_pnl(self.exit_price, self.pnl)
            )

    @property
    def is_closed(self) -> bool:
        """Check if the trade has a final outcome."""
        return self.outcome != TradeOutcome.PENDING

    @property
    def entry_timestamp(self) -> datetime:
        """Entry date combined with entry time (midnight when unknown)."""
        return datetime.combine(self.entry_date, self.entry_time or time.min)

    @property
    def exit_timestamp(self) -> datetime | None:
        """Exit date combined with exit time, None without an exit date."""
        if self.exit_date is None:
            return None
        return datetime.combine(self.exit_date, self.exit_time or time.min)

    @property
    def close_date(self) -> date:
        """Calendar day the trade is booked on (exit date, else entry date)."""
        return self.exit_date or self.entry_date

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Trade":
        """Build a Trade from a persistence-layer record.

        Accepts camelCase or snake_case keys. Unknown keys are ignored. The
        outcome is re-derived from the pnl sign when exit price and pnl are
        both present; the stored outcome only fills in for incomplete records.

        Raises:
            KeyError: If id, type/direction, entryPrice or entryDate is missing.
            ValueError: If a date, time or enum value cannot be parsed.
        """
        record = {_RECORD_KEYS.get(key, key): value for key, value in data.items()}

        exit_price = _optional_float(record.get("exit_price"))
        pnl = _optional_float(record.get("pnl"))
        stored_outcome = record.get("outcome")
        outcome = None
        if stored_outcome and (exit_price is None or pnl is None):
            outcome = TradeOutcome(stored_outcome)

        return cls(
            id=str(record["id"]),
            direction=Direction(record["direction"]),
            entry_price=float(record["entry_price"]),
            entry_date=_parse_date(record["entry_date"]),
            exit_price=exit_price,
            stop_loss=float(record.get("stop_loss") or 0.0),
            take_profit=float(record.get("take_profit") or 0.0),
            lot=float(record.get("lot") or 1.0),
            entry_time=_parse_time(record.get("entry_time")),
            exit_date=_parse_date(record.get("exit_date")),
            exit_time=_parse_time(record.get("exit_time")),
            outcome=outcome,
            pnl=pnl,
            r_multiple=_optional_float(record.get("r_multiple")),
            symbol=record.get("symbol"),
            tags=record.get("tags"),
            strategy=record.get("strategy"),
            setup=record.get("setup"),
            analysis_timeframe=record.get("analysis_timeframe"),
            entry_timeframe=record.get("entry_timeframe"),
            session=record.get("session"),
            market_condition=record.get("market_condition"),
            pd_array=record.get("pd_array"),
            entry_quality=record.get("entry_quality"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary with snake_case keys."""
        data = asdict(self)
        data["direction"] = self.direction.value
        data["outcome"] = self.outcome.value
        for key in ("entry_date", "exit_date", "entry_time", "exit_time"):
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data


def calculate_trade_pnl(trade: Trade, asset_multiplier: float = 1.0) -> float:
    """Profit or loss implied by the prices of a trade.

    Args:
        trade: Trade to price.
        asset_multiplier: Value of one unit of price movement per lot.

    Returns:
        Price difference in the trade direction times lot times multiplier,
        0.0 while the trade has no exit price.
    """
    if not trade.exit_price:
        return 0.0

    if trade.direction == Direction.LONG:
        move = trade.exit_price - trade.entry_price
    else:
        move = trade.entry_price - trade.exit_price
    return move * trade.lot * asset_multiplier


@dataclass
class TradeMetrics:
    """Basic performance metrics of a trade collection.

    win_rate is a percentage over wins + losses only. avg_loss is a
    non-negative magnitude.
    """

    total_trades: int
    wins: int
    losses: int
    breakeven: int
    pending: int

    win_rate: float
    profit_factor: float
    total_pnl: float

    avg_win: float
    avg_loss: float
    best_trade: float
    worst_trade: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class EquityPoint:
    """Account balance after a single trade."""

    trade_id: str
    balance: float
    peak: float
    drawdown: float


@dataclass
class DrawdownResult:
    """Running-peak drawdown over a time-ordered trade sequence."""

    initial_balance: float
    final_balance: float
    peak_balance: float
    max_drawdown: float
    max_drawdown_percent: float
    equity_curve: list[EquityPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class CurrentStreak:
    """The run of identical outcomes at the end of the sequence."""

    type: str  # "win", "loss" or "none"
    count: int


@dataclass
class StreakResult:
    """Consecutive win/loss statistics."""

    current_streak: CurrentStreak
    max_win_streak: int
    max_loss_streak: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class HoldTimeStats:
    """Average time in trade, in minutes."""

    avg_winner_minutes: float
    avg_loser_minutes: float
    avg_all_minutes: float
    winner_count: int
    loser_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class RiskRatios:
    """Risk-adjusted return ratios."""

    sharpe_ratio: float
    calmar_ratio: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class MonthlyMetrics:
    """Performance of a single calendar month."""

    month: str
    trades: int
    wins: int
    losses: int
    pnl: float
    win_rate: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
