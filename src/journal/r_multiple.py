# src/journal/r_multiple.py
"""Risk-multiple (R) calculation."""
from src.journal.models import Direction, Trade


def calculate_r_multiple(
    entry_price: float | None,
    exit_price: float | None,
    stop_loss: float | None,
    direction: Direction,
) -> float | None:
    """Calculate the profit of a trade in units of its initial risk.

    Args:
        entry_price: Entry price.
        exit_price: Exit price, None while the trade is open.
        stop_loss: Initial stop. 0.0 means no stop was set.
        direction: LONG or SHORT.

    Returns:
        R rounded to 2 decimals, or None when a price is missing or the stop
        sits on the wrong side of the entry (risk <= 0).
    """
    if not entry_price or not exit_price or not stop_loss:
        return None

    if direction == Direction.LONG:
        risk = entry_price - stop_loss
        profit = exit_price - entry_price
    else:
        risk = stop_loss - entry_price
        profit = entry_price - exit_price

    if risk <= 0:
        return None

    return round(profit / risk, 2)


def trade_r_multiple(trade: Trade) -> float | None:
    """R of a trade: the stored value when present, else computed from prices."""
    if trade.r_multiple is not None:
        return trade.r_multiple
    return calculate_r_multiple(
        trade.entry_price, trade.exit_price, trade.stop_loss, trade.direction
    )


def format_r_multiple(r_multiple: float | None) -> str:
    """Format R for display, e.g. "+1.50R" or "-" when undefined."""
    if r_multiple is None:
        return "-"
    sign = "+" if r_multiple >= 0 else ""
    return f"{sign}{r_multiple:.2f}R"
