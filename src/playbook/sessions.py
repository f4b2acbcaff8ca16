# src/playbook/sessions.py
"""Trading-session detection from entry time."""
from datetime import time
from enum import Enum


class TradingSession(str, Enum):
    """Forex trading sessions."""

    TOKYO = "Tokyo"
    LONDON = "London"
    NEW_YORK = "New York"
    LONDON_NY_OVERLAP = "London-NY Overlap"
    SYDNEY = "Sydney"
    OFF_HOURS = "Off-Hours"


def detect_session(entry_time: time | None, timezone_offset_hours: int = -3) -> TradingSession:
    """Detect the session a trade was opened in.

    Sessions in UTC, checked in this order:
        - London-NY Overlap: 12:00 - 16:00
        - New York: 12:00 - 21:00
        - London: 07:00 - 16:00
        - Tokyo: 00:00 - 09:00
        - Sydney: 21:00 - 06:00

    Args:
        entry_time: Local entry time of the trade.
        timezone_offset_hours: Offset of the local time from UTC.

    Returns:
        The detected session, OFF_HOURS without an entry time.
    """
    if entry_time is None:
        return TradingSession.OFF_HOURS

    utc_hour = (entry_time.hour - timezone_offset_hours) % 24

    if 12 <= utc_hour < 16:
        return TradingSession.LONDON_NY_OVERLAP
    if 12 <= utc_hour < 21:
        return TradingSession.NEW_YORK
    if 7 <= utc_hour < 16:
        return TradingSession.LONDON
    if 0 <= utc_hour < 9:
        return TradingSession.TOKYO
    # 21:00 - 24:00; every earlier hour is matched above
    return TradingSession.SYDNEY
