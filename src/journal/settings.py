# src/journal/settings.py
"""Settings for the journal module."""
from pydantic import BaseModel, Field


class JournalSettings(BaseModel):
    """Configuration settings for journal analytics.

    Attributes:
        default_initial_balance: Account balance used when the caller does not
            supply one.
        session_timezone_offset_hours: Offset from UTC of the entry times
            recorded in the journal, used for session detection.
    """

    default_initial_balance: float = Field(default=10_000.0, gt=0)
    session_timezone_offset_hours: int = Field(default=-3, ge=-12, le=14)
