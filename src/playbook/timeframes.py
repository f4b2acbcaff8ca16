# src/playbook/timeframes.py
"""Timeframe normalization, ranking and HTF/LTF alignment."""
import re
from dataclasses import dataclass
from enum import Enum

_TIMEFRAME_ALIASES = {
    "H4": "4H",
    "H1": "1H",
    "M30": "30m",
    "M15": "15m",
    "M5": "5m",
    "M3": "3m",
    "M1": "1m",
    "D": "Daily",
    "D1": "Daily",
    "DAILY": "Daily",
    "W": "Weekly",
    "W1": "Weekly",
    "WEEKLY": "Weekly",
    "MN": "Monthly",
    "MONTHLY": "Monthly",
}

_TIMEFRAME_PRIORITY = {
    "Monthly": 100,
    "Weekly": 90,
    "Daily": 80,
    "4H": 70,
    "1H": 60,
    "30m": 50,
    "15m": 40,
    "5m": 30,
    "3m": 20,
    "1m": 10,
}

# Analysis timeframe -> highest entry timeframe for a top-down read
_RECOMMENDED_ENTRY = {
    "Monthly": "4H",
    "Weekly": "1H",
    "Daily": "15m",
    "4H": "5m",
    "1H": "1m",
    "15m": "1m",
}
_DEFAULT_RECOMMENDED_ENTRY = "5m"


class TimeframeType(str, Enum):
    """Higher (4H and above) or lower timeframe."""

    HTF = "HTF"
    LTF = "LTF"


class AlignmentStatus(str, Enum):
    """How many structure steps separate a context timeframe from the entry."""

    ST_ALIGNED = "ST_ALIGNED"
    ST_RE_ALIGNED = "ST_RE_ALIGNED"
    ST_RE_PLUS_ALERT = "ST_RE_PLUS_ALERT"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    AlignmentStatus.ST_ALIGNED: "ST Aligned",
    AlignmentStatus.ST_RE_ALIGNED: "ST + RE Aligned",
    AlignmentStatus.ST_RE_PLUS_ALERT: "ST + RE + …",
}

_ALIGNMENT_MAP = {
    "Monthly": {"Daily": AlignmentStatus.ST_ALIGNED, "4H": AlignmentStatus.ST_RE_ALIGNED},
    "Weekly": {"Daily": AlignmentStatus.ST_ALIGNED, "4H": AlignmentStatus.ST_RE_ALIGNED},
    "Daily": {"4H": AlignmentStatus.ST_ALIGNED, "1H": AlignmentStatus.ST_RE_ALIGNED},
    "4H": {"1H": AlignmentStatus.ST_ALIGNED, "15m": AlignmentStatus.ST_RE_ALIGNED},
    "1H": {"15m": AlignmentStatus.ST_ALIGNED, "5m": AlignmentStatus.ST_RE_ALIGNED},
    "15m": {"5m": AlignmentStatus.ST_ALIGNED, "1m": AlignmentStatus.ST_RE_ALIGNED},
    "5m": {"1m": AlignmentStatus.ST_ALIGNED},
}


class AlignmentClassification(str, Enum):
    """Verdict on an analysis/entry timeframe pair."""

    TOP_DOWN = "Top-Down Analysis"
    LTF_ONLY = "LTF Only"
    INVALID = "Invalid"
    SAME_TF = "Same TF"


@dataclass(frozen=True)
class TimeframeAlignment:
    """Alignment of a PD array timeframe with the entry timeframe."""

    status: AlignmentStatus
    label: str
    is_warning: bool


@dataclass(frozen=True)
class AlignmentResult:
    """Outcome of validating an analysis/entry timeframe pair.

    Attributes:
        valid: Entry timeframe is below the analysis timeframe and at or
            below the recommended entry timeframe.
        classification: Verdict on the pair.
        message: Human-readable explanation.
        recommended_entry_timeframe: Highest recommended entry timeframe for
            the analysis timeframe, empty when no analysis timeframe is set.
    """

    valid: bool
    classification: AlignmentClassification
    message: str
    recommended_entry_timeframe: str


def normalize_timeframe(timeframe: str | None) -> str | None:
    """Map timeframe spellings (H4, M15, D1, ...) to one canonical form.

    Unknown values are returned trimmed but otherwise unchanged.
    """
    if timeframe is None:
        return None

    trimmed = timeframe.strip()
    upper = trimmed.upper()
    if upper in _TIMEFRAME_ALIASES:
        return _TIMEFRAME_ALIASES[upper]
    if re.fullmatch(r"\d+H", upper):
        return upper
    if re.fullmatch(r"\d+M", upper):
        return upper[:-1] + "m"
    return trimmed


def timeframe_priority(timeframe: str | None) -> int:
    """Rank a timeframe; longer timeframes rank higher, unknown ones 0."""
    return _TIMEFRAME_PRIORITY.get(normalize_timeframe(timeframe) or "", 0)


def classify_timeframe(timeframe: str | None) -> TimeframeType:
    """4H and above is HTF; everything else, unknown included, is LTF."""
    if timeframe_priority(timeframe) >= _TIMEFRAME_PRIORITY["4H"]:
        return TimeframeType.HTF
    return TimeframeType.LTF


def recommended_entry_timeframe(analysis_timeframe: str | None) -> str:
    """Highest entry timeframe recommended for an analysis timeframe."""
    return _RECOMMENDED_ENTRY.get(
        normalize_timeframe(analysis_timeframe) or "", _DEFAULT_RECOMMENDED_ENTRY
    )


def timeframe_alignment(pd_array_timeframe: str | None, entry_timeframe: str | None) -> TimeframeAlignment:
    """Alignment status of an entry against its PD array timeframe.

    Pairs missing from the alignment table are flagged with a warning.
    """
    context = _ALIGNMENT_MAP.get(normalize_timeframe(pd_array_timeframe) or "", {})
    status = context.get(normalize_timeframe(entry_timeframe) or "", AlignmentStatus.ST_RE_PLUS_ALERT)
    return TimeframeAlignment(
        status=status,
        label=status.label,
        is_warning=status == AlignmentStatus.ST_RE_PLUS_ALERT,
    )


def validate_alignment(analysis_timeframe: str | None, entry_timeframe: str | None) -> AlignmentResult:
    """Check that the entry timeframe suits a top-down read of the analysis timeframe."""
    if not analysis_timeframe or not entry_timeframe:
        return AlignmentResult(
            valid=False,
            classification=AlignmentClassification.INVALID,
            message="Timeframes not defined",
            recommended_entry_timeframe="",
        )

    analysis = normalize_timeframe(analysis_timeframe)
    entry = normalize_timeframe(entry_timeframe)
    analysis_rank = timeframe_priority(analysis)
    entry_rank = timeframe_priority(entry)
    recommended = recommended_entry_timeframe(analysis)

    if analysis_rank == 0 or entry_rank == 0:
        return AlignmentResult(
            valid=False,
            classification=AlignmentClassification.INVALID,
            message="Timeframe not recognized",
            recommended_entry_timeframe=recommended,
        )

    if analysis_rank == entry_rank:
        return AlignmentResult(
            valid=False,
            classification=AlignmentClassification.SAME_TF,
            message="Use different timeframes for analysis and entry",
            recommended_entry_timeframe=recommended,
        )

    if entry_rank > analysis_rank:
        return AlignmentResult(
            valid=False,
            classification=AlignmentClassification.INVALID,
            message=f"Entry TF must be lower than {analysis}",
            recommended_entry_timeframe=recommended,
        )

    if entry_rank <= timeframe_priority(recommended):
        return AlignmentResult(
            valid=True,
            classification=AlignmentClassification.TOP_DOWN,
            message=f"Aligned: {analysis} -> {entry}",
            recommended_entry_timeframe=recommended,
        )

    return AlignmentResult(
        valid=False,
        classification=AlignmentClassification.LTF_ONLY,
        message=f"Entry TF too high. Maximum: {recommended}",
        recommended_entry_timeframe=recommended,
    )
