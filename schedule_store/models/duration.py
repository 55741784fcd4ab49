"""Duration value type — a magnitude paired with a time unit."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from schedule_store.errors import UnitParseError


class TimeUnit(str, Enum):
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    PERCENT = "percent"
    ELAPSED_MINUTES = "elapsed_minutes"
    ELAPSED_HOURS = "elapsed_hours"
    ELAPSED_DAYS = "elapsed_days"
    ELAPSED_WEEKS = "elapsed_weeks"
    ELAPSED_MONTHS = "elapsed_months"
    ELAPSED_YEARS = "elapsed_years"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_label(cls, label: str) -> "TimeUnit":
        """Case-insensitive lookup by value, name or short symbol."""
        key = label.strip().lower()
        unit = _BY_LABEL.get(key)
        if unit is None:
            raise UnitParseError(label)
        return unit


_SYMBOLS = {
    TimeUnit.MINUTES: "m",
    TimeUnit.HOURS: "h",
    TimeUnit.DAYS: "d",
    TimeUnit.WEEKS: "w",
    TimeUnit.MONTHS: "mo",
    TimeUnit.YEARS: "y",
    TimeUnit.PERCENT: "%",
    TimeUnit.ELAPSED_MINUTES: "em",
    TimeUnit.ELAPSED_HOURS: "eh",
    TimeUnit.ELAPSED_DAYS: "ed",
    TimeUnit.ELAPSED_WEEKS: "ew",
    TimeUnit.ELAPSED_MONTHS: "emo",
    TimeUnit.ELAPSED_YEARS: "ey",
}

_BY_LABEL: dict[str, TimeUnit] = {}
for _unit in TimeUnit:
    _BY_LABEL[_unit.value] = _unit
    _BY_LABEL[_unit.name.lower()] = _unit
    _BY_LABEL[_SYMBOLS[_unit]] = _unit
# singular forms: "day", "elapsed_week", ...
for _unit in TimeUnit:
    if _unit.value.endswith("s"):
        _BY_LABEL.setdefault(_unit.value[:-1], _unit)

_TEXT_RE = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)\s*([A-Za-z_%]+)\s*$")


@dataclass(frozen=True)
class Duration:
    """Immutable duration, e.g. ``Duration(5, TimeUnit.DAYS)``."""

    magnitude: float
    unit: TimeUnit

    def __post_init__(self) -> None:
        magnitude = float(self.magnitude)
        if not math.isfinite(magnitude):
            raise ValueError(f"Duration magnitude must be finite, got {magnitude!r}")
        object.__setattr__(self, "magnitude", magnitude)
        if not isinstance(self.unit, TimeUnit):
            object.__setattr__(self, "unit", TimeUnit.from_label(str(self.unit)))

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.symbol}"

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse ``"5.0d"`` / ``"10 days"`` style text."""
        match = _TEXT_RE.match(text or "")
        if not match:
            raise UnitParseError(text, f"Unparseable duration: {text!r}")
        return cls(float(match.group(1)), TimeUnit.from_label(match.group(2)))
