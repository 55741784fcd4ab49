"""Pure-function duration codec between ``Duration`` and its column pair.

A duration is stored as ``(duration_value, duration_units)``.  Both columns
are set or both are NULL.  No side effects.
"""

from __future__ import annotations

import math
from typing import Optional

from schedule_store.errors import UnitParseError
from schedule_store.models.duration import Duration, TimeUnit


def encode(duration: Optional[Duration]) -> tuple[Optional[float], Optional[str]]:
    """Map ``Duration`` → (value, unit label); ``None`` → (None, None)."""
    if duration is None:
        return (None, None)
    return (float(duration.magnitude), duration.unit.value)


def decode(value: Optional[float], unit: Optional[str]) -> Optional[Duration]:
    """Map (value, unit label) → ``Duration``.

    A value without a unit is not a duration and yields ``None``.  A unit
    without a value, a non-numeric or non-finite value, or an unknown unit
    label raises ``UnitParseError``.
    """
    if unit is None:
        return None
    time_unit = parse_unit(unit)
    if value is None:
        raise UnitParseError(unit, f"Duration unit {unit!r} has no value")
    try:
        magnitude = float(value)
    except (TypeError, ValueError) as e:
        raise UnitParseError(value, f"Duration value {value!r} is not numeric") from e
    if not math.isfinite(magnitude):
        raise UnitParseError(value, f"Duration value {value!r} is not finite")
    return Duration(magnitude, time_unit)


def parse_unit(label: str) -> TimeUnit:
    if not isinstance(label, str):
        raise UnitParseError(label)
    return TimeUnit.from_label(label)


# -- single-column text form ("5.0d") ------------------------------------------

def format_text(duration: Optional[Duration]) -> Optional[str]:
    return str(duration) if duration is not None else None


def parse_text(text: Optional[str]) -> Optional[Duration]:
    if text is None or not text.strip():
        return None
    return Duration.parse(text)
