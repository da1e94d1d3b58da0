from __future__ import annotations

"""Null-safe comparators for numbers and dates.

Convention: the *second* operand is the subject and the *first* one is the
reference, i.e. ``greater_than`` passes when ``second > first``.
"""

from datetime import datetime
from typing import Any, Optional

from field_comparer.analysis.parsing import has_time_component, normalize_to_local_date
from field_comparer.models.modes import DateMode, NumberMode
from field_comparer.models.results import UNKNOWN, CompareResult


def _compare_number_values(mode: NumberMode, first: float, second: float) -> bool:
    if mode is NumberMode.GREATER_THAN:
        return second > first
    if mode is NumberMode.LESS_THAN:
        return second < first
    if mode is NumberMode.EQUAL:
        return second == first
    if mode is NumberMode.NOT_EQUAL:
        return second != first
    raise ValueError(f"Unhandled number mode: {mode!r}")


def compare_numbers(mode: Any, first: Optional[float], second: Optional[float]) -> CompareResult:
    """Compare two numbers; unknown (``passed=None``) when either is missing.

    ``mode`` may be a :class:`NumberMode` or any raw mode value; unknown modes
    fall back to ``greater_than``.
    """
    if first is None or second is None:
        return UNKNOWN
    return CompareResult(passed=_compare_number_values(NumberMode.parse(mode), first, second))


def _relative_to_now(mode: DateMode, target: datetime, now: datetime) -> bool:
    if has_time_component(target):
        lhs, rhs = target, now
    else:
        lhs, rhs = normalize_to_local_date(target), normalize_to_local_date(now)
    if mode is DateMode.IN_THE_FUTURE:
        return lhs > rhs
    return lhs < rhs


def _compare_date_values(mode: DateMode, first: datetime, second: datetime) -> bool:
    if mode is DateMode.AFTER:
        return second > first
    if mode is DateMode.BEFORE:
        return second < first
    if mode is DateMode.EQUAL:
        return second == first
    if mode is DateMode.NOT_EQUAL:
        return second != first
    raise ValueError(f"Unhandled date mode: {mode!r}")


def compare_dates(
    mode: Any,
    first: Optional[datetime],
    second: Optional[datetime],
    *,
    now: Optional[datetime] = None,
) -> CompareResult:
    """Compare two dates.

    ``in_the_future`` / ``in_the_past`` check a single target (the second date
    when present, else the first) against ``now``:

      - a target with a time of day is compared as a full timestamp;
      - a date-only target (local midnight) is compared by calendar day.

    All other modes need both dates and compare exact timestamps. Unknown
    modes fall back to ``after``.

    ``now`` defaults to the current local time; pass it explicitly for
    reproducible results.
    """
    dm = DateMode.parse(mode)

    if dm.is_relative_to_now:
        target = second if second is not None else first
        if target is None:
            return UNKNOWN
        if now is None:
            now = datetime.now()
        elif now.tzinfo is not None:
            now = now.astimezone().replace(tzinfo=None)
        return CompareResult(
            passed=_relative_to_now(dm, target, now),
            used_second_field=second is not None,
        )

    if first is None or second is None:
        return UNKNOWN
    return CompareResult(passed=_compare_date_values(dm, first, second))
