from __future__ import annotations

"""Value parsers: raw host values -> ``datetime`` / ``float`` or ``None``.

Both parsers are total: anything they cannot interpret becomes ``None`` so the
caller can treat it as a missing operand. Dates are always returned as naive
*local* datetimes truncated to milliseconds, which keeps every comparison in
one time base (aware values are converted, numbers are epoch milliseconds).
"""

import numbers
from datetime import date, datetime, time
from typing import Any, Optional

import numpy as np
import pandas as pd


def _truncate_ms(d: datetime) -> datetime:
    return d.replace(microsecond=d.microsecond - d.microsecond % 1000)


def _to_local_naive(d: datetime) -> datetime:
    if d.tzinfo is not None:
        d = d.astimezone().replace(tzinfo=None)
    return _truncate_ms(d)


def _timestamp_to_local(ts: pd.Timestamp) -> Optional[datetime]:
    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC")
    # drop sub-millisecond precision before leaving pandas (avoids nanosecond loss warnings)
    ts = ts.floor("ms")
    return _to_local_naive(ts.to_pydatetime())


def parse_date(raw: Any) -> Optional[datetime]:
    """Interpret ``raw`` as a point in time.

    Accepted inputs:
      - ``datetime`` / ``pandas.Timestamp`` / ``numpy.datetime64``
      - ``date`` (local midnight of that day)
      - strings understood by :func:`pandas.to_datetime`
      - real numbers, taken as milliseconds since the Unix epoch

    Returns ``None`` for absent, invalid (NaT, out of range, unparseable) or
    unsupported values, booleans included. Never raises.
    """
    if raw is None or raw is pd.NaT or isinstance(raw, (bool, np.bool_)):
        return None
    try:
        if isinstance(raw, (pd.Timestamp, np.datetime64)):
            return _timestamp_to_local(pd.Timestamp(raw))
        if isinstance(raw, datetime):
            return _to_local_naive(raw)
        if isinstance(raw, date):
            return datetime.combine(raw, time())
        if isinstance(raw, str):
            text = raw.strip()
            if not text:
                return None
            return _timestamp_to_local(pd.to_datetime(text, errors="coerce"))
        if isinstance(raw, (numbers.Real, np.number)):
            ms = float(raw)
            if not np.isfinite(ms):
                return None
            return _timestamp_to_local(pd.to_datetime(ms, unit="ms", utc=True, errors="coerce"))
    except (ValueError, TypeError, OverflowError):
        return None
    return None


def parse_number(raw: Any) -> Optional[float]:
    """Interpret ``raw`` as a finite number.

    Real numbers are taken as-is, strings go through ``float()`` after
    stripping whitespace. Booleans, empty strings, NaN and infinities yield
    ``None``. Never raises.
    """
    if raw is None or isinstance(raw, (bool, np.bool_)):
        return None
    if isinstance(raw, (numbers.Real, np.number)):
        try:
            value = float(raw)
        except (TypeError, ValueError, OverflowError):
            return None
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    return value if np.isfinite(value) else None


def normalize_to_local_date(d: datetime) -> datetime:
    """Return local midnight of the calendar day ``d`` falls on."""
    if d.tzinfo is not None:
        d = d.astimezone().replace(tzinfo=None)
    return datetime(d.year, d.month, d.day)


def has_time_component(d: datetime) -> bool:
    return bool(d.hour or d.minute or d.second or d.microsecond)
