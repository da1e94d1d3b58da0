from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple


class DataType(str, Enum):
    """The two value kinds the comparer understands."""

    DATE = "date"
    NUMBER = "number"


def _normalize_mode(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, Enum):
        raw = raw.value
    return str(raw).strip().lower()


class NumberMode(str, Enum):
    """Comparison modes for numbers.

    ``after`` and ``before`` are accepted as aliases so that a single mode
    setting can be shared between date and number inputs.
    """

    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"

    @classmethod
    def default(cls) -> NumberMode:
        return cls.GREATER_THAN

    @classmethod
    def resolve(cls, raw: Any) -> Tuple[NumberMode, bool]:
        """Map a raw mode value to a member.

        Returns ``(mode, recognized)``. An absent or empty mode resolves to the
        default and counts as recognized; an unknown string resolves to the
        default with ``recognized=False``.
        """
        key = _normalize_mode(raw)
        if not key:
            return cls.default(), True
        key = _NUMBER_ALIASES.get(key, key)
        try:
            return cls(key), True
        except ValueError:
            return cls.default(), False

    @classmethod
    def parse(cls, raw: Any) -> NumberMode:
        return cls.resolve(raw)[0]


_NUMBER_ALIASES = {
    "after": NumberMode.GREATER_THAN.value,
    "before": NumberMode.LESS_THAN.value,
}


class DateMode(str, Enum):
    """Comparison modes for dates.

    ``IN_THE_FUTURE`` and ``IN_THE_PAST`` need a single operand; the others
    compare the second date against the first.
    """

    IN_THE_FUTURE = "in_the_future"
    IN_THE_PAST = "in_the_past"
    AFTER = "after"
    BEFORE = "before"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"

    @property
    def is_relative_to_now(self) -> bool:
        return self in (DateMode.IN_THE_FUTURE, DateMode.IN_THE_PAST)

    @classmethod
    def default(cls) -> DateMode:
        return cls.AFTER

    @classmethod
    def resolve(cls, raw: Any, *, fallback: Optional[DateMode] = None) -> Tuple[DateMode, bool]:
        """Map a raw mode value to a member.

        An absent or empty mode always resolves to :meth:`default`. An unknown
        string resolves to ``fallback`` (the default when not given) and is
        reported with ``recognized=False``.
        """
        key = _normalize_mode(raw)
        if not key:
            return cls.default(), True
        try:
            return cls(key), True
        except ValueError:
            return (fallback if fallback is not None else cls.default()), False

    @classmethod
    def parse(cls, raw: Any, *, fallback: Optional[DateMode] = None) -> DateMode:
        return cls.resolve(raw, fallback=fallback)[0]
