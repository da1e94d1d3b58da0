from __future__ import annotations

"""Label builders: turn a comparator outcome into a short English sentence.

Labels are only built for decided results (``passed`` is ``True`` or
``False``); the orchestrator handles the unknown case itself.
"""

from typing import Any, Callable, Optional, Tuple

from field_comparer.analysis.comparers import compare_dates, compare_numbers
from field_comparer.models.modes import DataType, DateMode, NumberMode
from field_comparer.models.results import CompareResult

DEFAULT_FIRST_LABEL = "First Field"
DEFAULT_SECOND_LABEL = "Second Field"

Comparator = Callable[[Any, Any, Any], CompareResult]
Labeler = Callable[[Any, Optional[str], Optional[str], bool, bool], str]


def _labels(first_label: Optional[str], second_label: Optional[str]) -> Tuple[str, str]:
    return first_label or DEFAULT_FIRST_LABEL, second_label or DEFAULT_SECOND_LABEL


def _negation(passed: bool) -> str:
    return "" if passed else "not "


_NUMBER_RELATIONS = {
    NumberMode.GREATER_THAN: "higher than",
    NumberMode.LESS_THAN: "lower than",
    NumberMode.EQUAL: "equal to",
    NumberMode.NOT_EQUAL: "different from",
}

_DATE_RELATIONS = {
    DateMode.AFTER: "after",
    DateMode.BEFORE: "before",
    DateMode.EQUAL: "the same as",
    DateMode.NOT_EQUAL: "different from",
}


def build_number_label(
    mode: Any,
    first_label: Optional[str],
    second_label: Optional[str],
    passed: bool,
    used_second_field: bool = False,
) -> str:
    """e.g. ``"Second Field is not higher than First Field"``.

    ``used_second_field`` is accepted for signature parity with
    :func:`build_date_label` and ignored.
    """
    left, right = _labels(first_label, second_label)
    relation = _NUMBER_RELATIONS[NumberMode.parse(mode)]
    return f"{right} is {_negation(passed)}{relation} {left}"


def build_date_label(
    mode: Any,
    first_label: Optional[str],
    second_label: Optional[str],
    passed: bool,
    used_second_field: bool = False,
) -> str:
    """e.g. ``"Due date is in the past"`` or ``"End is not after Start"``.

    An unrecognized mode uses the ``equal`` wording even though the date
    comparator falls back to ``after``; an absent mode uses ``after`` for both.
    """
    left, right = _labels(first_label, second_label)
    dm = DateMode.parse(mode, fallback=DateMode.EQUAL)
    if dm is DateMode.IN_THE_FUTURE or dm is DateMode.IN_THE_PAST:
        used = right if used_second_field else left
        where = "in the future" if dm is DateMode.IN_THE_FUTURE else "in the past"
        return f"{used} is {_negation(passed)}{where}"
    return f"{right} is {_negation(passed)}{_DATE_RELATIONS[dm]} {left}"


def get_comparator_and_labeler(data_type: DataType) -> Tuple[Comparator, Labeler]:
    """Return the ``(comparator, labeler)`` pair for ``data_type``."""
    dt = DataType(data_type)
    if dt is DataType.DATE:
        return compare_dates, build_date_label
    if dt is DataType.NUMBER:
        return compare_numbers, build_number_label
    raise ValueError(f"Unsupported data type: {data_type!r}")
