"""Comparison core.

Design principle:
  - Parsers turn raw host values into typed values or ``None``; they never raise.
  - Comparators and label builders dispatch on closed mode enums.
  - :func:`~field_comparer.analysis.evaluate.evaluate` is the pure entry point
    used by the GUI control and by batch evaluation.
"""

from .parsing import parse_date, parse_number, normalize_to_local_date
from .comparers import compare_dates, compare_numbers
from .labels import build_date_label, build_number_label, get_comparator_and_labeler
from .evaluate import evaluate

__all__ = [
    "parse_date",
    "parse_number",
    "normalize_to_local_date",
    "compare_dates",
    "compare_numbers",
    "build_date_label",
    "build_number_label",
    "get_comparator_and_labeler",
    "evaluate",
]
