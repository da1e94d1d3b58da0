from __future__ import annotations

"""Comparison orchestrator.

``evaluate`` is the pure core of the control: raw inputs in, visual state and
label out. It never raises on bad data; every problem ends in the neutral state
and, where useful, a warning string on the returned :class:`Evaluation`.

Path selection:
  1. if either date parses -> compare dates
  2. elif either number parses -> compare numbers
  3. else -> neutral "Missing inputs"
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional, Union

from field_comparer.analysis.labels import get_comparator_and_labeler
from field_comparer.analysis.parsing import parse_date, parse_number
from field_comparer.models.inputs import ComparisonInputs
from field_comparer.models.modes import DataType, DateMode, NumberMode
from field_comparer.models.results import Evaluation, VisualState

MISSING_INPUTS = "Missing inputs"
MISSING_DATES = "Missing date(s)"
MISSING_NUMBERS = "Missing number(s)"

_MISSING_LABELS = {
    DataType.DATE: MISSING_DATES,
    DataType.NUMBER: MISSING_NUMBERS,
}


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def _check_parsed(name: str, raw: Any, parsed: Any, kind: str, warnings: List[str]) -> None:
    if parsed is None and not _is_blank(raw):
        warnings.append(f"CHECK: {name}={raw!r} is not a valid {kind}; treated as missing.")


def _check_mode(data_type: DataType, raw_mode: Any, warnings: List[str]) -> None:
    if data_type is DataType.DATE:
        mode, recognized = DateMode.resolve(raw_mode)
    else:
        mode, recognized = NumberMode.resolve(raw_mode)
    if not recognized:
        warnings.append(
            f"WARNING: unrecognized comparison mode {raw_mode!r} for {data_type.value}s; using '{mode.value}'."
        )


def evaluate(
    inputs: Union[ComparisonInputs, Mapping[str, Any]],
    *,
    now: Optional[datetime] = None,
) -> Evaluation:
    """Run one evaluation pass.

    Parameters
    ----------
    inputs:
        A :class:`ComparisonInputs` or a host bag accepted by
        :meth:`ComparisonInputs.from_dict`.
    now:
        Reference time for ``in_the_future`` / ``in_the_past``. Defaults to the
        current local time.
    """
    if not isinstance(inputs, ComparisonInputs):
        inputs = ComparisonInputs.from_dict(inputs)

    warnings: List[str] = []

    first_date = parse_date(inputs.first_date)
    second_date = parse_date(inputs.second_date)
    first_number = parse_number(inputs.first_number)
    second_number = parse_number(inputs.second_number)

    _check_parsed("firstDate", inputs.first_date, first_date, "date", warnings)
    _check_parsed("secondDate", inputs.second_date, second_date, "date", warnings)
    _check_parsed("firstNumber", inputs.first_number, first_number, "number", warnings)
    _check_parsed("secondNumber", inputs.second_number, second_number, "number", warnings)

    if first_date is not None or second_date is not None:
        data_type = DataType.DATE
        first, second = first_date, second_date
    elif first_number is not None or second_number is not None:
        data_type = DataType.NUMBER
        first, second = first_number, second_number
    else:
        return Evaluation(state=VisualState.NEUTRAL, label=MISSING_INPUTS, warnings=tuple(warnings))

    _check_mode(data_type, inputs.comparison_mode, warnings)

    comparator, labeler = get_comparator_and_labeler(data_type)
    if data_type is DataType.DATE:
        result = comparator(inputs.comparison_mode, first, second, now=now)
    else:
        result = comparator(inputs.comparison_mode, first, second)

    if result.passed is None:
        return Evaluation(
            state=VisualState.NEUTRAL,
            label=_MISSING_LABELS[data_type],
            data_type=data_type,
            result=result,
            warnings=tuple(warnings),
        )

    label = labeler(
        inputs.comparison_mode,
        inputs.first_label,
        inputs.second_label,
        result.passed,
        result.used_second_field,
    )
    return Evaluation(
        state=VisualState.from_passed(result.passed),
        label=label,
        data_type=data_type,
        result=result,
        warnings=tuple(warnings),
    )
