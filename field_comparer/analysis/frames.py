from __future__ import annotations

"""Batch evaluation over a pandas DataFrame.

Each row is one host bag: columns are named like the host properties
(``firstDate``, ``second_number``, ...). Columns that are absent are taken from
``defaults``; NaN / NaT cells count as missing values.
"""

from typing import Any, Dict, Optional
from datetime import datetime

import pandas as pd

from field_comparer.analysis.evaluate import evaluate
from field_comparer.models.inputs import HOST_KEYS, ComparisonInputs

RESULT_COLUMNS = ("state", "icon", "label", "data_type", "passed", "used_second_field")


def _cell(value: Any) -> Any:
    # pd.isna on a list-like would return an array
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def evaluate_frame(
    df: pd.DataFrame,
    *,
    now: Optional[datetime] = None,
    **defaults: Any,
) -> pd.DataFrame:
    """Evaluate every row of ``df`` and return one result row per input row.

    Returns a DataFrame indexed like ``df`` with columns :data:`RESULT_COLUMNS`.
    ``state`` holds the css class name (``pass`` / ``fail`` / ``neutral``),
    ``data_type`` is ``"date"``, ``"number"`` or ``None``.

    Example::

        out = evaluate_frame(df, comparisonMode="in_the_past", secondLabel="Due date")
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"evaluate_frame expects a pandas DataFrame, got {type(df).__name__}")

    known = set(HOST_KEYS) | set(HOST_KEYS.values())
    base: Dict[str, Any] = ComparisonInputs.from_dict(defaults).to_dict()
    cols = [c for c in df.columns if c in known]

    rows = []
    for _, row in df[cols].iterrows():
        bag = dict(base)
        for c in cols:
            bag[c] = _cell(row[c])
        ev = evaluate(bag, now=now)
        rows.append(
            {
                "state": ev.state.css_class,
                "icon": ev.icon,
                "label": ev.label,
                "data_type": None if ev.data_type is None else ev.data_type.value,
                "passed": ev.passed,
                "used_second_field": bool(ev.result.used_second_field) if ev.result is not None else False,
            }
        )

    return pd.DataFrame(rows, index=df.index, columns=list(RESULT_COLUMNS))
