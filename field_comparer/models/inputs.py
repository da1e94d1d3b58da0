"""Component inputs -- the host property bag as a frozen dataclass.

The host hands the control a bag of named properties on every update. Each
entry is either a plain value or a property object carrying the value in a
``raw`` attribute (or ``"raw"`` key). :class:`ComparisonInputs` accepts both,
and both the host's camelCase names and Python snake_case names:

    inputs = ComparisonInputs.from_dict({"firstNumber": {"raw": 5}, "second_number": 10})

Unknown keys are ignored so that hosts can pass their whole bag.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional


# host name -> field name
HOST_KEYS: Dict[str, str] = {
    "firstDate": "first_date",
    "secondDate": "second_date",
    "firstNumber": "first_number",
    "secondNumber": "second_number",
    "firstLabel": "first_label",
    "secondLabel": "second_label",
    "comparisonMode": "comparison_mode",
    "showIcons": "show_icons",
    "saveResult": "save_result",
}

_FIELD_TO_HOST = {v: k for k, v in HOST_KEYS.items()}


def unwrap_raw(value: Any) -> Any:
    """Return ``value.raw`` / ``value["raw"]`` for host property objects, else ``value``."""
    if isinstance(value, Mapping):
        return value.get("raw")
    if hasattr(value, "raw"):
        return getattr(value, "raw")
    return value


@dataclass(frozen=True)
class ComparisonInputs:
    """Raw inputs for one evaluation.

    Values are kept raw here; parsing happens in
    :mod:`field_comparer.analysis.parsing` so that a bad value degrades to
    "missing" instead of failing construction.
    """

    first_date: Any = None
    second_date: Any = None
    first_number: Any = None
    second_number: Any = None
    first_label: Optional[str] = None
    second_label: Optional[str] = None
    comparison_mode: Optional[str] = None
    show_icons: bool = False
    save_result: bool = False

    def __post_init__(self) -> None:
        # Host booleans may arrive as None or as truthy non-bools.
        object.__setattr__(self, "show_icons", bool(self.show_icons))
        object.__setattr__(self, "save_result", bool(self.save_result))

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> ComparisonInputs:
        """Build from a host bag (camelCase or snake_case keys, plain or ``raw`` values)."""
        names = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in d.items():
            name = HOST_KEYS.get(key, key)
            if name in names:
                kwargs[name] = unwrap_raw(value)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Return the host-style bag (camelCase keys, plain values)."""
        return {_FIELD_TO_HOST[f.name]: getattr(self, f.name) for f in fields(self)}
