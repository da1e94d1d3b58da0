"""Tests for ComparisonInputs (host bag handling)."""

from __future__ import annotations

import dataclasses
from types import SimpleNamespace

import pytest

from field_comparer.models.inputs import HOST_KEYS, ComparisonInputs, unwrap_raw


def test_defaults() -> None:
    p = ComparisonInputs()
    assert p.first_date is None
    assert p.comparison_mode is None
    assert p.show_icons is False
    assert p.save_result is False


def test_frozen() -> None:
    p = ComparisonInputs()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.first_number = 3  # type: ignore[misc]


def test_booleans_are_coerced() -> None:
    p = ComparisonInputs(show_icons=None, save_result=1)  # type: ignore[arg-type]
    assert p.show_icons is False
    assert p.save_result is True


def test_from_dict_camel_and_snake_case() -> None:
    p = ComparisonInputs.from_dict({"firstNumber": 1, "second_number": 2, "comparisonMode": "equal"})
    assert p.first_number == 1
    assert p.second_number == 2
    assert p.comparison_mode == "equal"


def test_from_dict_unwraps_raw_values() -> None:
    bag = {
        "firstDate": {"raw": "2024-01-01"},
        "showIcons": SimpleNamespace(raw=True),
        "saveResult": {"raw": None},
    }
    p = ComparisonInputs.from_dict(bag)
    assert p.first_date == "2024-01-01"
    assert p.show_icons is True
    assert p.save_result is False


def test_from_dict_ignores_unknown_keys() -> None:
    p = ComparisonInputs.from_dict({"width": 300, "firstLabel": "A"})
    assert p.first_label == "A"


def test_round_trip_via_host_bag() -> None:
    p = ComparisonInputs(first_number=1, second_label="B", show_icons=True)
    d = p.to_dict()
    assert set(d) == set(HOST_KEYS)
    assert ComparisonInputs.from_dict(d) == p


def test_replace_overrides_one_field() -> None:
    p = ComparisonInputs(first_number=1, second_number=2)
    p2 = dataclasses.replace(p, comparison_mode="less_than")
    assert p2.comparison_mode == "less_than"
    assert p2.first_number == 1


def test_unwrap_raw_plain_value() -> None:
    assert unwrap_raw(5) == 5
    assert unwrap_raw("x") == "x"
