"""Headless tests for FieldComparerControl.

These run without a notebook front-end and verify rendering (icon, label,
state class), output persistence and teardown.
"""

from __future__ import annotations

from types import SimpleNamespace

import ipywidgets as w
import pytest

from field_comparer.gui.control import CONTAINER_CLASS, FieldComparerControl
from field_comparer.gui.log_view import HtmlLog
from field_comparer.models.inputs import ComparisonInputs
from field_comparer.models.results import VisualState


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def host():
    counter = _Counter()
    box = w.HBox([])
    control = FieldComparerControl()
    control.init(counter, box)
    return control, box, counter


def _state_classes(control: FieldComparerControl) -> list:
    return [c for c in control.widget._dom_classes if c in {s.css_class for s in VisualState}]


def test_init_attaches_neutral_container(host) -> None:
    control, box, _ = host
    assert box.children[-1] is control.widget
    assert CONTAINER_CLASS in control.widget._dom_classes
    assert control.state is VisualState.NEUTRAL
    assert control.get_outputs() == {"result": None}


def test_update_renders_pass_with_icon(host) -> None:
    control, _, _ = host
    ev = control.update_view({"firstNumber": 5, "secondNumber": 10, "showIcons": True})
    assert ev.state is VisualState.PASS
    assert control._icon.value == "✅"
    assert control._label.value == "Second Field is higher than First Field"
    assert _state_classes(control) == ["pass"]


def test_exactly_one_state_class_after_transitions(host) -> None:
    control, _, _ = host
    control.update_view({"firstNumber": 5, "secondNumber": 10})
    control.update_view({"firstNumber": 10, "secondNumber": 5})
    assert _state_classes(control) == ["fail"]
    control.update_view({})
    assert _state_classes(control) == ["neutral"]
    assert control._label.value == "Missing inputs"


def test_icons_hidden_when_disabled(host) -> None:
    control, _, _ = host
    control.update_view({"firstNumber": 10, "secondNumber": 5, "showIcons": False})
    assert control._icon.value == ""
    assert control._label.value == "Second Field is not higher than First Field"
    assert control.state is VisualState.FAIL


def test_no_output_without_save_result(host) -> None:
    control, _, counter = host
    control.update_view({"firstNumber": 5, "secondNumber": 10})
    assert control.get_outputs() == {"result": None}
    assert counter.calls == 0


def test_output_persisted_and_notified_once_per_change(host) -> None:
    control, _, counter = host
    bag = {"firstNumber": 5, "secondNumber": 10, "saveResult": True}
    control.update_view(bag)
    control.update_view(bag)
    assert control.get_outputs() == {"result": "Second Field is higher than First Field"}
    assert counter.calls == 1

    control.update_view(dict(bag, secondNumber=1))
    assert control.get_outputs() == {"result": "Second Field is not higher than First Field"}
    assert counter.calls == 2


def test_missing_labels_are_persisted_too(host) -> None:
    control, _, counter = host
    control.update_view({"saveResult": True})
    assert control.get_outputs() == {"result": "Missing inputs"}
    assert counter.calls == 1


def test_save_result_if_requested_is_idempotent(host) -> None:
    control, _, counter = host
    assert control.save_result_if_requested(True, "x") is True
    assert control.save_result_if_requested(True, "x") is False
    assert control.save_result_if_requested(False, "y") is False
    assert control.save_result_if_requested(True, None) is True
    assert control.get_outputs() == {"result": ""}
    assert counter.calls == 2


def test_update_view_accepts_context_and_inputs(host) -> None:
    control, _, _ = host
    context = SimpleNamespace(
        parameters=SimpleNamespace(
            firstNumber=SimpleNamespace(raw=1),
            secondNumber=SimpleNamespace(raw=1),
            comparisonMode=SimpleNamespace(raw="EQUAL"),
        )
    )
    assert control.update_view(context).state is VisualState.PASS
    assert control.update_view(ComparisonInputs(first_number=1, second_number=2, comparison_mode="equal")).state is (
        VisualState.FAIL
    )


def test_warnings_are_routed_to_log() -> None:
    log = HtmlLog()
    control = FieldComparerControl(log=log)
    control.init()
    control.update_view({"firstNumber": 1, "secondNumber": 2, "comparisonMode": "bogus"})
    control.update_view({"firstNumber": 1, "secondNumber": 2, "comparisonMode": "bogus"})
    assert len(log.entries) == 1
    level, message, count = log.entries[0]
    assert level == "warning"
    assert "bogus" in message
    assert count == 2


def test_update_before_init_does_not_fail() -> None:
    control = FieldComparerControl()
    ev = control.update_view({"firstNumber": 1, "secondNumber": 2, "saveResult": True})
    assert ev.state is VisualState.PASS
    assert control.get_outputs()["result"] == "Second Field is higher than First Field"
    assert control.state is None


def test_destroy_detaches_and_is_repeatable(host) -> None:
    control, box, _ = host
    control.destroy()
    assert box.children == ()
    assert control.widget is None
    control.destroy()


def test_unsupported_parameters_type(host) -> None:
    control, _, _ = host
    with pytest.raises(TypeError):
        control.update_view(42)
