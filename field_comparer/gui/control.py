from __future__ import annotations

import html
from typing import Any, Callable, Dict, Mapping, Optional

import ipywidgets as w

from field_comparer.analysis.evaluate import evaluate
from field_comparer.gui.log_view import HtmlLog
from field_comparer.models.inputs import ComparisonInputs
from field_comparer.models.results import Evaluation, VisualState


CONTAINER_CLASS = "field-comparer"

_STYLE = f"""<style>
.{CONTAINER_CLASS} {{ align-items: center; gap: 6px; padding: 2px 6px; border-radius: 4px; }}
.{CONTAINER_CLASS}.pass {{ background: #e6f4ea; color: #137333; }}
.{CONTAINER_CLASS}.fail {{ background: #fce8e6; color: #a50e0e; }}
.{CONTAINER_CLASS}.neutral {{ background: #f1f3f4; color: #5f6368; }}
</style>"""


def _as_bag(parameters: Any) -> Any:
    """Accept a ComparisonInputs, a mapping, a host context (``.parameters``) or a plain namespace."""
    if isinstance(parameters, (ComparisonInputs, Mapping)):
        return parameters
    inner = getattr(parameters, "parameters", None)
    if inner is not None:
        return _as_bag(inner)
    if hasattr(parameters, "__dict__"):
        return vars(parameters)
    raise TypeError(f"Unsupported parameters object: {type(parameters).__name__}")


class FieldComparerControl:
    """
    Host-facing comparer control.

    Lifecycle (driven by the host):
      init(notify_output_changed, container)  -> build widgets once
      update_view(parameters)                 -> evaluate + render, on every property change
      get_outputs()                           -> {"result": persisted label or None}
      destroy()                               -> detach and close widgets

    The only state kept between updates is the rendered widgets and the
    persisted ``result`` string. ``notify_output_changed`` is called exactly once
    per change of that string.
    """

    def __init__(self, *, log: Optional[HtmlLog] = None) -> None:
        self._log = log
        self._notify_output_changed: Optional[Callable[[], None]] = None
        self._host: Optional[w.Box] = None
        self._container: Optional[w.HBox] = None
        self._icon: Optional[w.HTML] = None
        self._label: Optional[w.Label] = None
        self._comparison_result: Optional[str] = None
        self.last_evaluation: Optional[Evaluation] = None

    # -------------------------
    # Host lifecycle
    # -------------------------
    def init(
        self,
        notify_output_changed: Optional[Callable[[], None]] = None,
        container: Optional[w.Box] = None,
    ) -> w.HBox:
        """Create the widget tree; append it to ``container`` when given."""
        self._notify_output_changed = notify_output_changed

        self._icon = w.HTML(value="")
        self._icon.add_class("icon")
        self._label = w.Label(value="")
        self._label.add_class("label")

        self._container = w.HBox([w.HTML(_STYLE), self._icon, self._label])
        self._container.add_class(CONTAINER_CLASS)
        self._container.add_class(VisualState.NEUTRAL.css_class)

        if container is not None:
            container.children = tuple(container.children) + (self._container,)
            self._host = container
        return self._container

    def update_view(self, parameters: Any) -> Evaluation:
        """Evaluate the current host properties and refresh the display."""
        bag = _as_bag(parameters)
        inputs = bag if isinstance(bag, ComparisonInputs) else ComparisonInputs.from_dict(bag)

        ev = evaluate(inputs)
        self.last_evaluation = ev
        if ev.warnings and self._log is not None:
            self._log.extend(ev.warnings)

        self._set_ui_state(ev.state, ev.label, inputs.show_icons)
        self.save_result_if_requested(inputs.save_result, ev.label)
        return ev

    def get_outputs(self) -> Dict[str, Optional[str]]:
        return {"result": self._comparison_result}

    def destroy(self) -> None:
        if self._container is None:
            return
        if self._host is not None:
            self._host.children = tuple(c for c in self._host.children if c is not self._container)
            self._host = None
        self._container.close()
        self._container = None
        self._icon = None
        self._label = None

    # -------------------------
    # Rendering and output
    # -------------------------
    @property
    def widget(self) -> Optional[w.HBox]:
        return self._container

    @property
    def state(self) -> Optional[VisualState]:
        """State whose class is currently applied, or None before init."""
        if self._container is None:
            return None
        for s in VisualState:
            if s.css_class in self._container._dom_classes:
                return s
        return None

    def _set_ui_state(self, state: VisualState, text: str, show_icons: bool) -> None:
        if self._container is None or self._icon is None or self._label is None:
            return
        self._icon.value = html.escape(state.icon) if show_icons else ""
        self._label.value = text

        for s in VisualState:
            self._container.remove_class(s.css_class)
        self._container.add_class(state.css_class)

    def save_result_if_requested(self, save_enabled: bool, text: Optional[str]) -> bool:
        """Persist ``text`` as the output value; return True when it changed.

        No-op when persistence is disabled. The host callback fires only when
        the stored value actually changes.
        """
        if not save_enabled:
            return False
        new_val = "" if text is None else text
        if new_val == self._comparison_result:
            return False
        self._comparison_result = new_val
        if self._notify_output_changed is not None:
            self._notify_output_changed()
        return True
