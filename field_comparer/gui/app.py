from __future__ import annotations

import html
from typing import Any, Dict, Optional

import ipywidgets as w

from field_comparer.gui.control import FieldComparerControl
from field_comparer.gui.log_view import HtmlLog
from field_comparer.models.modes import DateMode, NumberMode


# Keep a single active panel per kernel to avoid duplicated callbacks / stacked widgets.
_ACTIVE_GUI: Optional[w.Widget] = None


def _mode_options() -> list:
    opts = [("(default)", "")]
    seen = set()
    for m in list(DateMode) + list(NumberMode):
        if m.value not in seen:
            seen.add(m.value)
            opts.append((m.value, m.value))
    return opts


def build_comparer_gui(*, clear_cell_output: bool = False) -> w.VBox:
    """
    Interactive notebook host for one :class:`FieldComparerControl`.

    Every input widget plays the role of one host property; any change triggers
    ``update_view`` exactly like a host property update would. The persisted
    result and the number of host notifications are shown under the control.

    Notes on "widget multiplication":
      - Calling this again closes the previous panel created from this module.
      - ``clear_cell_output=True`` also clears the current cell output first
        (requires IPython).

    Usage:
        from field_comparer.gui.app import build_comparer_gui
        build_comparer_gui()
    """
    global _ACTIVE_GUI

    if _ACTIVE_GUI is not None:
        _ACTIVE_GUI.close()
        _ACTIVE_GUI = None

    if clear_cell_output:
        from IPython.display import clear_output

        clear_output(wait=True)

    txt_first_date = w.Text(description="First date", placeholder="2024-05-01 or 2024-05-01T14:30")
    txt_second_date = w.Text(description="Second date", placeholder="(optional)")
    txt_first_number = w.Text(description="First num", placeholder="e.g. 5")
    txt_second_number = w.Text(description="Second num", placeholder="e.g. 10")
    txt_first_label = w.Text(description="First label", placeholder="First Field")
    txt_second_label = w.Text(description="Second label", placeholder="Second Field")
    dd_mode = w.Dropdown(description="Mode", options=_mode_options(), value="")
    cb_icons = w.Checkbox(value=True, description="Show icons", indent=False)
    cb_save = w.Checkbox(value=False, description="Save result", indent=False)

    readout = w.HTML()
    log = HtmlLog(title="Diagnostics")
    host_box = w.HBox([])

    state: Dict[str, Any] = {"notifications": 0}

    def _on_output_changed() -> None:
        state["notifications"] += 1

    control = FieldComparerControl(log=log)
    control.init(_on_output_changed, host_box)

    def _bag() -> Dict[str, Any]:
        return {
            "firstDate": txt_first_date.value or None,
            "secondDate": txt_second_date.value or None,
            "firstNumber": txt_first_number.value or None,
            "secondNumber": txt_second_number.value or None,
            "firstLabel": txt_first_label.value or None,
            "secondLabel": txt_second_label.value or None,
            "comparisonMode": dd_mode.value or None,
            "showIcons": cb_icons.value,
            "saveResult": cb_save.value,
        }

    def _refresh(_change=None) -> None:
        control.update_view(_bag())
        result = control.get_outputs()["result"]
        shown = "<i>unset</i>" if result is None else html.escape(result)
        readout.value = f"<b>result:</b> {shown} &nbsp; <b>notifications:</b> {state['notifications']}"

    inputs = (
        txt_first_date,
        txt_second_date,
        txt_first_number,
        txt_second_number,
        txt_first_label,
        txt_second_label,
        dd_mode,
        cb_icons,
        cb_save,
    )
    for wid in inputs:
        wid.observe(_refresh, names="value")
    _refresh()

    gui = w.VBox(
        [
            w.HBox([txt_first_date, txt_second_date]),
            w.HBox([txt_first_number, txt_second_number]),
            w.HBox([txt_first_label, txt_second_label]),
            w.HBox([dd_mode, cb_icons, cb_save]),
            host_box,
            readout,
            log.panel,
        ]
    )
    gui.comparer = control  # type: ignore[attr-defined]

    _ACTIVE_GUI = gui
    return gui


def show_comparer_gui() -> w.VBox:
    """Build the panel and display it in the current notebook cell."""
    from IPython.display import display

    gui = build_comparer_gui()
    display(gui)
    return gui
