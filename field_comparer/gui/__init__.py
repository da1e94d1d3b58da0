"""GUI package - ipywidgets rendering of the comparer.

- control: FieldComparerControl, the host-facing component (init / update_view /
  get_outputs / destroy) rendering icon + label + one of pass/fail/neutral classes
- log_view: HtmlLog, an HTML widget collecting evaluation diagnostics
- app: build_comparer_gui, a notebook panel acting as the host

Entry point:
    from field_comparer.gui.app import build_comparer_gui
    gui = build_comparer_gui()
"""
