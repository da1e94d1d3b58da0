"""Field Comparer -- compare two dates or two numbers and render a pass/fail indicator.

This package provides tools for:
- Parsing raw host values into dates or numbers (never raising on bad data)
- Comparing them with a selectable, case-insensitive comparison mode
- Building a short English sentence that describes the outcome
- Rendering a pass / fail / neutral indicator as an ipywidgets control
- Evaluating whole DataFrames of input rows in one call

Key principles:
- Malformed or missing input degrades to a neutral state, it never crashes the host
- Exactly one data type (date or number) is compared per evaluation
- The persisted output only changes (and notifies the host) when the label changes

Main subpackages:
- models: Comparison modes, inputs, results and visual states
- analysis: Parsers, comparators, label builders, orchestrator, batch frames
- gui: The ipywidgets control, its log view and an interactive notebook panel
"""

__all__ = []
