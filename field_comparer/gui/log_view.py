from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, List, Literal

import ipywidgets as w


Level = Literal["info", "warning", "error"]

_COLORS = {
    "error": "#b00020",
    "warning": "#b26a00",
    "info": "#222222",
}


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


def classify(line: str) -> Level:
    """Severity from the conventional message prefix (``ERROR:``, ``WARNING:``, ``CHECK:``)."""
    s = (line or "").lstrip()
    if s.startswith(("ERROR:", "Error:", "Exception:")):
        return "error"
    if s.startswith(("WARNING:", "Warning:", "CHECK:")):
        return "warning"
    return "info"


class HtmlLog:
    """
    Diagnostics view for a comparer control, rendered into one HTML widget.

    The control re-evaluates on every host update, so the same warning tends to
    repeat: consecutive identical messages are coalesced into one row with a
    ``(xN)`` counter, and history is bounded to ``max_entries`` rows.
    """

    def __init__(self, *, title: str | None = None, height_px: int = 120, max_entries: int = 500) -> None:
        self._entries: List[_Entry] = []
        self._height_px = int(height_px)
        self._max_entries = int(max_entries)
        self.widget = w.HTML()
        if title:
            self.panel = w.VBox([w.HTML(f"<b>{html.escape(str(title))}</b>"), self.widget])
        else:
            self.panel = self.widget
        self.clear()

    @property
    def entries(self) -> List[tuple]:
        """``(level, message, count)`` rows, oldest first."""
        return [(e.level, e.message, e.count) for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()
        self._render()

    def info(self, message: str) -> None:
        self._add("info", message)

    def warning(self, message: str) -> None:
        self._add("warning", message)

    def error(self, message: str) -> None:
        self._add("error", message)

    def extend(self, messages: Iterable[str]) -> None:
        """Add several messages, each routed by :func:`classify`."""
        for m in messages:
            self._add(classify(m), m)

    def _add(self, level: Level, message: str) -> None:
        msg = "" if message is None else str(message)

        last = self._entries[-1] if self._entries else None
        if last is not None and last.level == level and last.message == msg:
            last.count += 1
        else:
            self._entries.append(_Entry(level=level, message=msg))
            if len(self._entries) > self._max_entries:
                self._entries = self._entries[-self._max_entries :]
        self._render()

    def _render(self) -> None:
        rows = []
        for e in self._entries:
            suffix = f" (x{e.count})" if e.count > 1 else ""
            rows.append(
                f"<div style='color:{_COLORS[e.level]}; white-space:pre-wrap; font-family:monospace;'>"
                f"{html.escape(e.message + suffix)}</div>"
            )
        inner = "".join(rows) if rows else "<div style='color:#666;'>No diagnostics.</div>"
        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:6px; max-height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{inner}</div>"
        )
