from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from field_comparer.models.modes import DataType


class VisualState(Enum):
    """Indicator state shown by the control.

    Each state owns its glyph and the CSS class applied to the container, so
    the renderer never has to compare glyph strings.
    """

    PASS = ("pass", "✅")
    FAIL = ("fail", "❌")
    NEUTRAL = ("neutral", "—")

    def __init__(self, css_class: str, icon: str) -> None:
        self.css_class = css_class
        self.icon = icon

    @classmethod
    def from_passed(cls, passed: Optional[bool]) -> VisualState:
        if passed is None:
            return cls.NEUTRAL
        return cls.PASS if passed else cls.FAIL


@dataclass(frozen=True)
class CompareResult:
    """Outcome of a single comparator call.

    Attributes
    ----------
    passed:
        ``True`` / ``False``, or ``None`` when a required operand is missing.
    used_second_field:
        Only meaningful for single-operand date checks: ``True`` when the second
        value was the subject of the check.
    """

    passed: Optional[bool]
    used_second_field: bool = False

    @property
    def is_unknown(self) -> bool:
        return self.passed is None


UNKNOWN = CompareResult(passed=None)


@dataclass(frozen=True)
class Evaluation:
    """Everything one evaluation pass produced.

    ``data_type`` and ``result`` are ``None`` when neither a date nor a number
    could be parsed. ``warnings`` collects non-fatal diagnostics (unknown mode,
    unparseable values) for display in a log view.
    """

    state: VisualState
    label: str
    data_type: Optional[DataType] = None
    result: Optional[CompareResult] = None
    warnings: Tuple[str, ...] = ()

    @property
    def icon(self) -> str:
        return self.state.icon

    @property
    def passed(self) -> Optional[bool]:
        return None if self.result is None else self.result.passed
