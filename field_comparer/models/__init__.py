from .modes import DataType, DateMode, NumberMode
from .results import UNKNOWN, CompareResult, Evaluation, VisualState
from .inputs import ComparisonInputs

__all__ = [
    "DataType",
    "DateMode",
    "NumberMode",
    "UNKNOWN",
    "CompareResult",
    "Evaluation",
    "VisualState",
    "ComparisonInputs",
]
