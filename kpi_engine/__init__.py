from .types import (
    Defined,
    KpiDisplay,
    KpiInputs,
    MetricDisplay,
    MetricResult,
    Undefined,
    UndefinedReason,
)
from .metrics import compute_adr, compute_all, compute_occupancy, compute_revpar
from .formatting import format_currency, format_percent

__all__ = [
    "Defined",
    "KpiDisplay",
    "KpiInputs",
    "MetricDisplay",
    "MetricResult",
    "Undefined",
    "UndefinedReason",
    "compute_adr",
    "compute_all",
    "compute_occupancy",
    "compute_revpar",
    "format_currency",
    "format_percent",
]
