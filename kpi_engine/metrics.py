# kpi_engine/metrics.py
# Pure, side-effect-free hotel KPIs. "Cannot compute" is returned, never raised.

from typing import Dict

from .types import Defined, KpiInputs, MetricResult, Undefined, UndefinedReason


def compute_occupancy(rooms_sold: float, total_rooms: float) -> MetricResult:
    """Occupancy % = rooms sold / total rooms * 100. Not capped at 100."""
    if total_rooms == 0:
        return Undefined(UndefinedReason.ZERO_TOTAL_ROOMS)
    if rooms_sold < 0 or total_rooms < 0:
        return Undefined(UndefinedReason.NEGATIVE_OPERAND)
    return Defined((rooms_sold / total_rooms) * 100)


def compute_adr(total_revenue: float, rooms_sold: float) -> MetricResult:
    """Average Daily Rate = revenue / rooms sold."""
    if rooms_sold == 0:
        return Undefined(UndefinedReason.ZERO_ROOMS_SOLD)
    if total_revenue < 0 or rooms_sold < 0:
        return Undefined(UndefinedReason.NEGATIVE_OPERAND)
    return Defined(total_revenue / rooms_sold)


def compute_revpar(total_revenue: float, total_rooms: float) -> MetricResult:
    """Revenue Per Available Room = revenue / total rooms."""
    if total_rooms == 0:
        return Undefined(UndefinedReason.ZERO_TOTAL_ROOMS)
    if total_revenue < 0 or total_rooms < 0:
        return Undefined(UndefinedReason.NEGATIVE_OPERAND)
    return Defined(total_revenue / total_rooms)


def compute_all(inputs: KpiInputs) -> Dict[str, MetricResult]:
    return {
        "occupancy": compute_occupancy(inputs.rooms_sold, inputs.total_rooms),
        "adr": compute_adr(inputs.total_revenue, inputs.rooms_sold),
        "revpar": compute_revpar(inputs.total_revenue, inputs.total_rooms),
    }
