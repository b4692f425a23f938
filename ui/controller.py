"""
Update controller for the KPI panel.

Owns the recompute-and-render cycle: it reads raw text from an input source,
normalizes it, runs the metric engine and writes one `MetricDisplay` per
metric to a display sink. Both collaborators are injected, so the same
controller drives the Streamlit page, the CLI runner and the tests.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol

from kpi_engine.config import DEFAULT_HINTS
from kpi_engine.formatting import NOT_APPLICABLE, format_currency, format_percent
from kpi_engine.metrics import compute_all
from kpi_engine.normalize import normalize, parse_raw
from kpi_engine.types import (
    Defined,
    KpiDisplay,
    KpiInputs,
    MetricDisplay,
    MetricResult,
    UndefinedReason,
)

logger = logging.getLogger(__name__)

FIELDS = ("total_rooms", "rooms_sold", "total_revenue")
METRICS = ("occupancy", "adr", "revpar")

BASELINE = KpiDisplay(
    occupancy=MetricDisplay(format_percent(0.0)),
    adr=MetricDisplay(format_currency(0.0)),
    revpar=MetricDisplay(format_currency(0.0)),
)


class InputSource(Protocol):
    def read(self, field: str) -> str: ...

    def write(self, field: str, raw: str) -> None: ...

    def focus(self, field: str) -> None: ...


class DisplaySink(Protocol):
    def render(self, metric: str, display: MetricDisplay) -> None: ...

    def mark_updated(self, metric: str) -> None: ...

    def clear_updated(self) -> None: ...


class UpdateController:
    def __init__(
        self,
        source: InputSource,
        sink: DisplaySink,
        hints: Optional[Dict[str, str]] = None,
    ) -> None:
        self.source = source
        self.sink = sink
        self.hints = {**DEFAULT_HINTS, **(hints or {})}
        self.display: KpiDisplay = BASELINE

    def read_inputs(self) -> KpiInputs:
        total_rooms, rooms_sold, total_revenue = (normalize(self.source.read(f)) for f in FIELDS)
        return KpiInputs(total_rooms, rooms_sold, total_revenue)

    def on_input_change(self) -> KpiDisplay:
        """Recompute every metric from the current raw inputs and render them."""
        inputs = self.read_inputs()
        results = compute_all(inputs)
        logger.debug("Recomputing KPIs for %s", inputs)

        displays = {name: self._to_display(name, results[name]) for name in METRICS}
        for name in METRICS:
            self.sink.render(name, displays[name])
            if displays[name].updated:
                self.sink.mark_updated(name)

        self.display = KpiDisplay(**displays)
        return self.display

    def on_clear(self) -> KpiDisplay:
        """Empty all inputs, restore the zero baseline and focus the first field."""
        for f in FIELDS:
            self.source.write(f, "")
        self.sink.render("occupancy", BASELINE.occupancy)
        self.sink.render("adr", BASELINE.adr)
        self.sink.render("revpar", BASELINE.revpar)
        self.sink.clear_updated()
        self.display = BASELINE
        self.source.focus(FIELDS[0])
        logger.info("KPI inputs cleared")
        return self.display

    def on_commit(self, field: str) -> bool:
        """Coerce a committed negative value to "0". Returns True if it changed."""
        if field not in FIELDS:
            raise KeyError(f"unknown input field: {field!r}")
        if parse_raw(self.source.read(field)) < 0:
            self.source.write(field, "0")
            logger.info("Negative value in %s coerced to 0", field)
            return True
        return False

    def _to_display(self, metric: str, result: MetricResult) -> MetricDisplay:
        if isinstance(result, Defined):
            text = format_percent(result.value) if metric == "occupancy" else format_currency(result.value)
            return MetricDisplay(text, "", updated=True)
        return MetricDisplay(NOT_APPLICABLE, self._hint_for(metric, result.reason))

    def _hint_for(self, metric: str, reason: UndefinedReason) -> str:
        if reason is UndefinedReason.ZERO_TOTAL_ROOMS and metric in ("occupancy", "revpar"):
            return self.hints["zero_total_rooms"]
        if reason is UndefinedReason.ZERO_ROOMS_SOLD and metric == "adr":
            return self.hints["zero_rooms_sold"]
        return ""
