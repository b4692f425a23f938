# ui/bindings.py
# Input source / display sink backed by a mapping (Streamlit's session_state
# or a plain dict in tests and the CLI).

from typing import Dict, MutableMapping, Optional

from kpi_engine.types import KpiDisplay, MetricDisplay

from .controller import BASELINE, FIELDS

DISPLAY_KEY = "kpi_display"
UPDATED_KEY = "kpi_updated"
FOCUS_KEY = "kpi_focus"


class SessionStateView:
    """Keeps raw inputs under their field names and displays under DISPLAY_KEY."""

    def __init__(self, state: MutableMapping, initial: Optional[Dict[str, str]] = None):
        self.state = state
        for f in FIELDS:
            if f not in self.state:
                self.state[f] = ""
        if initial:
            for f, raw in initial.items():
                self.state[f] = raw
        if DISPLAY_KEY not in self.state:
            self.state[DISPLAY_KEY] = {
                "occupancy": BASELINE.occupancy,
                "adr": BASELINE.adr,
                "revpar": BASELINE.revpar,
            }
        if UPDATED_KEY not in self.state:
            self.state[UPDATED_KEY] = set()

    # InputSource
    def read(self, field: str) -> str:
        raw = self.state.get(field, "")
        return "" if raw is None else str(raw)

    def write(self, field: str, raw: str) -> None:
        self.state[field] = raw

    def focus(self, field: str) -> None:
        self.state[FOCUS_KEY] = field

    # DisplaySink
    def render(self, metric: str, display: MetricDisplay) -> None:
        self.state[DISPLAY_KEY][metric] = display

    def mark_updated(self, metric: str) -> None:
        self.state[UPDATED_KEY].add(metric)

    def clear_updated(self) -> None:
        self.state[UPDATED_KEY] = set()

    def displays(self) -> KpiDisplay:
        d = self.state[DISPLAY_KEY]
        return KpiDisplay(occupancy=d["occupancy"], adr=d["adr"], revpar=d["revpar"])

    def pop_updated(self) -> set:
        """Return and reset the metrics flagged since the last render."""
        updated = set(self.state[UPDATED_KEY])
        self.state[UPDATED_KEY] = set()
        return updated

    def pop_focus(self) -> Optional[str]:
        return self.state.pop(FOCUS_KEY, None)
