"""
Streamlit UI for the hotel KPI calculator.

Single page that:

- Loads the calculator config from `config/hotel_kpi.json`
- Binds an `UpdateController` to the session state
- Renders three inputs, a Clear button and the Occupancy / ADR / RevPAR tiles

Every committed edit recomputes all three metrics before the page reruns.
"""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from kpi_engine.config import DEFAULT_CONFIG_PATH, load_config
from ui import kpi_panel


@st.cache_data(show_spinner=False)
def _load_config_cached(path_str: str) -> dict:
    """Streamlit-cached wrapper around `load_config`.

    `streamlit`'s cache requires hashable arguments, so we take a string path.
    """
    return load_config(Path(path_str))


def calculator_page() -> None:
    st.title("Hotel KPI Calculator")
    st.caption("Occupancy, ADR and RevPAR update as you enter figures for the period.")

    try:
        config = _load_config_cached(str(DEFAULT_CONFIG_PATH))
    except Exception as exc:  # noqa: BLE001
        st.error(f"Could not load calculator config: {exc}")
        st.stop()

    controller, view = kpi_panel.build_controller(st, config)
    kpi_panel.render(st, controller, view, config)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(
        page_title="Hotel KPI Calculator",
        layout="centered",
    )
    calculator_page()


if __name__ == "__main__":
    main()
