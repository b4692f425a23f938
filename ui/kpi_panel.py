# ui/kpi_panel.py
import json

import streamlit.components.v1 as components

from .bindings import SessionStateView
from .controller import FIELDS, METRICS, UpdateController

TITLES = {
    "occupancy": "Occupancy Rate",
    "adr": "ADR (Average Daily Rate)",
    "revpar": "RevPAR",
}


def build_controller(st, config: dict) -> tuple[UpdateController, SessionStateView]:
    """Bind a controller to this session's state. Runs the first recompute once."""
    view = SessionStateView(st.session_state)
    controller = UpdateController(view, view, hints=config["hints"])
    if "kpi_initialized" not in st.session_state:
        controller.on_input_change()
        st.session_state["kpi_initialized"] = True
    return controller, view


def _on_field_commit(controller: UpdateController, field: str) -> None:
    # Streamlit text inputs fire on commit (enter / blur), so guard then recompute.
    controller.on_commit(field)
    controller.on_input_change()


def _focus_script(label: str) -> str:
    css_label = label.replace("\\", "\\\\").replace('"', '\\"')
    selector = f'input[aria-label="{css_label}"]'
    return (
        "<script>"
        f"const el = window.parent.document.querySelector({json.dumps(selector)});"
        "if (el) { el.focus(); }"
        "</script>"
    )


def render(st, controller: UpdateController, view: SessionStateView, config: dict) -> None:
    labels = config["labels"]

    st.subheader("Inputs")
    cols = st.columns(3)
    for col, field in zip(cols, FIELDS):
        col.text_input(
            labels[field],
            key=field,
            placeholder="0",
            on_change=_on_field_commit,
            args=(controller, field),
        )
    st.button("Clear", on_click=controller.on_clear)

    focus = view.pop_focus()
    if focus is not None:
        components.html(_focus_script(labels[focus]), height=0)

    st.subheader("Performance")
    displays = view.displays()
    updated = view.pop_updated()
    tiles = st.columns(3)
    for tile, metric in zip(tiles, METRICS):
        d = getattr(displays, metric)
        tile.metric(
            TITLES[metric],
            d.text,
            delta="updated" if metric in updated else None,
            delta_color="off",
        )
        if d.hint:
            tile.caption(d.hint)
