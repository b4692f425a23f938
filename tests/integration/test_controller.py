import pytest

from kpi_engine.types import MetricDisplay
from ui.controller import BASELINE, UpdateController

ZERO_ROOMS = "Total Rooms must be > 0"
ZERO_SOLD = "Rooms Sold must be > 0 to compute ADR"


class RecordingView:
    """Dict-backed input source / display sink that remembers every call."""

    def __init__(self, **raw):
        self.raw = {"total_rooms": "", "rooms_sold": "", "total_revenue": ""}
        self.raw.update(raw)
        self.rendered = {}
        self.updated = []
        self.focused = None

    def read(self, field):
        return self.raw[field]

    def write(self, field, raw):
        self.raw[field] = raw

    def focus(self, field):
        self.focused = field

    def render(self, metric, display):
        self.rendered[metric] = display

    def mark_updated(self, metric):
        self.updated.append(metric)

    def clear_updated(self):
        self.updated = []


def _run(**raw):
    view = RecordingView(**raw)
    controller = UpdateController(view, view)
    return controller, view, controller.on_input_change()


def test_scenario_a_normal():
    _, view, d = _run(total_rooms="200", rooms_sold="150", total_revenue="15000.00")
    assert (d.occupancy.text, d.adr.text, d.revpar.text) == ("75.00%", "$100.00", "$75.00")
    assert d.occupancy.hint == d.adr.hint == d.revpar.hint == ""
    assert view.updated == ["occupancy", "adr", "revpar"]

def test_scenario_b_zero_sold():
    _, view, d = _run(total_rooms="100", rooms_sold="0", total_revenue="0.00")
    assert d.occupancy == MetricDisplay("0.00%", "", updated=True)
    assert d.adr == MetricDisplay("N/A", ZERO_SOLD)
    assert d.revpar == MetricDisplay("$0.00", "", updated=True)
    assert "adr" not in view.updated

def test_scenario_c_zero_total():
    _, view, d = _run(total_rooms="0", rooms_sold="0", total_revenue="500.00")
    assert d.occupancy == MetricDisplay("N/A", ZERO_ROOMS)
    assert d.adr == MetricDisplay("N/A", ZERO_SOLD)
    assert d.revpar == MetricDisplay("N/A", ZERO_ROOMS)
    assert view.updated == []

def test_scenario_d_decimals():
    _, _, d = _run(total_rooms="75", rooms_sold="60", total_revenue="8567.89")
    assert (d.occupancy.text, d.adr.text, d.revpar.text) == ("80.00%", "$142.80", "$114.24")

def test_zero_total_rooms_with_sales_keeps_adr():
    _, _, d = _run(total_rooms="", rooms_sold="10", total_revenue="1000")
    assert d.occupancy.text == "N/A" and d.revpar.text == "N/A"
    assert d.adr == MetricDisplay("$100.00", "", updated=True)

def test_overbooking_has_no_hint():
    _, _, d = _run(total_rooms="100", rooms_sold="110", total_revenue="11000")
    assert d.occupancy == MetricDisplay("110.00%", "", updated=True)

def test_negative_raw_values_are_clamped_before_compute():
    _, _, d = _run(total_rooms="-100", rooms_sold="5", total_revenue="-50")
    assert d.occupancy == MetricDisplay("N/A", ZERO_ROOMS)
    assert d.adr.text == "$0.00"

def test_hints_clear_once_inputs_become_valid():
    controller, view, d = _run(total_rooms="0", rooms_sold="0", total_revenue="10")
    assert d.adr.hint == ZERO_SOLD
    view.write("total_rooms", "10")
    view.write("rooms_sold", "5")
    d = controller.on_input_change()
    assert d.occupancy.hint == d.adr.hint == d.revpar.hint == ""
    assert view.rendered["adr"] == MetricDisplay("$2.00", "", updated=True)

def test_recompute_is_idempotent():
    controller, _, first = _run(total_rooms="75", rooms_sold="60", total_revenue="8567.89")
    assert controller.on_input_change() == first
    assert controller.on_input_change() == first

def test_clear_resets_inputs_display_and_focus():
    controller, view, _ = _run(total_rooms="0", rooms_sold="0", total_revenue="500")
    d = controller.on_clear()
    assert d == BASELINE
    assert controller.display == BASELINE
    assert (d.occupancy.text, d.adr.text, d.revpar.text) == ("0.00%", "$0.00", "$0.00")
    assert d.occupancy.hint == d.adr.hint == d.revpar.hint == ""
    assert view.raw == {"total_rooms": "", "rooms_sold": "", "total_revenue": ""}
    assert view.rendered["adr"] == BASELINE.adr
    assert view.focused == "total_rooms"

def test_commit_coerces_negative_to_zero():
    view = RecordingView(total_rooms="-5", rooms_sold="abc", total_revenue="12")
    controller = UpdateController(view, view)
    assert controller.on_commit("total_rooms") is True
    assert view.raw["total_rooms"] == "0"
    assert controller.on_commit("rooms_sold") is False
    assert view.raw["rooms_sold"] == "abc"
    assert controller.on_commit("total_revenue") is False
    assert view.raw["total_revenue"] == "12"

def test_commit_rejects_unknown_field():
    view = RecordingView()
    with pytest.raises(KeyError):
        UpdateController(view, view).on_commit("rate")

def test_custom_hints_override_defaults():
    view = RecordingView(total_rooms="0")
    controller = UpdateController(view, view, hints={"zero_total_rooms": "Enter room count"})
    d = controller.on_input_change()
    assert d.occupancy.hint == "Enter room count"
    assert d.adr.hint == ZERO_SOLD

def test_two_decimal_ties_round_up():
    _, _, d = _run(total_rooms="4", rooms_sold="2", total_revenue="100.25")
    assert d.adr.text == "$50.13"
    _, _, d = _run(total_rooms="800", rooms_sold="1", total_revenue="0")
    assert d.occupancy.text == "0.13%"
