import argparse
from pathlib import Path

import pandas as pd

from kpi_engine.batch import compute_frame, rollup
from kpi_engine.config import DEFAULT_CONFIG_PATH, load_config
from kpi_engine.formatting import NOT_APPLICABLE, format_currency, format_percent
from kpi_engine.types import Defined
from ui.bindings import SessionStateView
from ui.controller import UpdateController


def evaluate(raw_inputs: dict, hints: dict | None = None):
    """Run one recompute cycle over raw text inputs and return the KpiDisplay."""
    view = SessionStateView({}, initial=raw_inputs)
    controller = UpdateController(view, view, hints=hints)
    return controller.on_input_change()


def _print_display(title: str, display) -> None:
    print(title)
    for label, d in (("Occupancy", display.occupancy), ("ADR", display.adr), ("RevPAR", display.revpar)):
        line = f"  {label:<10} {d.text:>14}"
        if d.hint:
            line += f"   ({d.hint})"
        print(line)


def _fmt(result, formatter) -> str:
    return formatter(result.value) if isinstance(result, Defined) else NOT_APPLICABLE


def main() -> None:
    parser = argparse.ArgumentParser(description="Hotel Occupancy / ADR / RevPAR calculator")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--total-rooms", type=str, default="")
    parser.add_argument("--rooms-sold", type=str, default="")
    parser.add_argument("--total-revenue", type=str, default="")
    parser.add_argument("--csv", type=Path, help="CSV with Total Rooms, Rooms Sold, Total Revenue columns")
    parser.add_argument("--out", type=Path, default=Path("out/hotel_kpis.csv"))
    parser.add_argument("--scenarios", action="store_true", help="Evaluate the sample scenarios from the config")
    args = parser.parse_args()

    config = load_config(args.config)

    if args.scenarios:
        for sc in config["scenarios"]:
            _print_display(sc["name"], evaluate(sc["inputs"], config["hints"]))
        return

    if args.csv is not None:
        df = pd.read_csv(args.csv)
        out_df = compute_frame(df, config["hints"])
        args.out.parent.mkdir(parents=True, exist_ok=True)
        out_df.to_csv(args.out, index=False)

        totals = rollup(df)
        print(
            f"{len(out_df)} periods | Occupancy {_fmt(totals['occupancy'], format_percent)}"
            f" | ADR {_fmt(totals['adr'], format_currency)}"
            f" | RevPAR {_fmt(totals['revpar'], format_currency)}"
        )
        print(f"Done – wrote {args.out}")
        return

    raw = {
        "total_rooms": args.total_rooms,
        "rooms_sold": args.rooms_sold,
        "total_revenue": args.total_revenue,
    }
    _print_display("KPIs", evaluate(raw, config["hints"]))


if __name__ == "__main__":
    main()
