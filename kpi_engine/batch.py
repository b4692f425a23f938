"""
Table-at-a-time KPI evaluation.

Applies the same rules as `kpi_engine.metrics` to a DataFrame with one row per
period (day, week, month...). Undefined metrics come out as NaN with the hint
text in the matching "... Hint" column, so the CSV reads the same way the
calculator tiles do.
"""

from __future__ import annotations

from typing import Dict

import numpy as np
import pandas as pd

from .config import DEFAULT_HINTS
from .formatting import q2
from .metrics import compute_all
from .normalize import normalize
from .types import KpiInputs, MetricResult

INPUT_COLUMNS = {
    "total_rooms": "Total Rooms",
    "rooms_sold": "Rooms Sold",
    "total_revenue": "Total Revenue",
}
OUTPUT_COLUMNS = ["Occupancy %", "ADR", "RevPAR", "Occupancy Hint", "ADR Hint", "RevPAR Hint"]


class MissingColumnsError(KeyError):
    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"missing input columns: {', '.join(missing)}")
        self.missing = missing


def cents(x) -> np.ndarray:
    """Round to cents half-up; NaN (undefined) stays NaN."""
    return np.array([v if np.isnan(v) else float(q2(v)) for v in np.asarray(x, dtype=float)])


def _normalize_column(s: pd.Series) -> np.ndarray:
    return np.array([0.0 if pd.isna(v) else normalize(str(v)) for v in s], dtype=float)


def _safe_div(num: np.ndarray, den: np.ndarray) -> np.ndarray:
    out = np.full(num.shape, np.nan)
    np.divide(num, den, out=out, where=den != 0)
    return out


def normalized_inputs(df: pd.DataFrame) -> pd.DataFrame:
    """Return the three input columns parsed and clamped to >= 0."""
    missing = [c for c in INPUT_COLUMNS.values() if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing)
    return pd.DataFrame(
        {c: _normalize_column(df[c]) for c in INPUT_COLUMNS.values()},
        index=df.index,
    )


def compute_frame(df: pd.DataFrame, hints: Dict[str, str] | None = None) -> pd.DataFrame:
    """Return a copy of `df` with KPI and hint columns appended."""
    h = {**DEFAULT_HINTS, **(hints or {})}
    n = normalized_inputs(df)
    rooms = n["Total Rooms"].to_numpy()
    sold = n["Rooms Sold"].to_numpy()
    revenue = n["Total Revenue"].to_numpy()

    out = df.copy()
    out["Occupancy %"] = cents(_safe_div(sold, rooms) * 100)
    out["ADR"] = cents(_safe_div(revenue, sold))
    out["RevPAR"] = cents(_safe_div(revenue, rooms))
    out["Occupancy Hint"] = np.where(rooms == 0, h["zero_total_rooms"], "")
    out["ADR Hint"] = np.where(sold == 0, h["zero_rooms_sold"], "")
    out["RevPAR Hint"] = np.where(rooms == 0, h["zero_total_rooms"], "")
    return out


def rollup(df: pd.DataFrame) -> Dict[str, MetricResult]:
    """KPIs for all periods combined: sum the inputs, then compute once."""
    n = normalized_inputs(df)
    totals = KpiInputs(
        total_rooms=float(n["Total Rooms"].sum()),
        rooms_sold=float(n["Rooms Sold"].sum()),
        total_revenue=float(n["Total Revenue"].sum()),
    )
    return compute_all(totals)
