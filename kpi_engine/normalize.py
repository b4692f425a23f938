# kpi_engine/normalize.py
# Raw text -> non-negative float. Malformed input is zero, never an error.

import math
import re
from typing import Optional

# Leading numeric prefix, the way a browser's parseFloat reads "120 rooms".
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_raw(raw: Optional[str]) -> float:
    """Parse user text as a float. Empty, unparseable or non-finite text is 0."""
    if not raw:
        return 0.0
    m = _NUMBER_PREFIX.match(raw)
    if m is None:
        return 0.0
    value = float(m.group(1))
    return value if math.isfinite(value) else 0.0


def normalize(raw: Optional[str]) -> float:
    return max(0.0, parse_raw(raw))
