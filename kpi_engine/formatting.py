# Display formatting shared by the UI and the CLI runner.
# Two-decimal rounding is half-up on the exact float value, so ties such as
# 50.125 read 50.13 like a browser's toFixed / Intl.NumberFormat.

from decimal import ROUND_HALF_UP, Decimal

NOT_APPLICABLE = "N/A"


def q2(value: float) -> Decimal:
    return Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_percent(value: float) -> str:
    """Two decimals and a trailing '%', e.g. 75.00%."""
    return f"{q2(value):.2f}%"


def format_currency(value: float) -> str:
    """US dollars with thousands separators, e.g. $1,234.56."""
    if value < 0:
        return f"-${q2(-value):,.2f}"
    return f"${q2(value):,.2f}"
