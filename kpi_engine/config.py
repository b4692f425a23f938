"""
Calculator configuration.

The JSON file holds the input field labels, the hint messages shown next to
"N/A" tiles, and a set of named sample scenarios. It is validated against
`schema/hotel_kpi.json` on load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "hotel_kpi.json"
SCHEMA_PATH = PROJECT_ROOT / "schema" / "hotel_kpi.json"

DEFAULT_HINTS = {
    "zero_total_rooms": "Total Rooms must be > 0",
    "zero_rooms_sold": "Rooms Sold must be > 0 to compute ADR",
}

DEFAULT_LABELS = {
    "total_rooms": "Total Rooms Available",
    "rooms_sold": "Rooms Sold",
    "total_revenue": "Total Room Revenue ($)",
}


class ConfigError(ValueError):
    """Raised when a configuration file does not match the schema."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


def load_schema(path: Path | str = SCHEMA_PATH) -> dict:
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def validate_config(config: Dict[str, Any], schema: dict | None = None) -> None:
    """Raise ConfigError for the first schema violation, if any."""
    validator = Draft202012Validator(schema if schema is not None else load_schema())
    errors = sorted(validator.iter_errors(config), key=lambda e: e.json_path)
    if errors:
        err = errors[0]
        where = "/".join(str(p) for p in err.absolute_path) or "<root>"
        logger.error("Invalid calculator config at %s: %s", where, err.message)
        raise ConfigError(err.message, where)


def load_config(path: Path | str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load and validate a calculator config, filling labels and hints with defaults."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"not valid JSON ({exc.msg}, line {exc.lineno})", str(p)) from exc

    validate_config(config)

    config["labels"] = {**DEFAULT_LABELS, **config.get("labels", {})}
    config["hints"] = {**DEFAULT_HINTS, **config.get("hints", {})}
    config.setdefault("scenarios", [])
    logger.debug("Loaded calculator config from %s (%d scenarios)", p, len(config["scenarios"]))
    return config
