# tools/update_golden.py
import json
from pathlib import Path

from kpi_engine.config import DEFAULT_CONFIG_PATH, PROJECT_ROOT, load_config
from runner.run_kpis import evaluate

GOLDEN_DIR = PROJECT_ROOT / "golden"


def main():
    config = load_config(DEFAULT_CONFIG_PATH)

    out = []
    for sc in config["scenarios"]:
        display = evaluate(sc["inputs"], config["hints"])
        out.append({"name": sc["name"], "inputs": sc["inputs"], "display": display.as_dict()})

    GOLDEN_DIR.mkdir(parents=True, exist_ok=True)
    Path(GOLDEN_DIR / "scenarios.json").write_text(json.dumps(out, indent=2) + "\n")

    manifest = {
        "config_version": config.get("version"),
        "config_path": str(DEFAULT_CONFIG_PATH.relative_to(PROJECT_ROOT)),
        "scenarios_captured": len(out),
    }
    Path(GOLDEN_DIR / "manifest.json").write_text(json.dumps(manifest, indent=2) + "\n")
    print("Golden snapshots updated:", [p.name for p in GOLDEN_DIR.glob("*.json")])


if __name__ == "__main__":
    main()
