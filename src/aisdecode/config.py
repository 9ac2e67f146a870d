from __future__ import annotations

from pathlib import Path
import json


def get_default_options() -> dict:
    return {
        "types": None,          # list of message types to keep; None keeps all
        "position_only": False,
        "header": True,
    }


def load_options(path: str | Path) -> dict:
    """Load batch options from a JSON file, layered over the defaults."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a JSON object")
    options = get_default_options()
    unknown = sorted(set(data) - set(options))
    if unknown:
        raise ValueError(f"{p}: unknown option(s): {', '.join(unknown)}")
    options.update(data)
    if options["types"] is not None:
        options["types"] = [int(t) for t in options["types"]]
    return options
