from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import orjson


def not_nan(x: float | None) -> float | None:
    """``None`` for undefined arithmetic such as ``inf - inf``."""
    if x is None or math.isnan(x):
        return None
    return x


def dumps_json(payload: Any) -> bytes:
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)


def dump_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps_json(payload))


def load_json(path: Path) -> Any:
    return orjson.loads(path.read_bytes())
