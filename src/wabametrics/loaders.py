from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from wabametrics.parsing import witnesses_from_solver_output
from wabametrics.schemas.witness import Witness
from wabametrics.utils import load_json


def load_witnesses_jsonl(path: Path) -> list[Witness]:
    """Load witnesses from a JSONL file (one JSON object per line).

    Each line:
      { "score": 10, "accepted": ["a", "b"], "support": {"a": 100}, "contraries": {"a": "c_a"} }
    """
    out: list[Witness] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        out.append(Witness.model_validate(orjson.loads(line)))
    return out


def witnesses_from_payload(payload: Any, monoid: str = "sum") -> list[Witness]:
    """Accept either a list of witness objects or a clingo JSON result."""
    if isinstance(payload, dict) and "Call" in payload:
        return witnesses_from_solver_output(payload, monoid=monoid)
    if isinstance(payload, dict) and "witnesses" in payload:
        payload = payload["witnesses"]
    if not isinstance(payload, list):
        raise ValueError("Expected a list of witnesses or a solver result with a 'Call' entry.")
    return [Witness.model_validate(w) for w in payload]


def load_witnesses(path: Path, monoid: str = "sum") -> list[Witness]:
    if path.suffix == ".jsonl":
        return load_witnesses_jsonl(path)
    return witnesses_from_payload(load_json(path), monoid=monoid)
