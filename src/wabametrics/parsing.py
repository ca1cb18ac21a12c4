from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from wabametrics.schemas.witness import Witness

_IN = re.compile(r"^in\(([^)]+)\)$")
_CONTRARY = re.compile(r"^contrary\(([^,]+),\s*([^)]+)\)$")
_SUPPORTED_WITH_WEIGHT = re.compile(r"^supported_with_weight\(([^,]+),\s*([^)]+)\)$")
_DISCARDED_WEIGHT = re.compile(r"discarded_attack\([^,]+,\s*[^,]+,\s*([^)]+)\)")

SUCCESSFUL_RESULTS = {"SATISFIABLE", "OPTIMUM FOUND"}

_MONOIDS: dict[str, Callable[[list[float]], float]] = {
    "max": max,
    "sum": sum,
    "min": min,
    "count": lambda ws: float(len(ws)),
}
_MONOID_NAMES = {
    name: base
    for base in _MONOIDS
    for name in (base, f"{base}_minimization", f"{base}_maximization")
}


@dataclass(frozen=True)
class ParsedAnswerSet:
    accepted: tuple[str, ...] = ()
    contraries: dict[str, str] = field(default_factory=dict)
    weights: dict[str, float] = field(default_factory=dict)
    discarded: tuple[str, ...] = ()


def parse_weight(value: str | int | float | None) -> float:
    """Solver weight to float; ``#sup``/``#inf`` are the infinities, junk is 0."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip()
    if s == "#sup":
        return math.inf
    if s == "#inf":
        return -math.inf
    try:
        return float(s)
    except ValueError:
        return 0.0


def parse_answer_set(predicates: Sequence[str]) -> ParsedAnswerSet:
    """Pick the predicates that feed a witness; everything else is ignored."""
    accepted: list[str] = []
    contraries: dict[str, str] = {}
    weights: dict[str, float] = {}
    discarded: list[str] = []

    for raw in predicates:
        pred = raw.strip()

        m = _IN.match(pred)
        if m:
            accepted.append(m.group(1))
            continue
        m = _CONTRARY.match(pred)
        if m:
            contraries[m.group(1).strip()] = m.group(2).strip()
            continue
        m = _SUPPORTED_WITH_WEIGHT.match(pred)
        if m:
            weights[m.group(1).strip()] = parse_weight(m.group(2))
            continue
        if pred.startswith("discarded_attack("):
            discarded.append(pred)

    return ParsedAnswerSet(
        accepted=tuple(accepted),
        contraries=contraries,
        weights=weights,
        discarded=tuple(discarded),
    )


def extract_cost(witness: Mapping[str, Any]) -> float:
    """Cost from the solver's ``Optimization`` field (last entry for lexicographic lists)."""
    opt = witness.get("Optimization")
    if opt is None:
        return 0.0
    if isinstance(opt, (list, tuple)):
        if not opt:
            return 0.0
        opt = opt[-1]
    return parse_weight(opt)


def cost_from_discarded(discarded: Sequence[str], monoid: str) -> float:
    """Aggregate discarded-attack weights with the monoid (max, sum, min or count)."""
    weights = []
    for attack in discarded:
        m = _DISCARDED_WEIGHT.search(attack)
        if m:
            weights.append(parse_weight(m.group(1)))
    if not weights:
        return 0.0

    base = _MONOID_NAMES.get(monoid)
    if base is None:
        return 0.0
    return _MONOIDS[base](weights)


def witnesses_from_solver_output(payload: Mapping[str, Any], monoid: str = "sum") -> list[Witness]:
    """Build witnesses from a clingo JSON result (``--outf=2``)."""
    if payload.get("Result") not in SUCCESSFUL_RESULTS:
        return []
    calls = payload.get("Call") or []
    raw_witnesses = (calls[0].get("Witnesses") or []) if calls else []

    out: list[Witness] = []
    for w in raw_witnesses:
        parsed = parse_answer_set(w.get("Value") or [])
        cost = extract_cost(w)
        if "Optimization" not in w and parsed.discarded:
            cost = cost_from_discarded(parsed.discarded, monoid)
        out.append(
            Witness(
                score=cost,
                accepted=frozenset(parsed.accepted),
                support=parsed.weights,
                contraries=parsed.contraries,
            )
        )
    return out
