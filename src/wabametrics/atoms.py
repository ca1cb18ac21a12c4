from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from wabametrics.context import AnalysisContext
from wabametrics.models import Model
from wabametrics.schemas.metrics import AtomMetrics
from wabametrics.utils import not_nan


def collect_atoms(models: Iterable[Model]) -> list[str]:
    """Every atom that is accepted somewhere or carries support somewhere."""
    atoms: set[str] = set()
    for m in models:
        atoms.update(m.accepted)
        atoms.update(m.support.keys())
    return sorted(atoms)


def _net_support(atom: str, contrary: str, members: Sequence[Model]) -> float | None:
    if not members:
        return None
    return not_nan(sum(m.support_of(atom) - m.support_of(contrary) for m in members) / len(members))


def compute_atom_metrics(
    atom: str,
    models: Sequence[Model],
    members: Sequence[Model],
    optimal: float,
    ctx: AnalysisContext,
    *,
    has_support: bool,
    contraries: Mapping[str, str],
) -> AtomMetrics:
    """Entailment is judged over ``members`` (S); score sensitivity over all ``models``."""
    brave = any(atom in m.accepted for m in members)
    cautious = bool(members) and all(atom in m.accepted for m in members)

    best_with = ctx.best(m.score for m in models if atom in m.accepted)
    best_without = ctx.best(m.score for m in models if atom not in m.accepted)

    regret = not_nan(abs(best_with - optimal)) if best_with is not None else None
    penalty = (
        not_nan(best_with - best_without) if best_with is not None and best_without is not None else None
    )

    if not has_support:
        return AtomMetrics(
            brave_s=brave,
            cautious_s=cautious,
            best_with=best_with,
            best_without=best_without,
            regret=regret,
            penalty=penalty,
        )

    supports = [m.support_of(atom) for m in members]
    contrary = contraries.get(atom)
    return AtomMetrics(
        brave_s=brave,
        cautious_s=cautious,
        best_with=best_with,
        best_without=best_without,
        regret=regret,
        penalty=penalty,
        pi_s=max(supports) if supports else 0.0,
        n_s=min(supports) if supports else 0.0,
        net_s=_net_support(atom, contrary, members) if contrary else None,
        contrary=contrary or None,
    )
