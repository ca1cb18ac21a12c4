from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from wabametrics.context import AnalysisContext
from wabametrics.models import Model
from wabametrics.utils import not_nan

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_LEVELS = 2
DEFAULT_MIN_COVERAGE = 3


@dataclass(frozen=True)
class Selection:
    levels: tuple[float, ...]
    optimal: float
    second_best: float | None
    gap: float | None
    allowed_levels: tuple[float, ...]
    slack: float | None
    members: tuple[Model, ...]
    diversity: float


def jaccard_distance(a: frozenset[str], b: frozenset[str]) -> float | None:
    union = a | b
    if not union:
        return None
    return 1.0 - len(a & b) / len(union)


def jaccard_diversity(members: Sequence[Model]) -> float:
    """Mean pairwise Jaccard distance of accepted sets (pairs with an empty union are skipped)."""
    if len(members) <= 1:
        return 0.0
    total = 0.0
    pairs = 0
    for x, y in combinations(members, 2):
        d = jaccard_distance(x.accepted, y.accepted)
        if d is None:
            continue
        total += d
        pairs += 1
    return total / pairs if pairs else 0.0


def _members_at(models: Sequence[Model], levels: Sequence[float]) -> list[Model]:
    allowed = set(levels)
    return [m for m in models if m.score in allowed]


def _slack(allowed: Sequence[float], optimal: float, ctx: AnalysisContext) -> float | None:
    if not allowed:
        return 0.0
    if ctx.sort_ascending:
        return not_nan(max(allowed) - optimal)
    return not_nan(optimal - min(allowed))


def select_near_optimal(
    models: Sequence[Model],
    ctx: AnalysisContext,
    *,
    initial_levels: int = DEFAULT_INITIAL_LEVELS,
    min_coverage: int = DEFAULT_MIN_COVERAGE,
) -> Selection:
    """Pick the near-optimal set S as a union of whole score levels.

    The first ``initial_levels`` levels are taken, then further levels are
    added one at a time while S holds fewer than ``min_coverage`` models.
    """
    if not models:
        raise ValueError("Cannot select a near-optimal set from zero models.")
    if initial_levels < 1:
        raise ValueError(f"initial_levels must be >= 1, got {initial_levels}")
    if min_coverage < 0:
        raise ValueError(f"min_coverage must be >= 0, got {min_coverage}")

    levels = ctx.sort_levels(m.score for m in models)
    optimal = levels[0]
    second_best = levels[1] if len(levels) > 1 else None
    gap = not_nan(abs(second_best - optimal)) if second_best is not None else None

    n_allowed = min(initial_levels, len(levels))
    members = _members_at(models, levels[:n_allowed])
    while len(members) < min_coverage and n_allowed < len(levels):
        n_allowed += 1
        members = _members_at(models, levels[:n_allowed])

    allowed_levels = tuple(levels[:n_allowed])
    diversity = jaccard_diversity(members)

    logger.debug(
        "Selected %d/%d models over %d/%d levels (optimal=%s, diversity=%.3f)",
        len(members),
        len(models),
        n_allowed,
        len(levels),
        optimal,
        diversity,
    )

    return Selection(
        levels=tuple(levels),
        optimal=optimal,
        second_best=second_best,
        gap=gap,
        allowed_levels=allowed_levels,
        slack=_slack(allowed_levels, optimal, ctx),
        members=tuple(members),
        diversity=diversity,
    )
