from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal

Polarity = Literal["cost", "strength"]

_SEMIRING_POLARITY: dict[str, Polarity] = {
    "godel": "strength",
    "lukasiewicz": "strength",
    "arctic": "strength",
    "tropical": "cost",
    "bottleneck_cost": "cost",
}


@dataclass(frozen=True)
class MetricLabels:
    score: str
    optimal: str
    slack: str
    gap: str
    better: str
    worse: str


_COST_LABELS = MetricLabels(
    score="Cost/Penalty",
    optimal="Optimal Cost",
    slack="ε (cost slack)",
    gap="Regret from Optimal",
    better="Lower",
    worse="Higher",
)
_REWARD_LABELS = MetricLabels(
    score="Reward/Strength",
    optimal="Best Reward",
    slack="Δ (reward slack)",
    gap="Gap from Best",
    better="Higher",
    worse="Lower",
)


@dataclass(frozen=True)
class AnalysisContext:
    """Comparison semantics for one metrics run.

    Cost mode: lower scores are better and levels sort ascending.
    Reward mode: higher scores are better and levels sort descending.
    """

    polarity: Literal["cost", "reward"]
    better_direction: Literal["lower", "higher"]
    comparator: str
    sort_ascending: bool
    labels: MetricLabels = field(default=_COST_LABELS)

    def best(self, values: Iterable[float]) -> float | None:
        vals = list(values)
        if not vals:
            return None
        return min(vals) if self.sort_ascending else max(vals)

    def sort_levels(self, values: Iterable[float]) -> list[float]:
        return sorted(set(values), reverse=not self.sort_ascending)


def get_analysis_context(polarity: str | None = "cost") -> AnalysisContext:
    """Build the context for a polarity flag; anything but "strength" means cost."""
    if polarity == "strength":
        return AnalysisContext(
            polarity="reward",
            better_direction="higher",
            comparator="≥",
            sort_ascending=False,
            labels=_REWARD_LABELS,
        )
    return AnalysisContext(
        polarity="cost",
        better_direction="lower",
        comparator="≤",
        sort_ascending=True,
        labels=_COST_LABELS,
    )


def infer_polarity(semiring: str | None) -> Polarity:
    """Polarity implied by a semiring name (strength unless known to be a cost semiring)."""
    return _SEMIRING_POLARITY.get((semiring or "").strip().lower(), "strength")
