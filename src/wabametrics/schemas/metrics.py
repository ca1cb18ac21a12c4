from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from wabametrics.context import AnalysisContext


def _json_number(v: float | None) -> float | str | None:
    # JSON has no infinities; null already means "absent".
    if v is not None and math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    return v


class GlobalMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    optimal: float
    second_best: float | None = Field(default=None, serialization_alias="secondBest")
    gap: float | None = None
    slack: float | None = 0.0
    allowed_levels: list[float] = Field(default_factory=list, serialization_alias="allowedLevels")
    num_in_s: int = Field(serialization_alias="numInS")
    total_models: int = Field(serialization_alias="totalModels")
    diversity: float = 0.0

    @field_serializer("optimal", "second_best", "gap", "slack", when_used="json")
    def _ser_number(self, v: float | None) -> float | str | None:
        return _json_number(v)

    @field_serializer("allowed_levels", when_used="json")
    def _ser_levels(self, v: list[float]) -> list[float | str | None]:
        return [_json_number(x) for x in v]


class AtomMetrics(BaseModel):
    """Per-atom entailment over S and score sensitivity over all models.

    ``None`` means "not applicable": no model with / without the atom, or no
    support data at all. It is serialized as ``null``, never as 0; infinite
    solver weights are serialized as ``"Infinity"`` / ``"-Infinity"``.
    """

    model_config = ConfigDict(frozen=True)

    brave_s: bool = Field(serialization_alias="brave_S")
    cautious_s: bool = Field(serialization_alias="cautious_S")
    best_with: float | None = Field(default=None, serialization_alias="bestWith")
    best_without: float | None = Field(default=None, serialization_alias="bestWithout")
    regret: float | None = None
    penalty: float | None = None
    pi_s: float | None = Field(default=None, serialization_alias="Pi_S")
    n_s: float | None = Field(default=None, serialization_alias="N_S")
    net_s: float | None = Field(default=None, serialization_alias="net_S")
    contrary: str | None = None

    @field_serializer(
        "best_with", "best_without", "regret", "penalty", "pi_s", "n_s", "net_s", when_used="json"
    )
    def _ser_number(self, v: float | None) -> float | str | None:
        return _json_number(v)


class ContextLabels(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: str
    optimal: str
    slack: str
    gap: str
    better: str
    worse: str


class ContextInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    polarity: Literal["cost", "reward"]
    better_direction: Literal["lower", "higher"] = Field(serialization_alias="betterDirection")
    comparator: str
    sort_ascending: bool = Field(serialization_alias="sortAscending")
    labels: ContextLabels = Field(serialization_alias="metricLabels")

    @classmethod
    def from_context(cls, ctx: AnalysisContext) -> ContextInfo:
        lb = ctx.labels
        return cls(
            polarity=ctx.polarity,
            better_direction=ctx.better_direction,
            comparator=ctx.comparator,
            sort_ascending=ctx.sort_ascending,
            labels=ContextLabels(
                score=lb.score,
                optimal=lb.optimal,
                slack=lb.slack,
                gap=lb.gap,
                better=lb.better,
                worse=lb.worse,
            ),
        )


class MetricsResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    global_metrics: GlobalMetrics = Field(serialization_alias="global")
    atoms: dict[str, AtomMetrics] = Field(default_factory=dict)
    has_support: bool = Field(default=False, serialization_alias="hasSupport")
    context: ContextInfo

    def to_payload(self) -> dict[str, Any]:
        """Render with the key names consumed by the presentation layer."""
        return self.model_dump(mode="json", by_alias=True)
