from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wabametrics.atoms import collect_atoms, compute_atom_metrics
from wabametrics.context import get_analysis_context
from wabametrics.models import build_contrary_table, normalize_witnesses
from wabametrics.schemas.metrics import ContextInfo, GlobalMetrics, MetricsResult
from wabametrics.schemas.witness import Witness
from wabametrics.selection import select_near_optimal
from wabametrics.settings import settings

logger = logging.getLogger(__name__)


class MetricsConfig(BaseModel):
    """Per-run options. Unknown polarity values fall back to cost."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    polarity: str = Field(default_factory=lambda: settings.polarity)
    initial_levels: int = Field(default_factory=lambda: settings.initial_levels, ge=1)
    min_coverage: int = Field(default_factory=lambda: settings.min_coverage, ge=0)

    @field_validator("polarity", mode="before")
    @classmethod
    def _polarity_str(cls, v: Any) -> str:
        return "cost" if v is None else str(v)


def compute_metrics(
    witnesses: Iterable[Witness | Mapping[str, Any]],
    config: MetricsConfig | Mapping[str, Any] | None = None,
) -> MetricsResult | None:
    """Compute global and per-atom metrics; ``None`` when there are no witnesses."""
    cfg = config if isinstance(config, MetricsConfig) else MetricsConfig.model_validate(config or {})
    models = normalize_witnesses(witnesses)
    if not models:
        logger.info("No witnesses given; no metrics available.")
        return None

    ctx = get_analysis_context(cfg.polarity)
    sel = select_near_optimal(
        models, ctx, initial_levels=cfg.initial_levels, min_coverage=cfg.min_coverage
    )

    has_support = any(m.has_support for m in models)
    contraries = build_contrary_table(models)
    atoms = {
        atom: compute_atom_metrics(
            atom,
            models,
            sel.members,
            sel.optimal,
            ctx,
            has_support=has_support,
            contraries=contraries,
        )
        for atom in collect_atoms(models)
    }

    logger.debug("Computed metrics for %d atoms (%s polarity)", len(atoms), ctx.polarity)

    return MetricsResult(
        global_metrics=GlobalMetrics(
            optimal=sel.optimal,
            second_best=sel.second_best,
            gap=sel.gap,
            slack=sel.slack,
            allowed_levels=list(sel.allowed_levels),
            num_in_s=len(sel.members),
            total_models=len(models),
            diversity=sel.diversity,
        ),
        atoms=atoms,
        has_support=has_support,
        context=ContextInfo.from_context(ctx),
    )
