from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from pydantic import BaseModel, Field

from wabametrics import __version__
from wabametrics.engine import MetricsConfig, compute_metrics
from wabametrics.parsing import witnesses_from_solver_output
from wabametrics.schemas.witness import Witness
from wabametrics.settings import settings


class MetricsRequest(BaseModel):
    witnesses: list[Witness] = Field(default_factory=list)
    polarity: str | None = None
    initial_levels: int | None = Field(default=None, ge=1)
    min_coverage: int | None = Field(default=None, ge=0)

    def config(self) -> MetricsConfig:
        opts = {
            "polarity": self.polarity,
            "initial_levels": self.initial_levels,
            "min_coverage": self.min_coverage,
        }
        return MetricsConfig.model_validate({k: v for k, v in opts.items() if v is not None})


def _respond(witnesses: list[Witness], cfg: MetricsConfig) -> dict[str, Any]:
    res = compute_metrics(witnesses, cfg)
    if res is None:
        return {"available": False}
    return {"available": True, **res.to_payload()}


def create_app() -> FastAPI:
    app = FastAPI(title="wabametrics", version=__version__)

    @app.get("/health")
    def health() -> dict:
        return {
            "status": "ok",
            "version": __version__,
            "defaults": {
                "polarity": settings.polarity,
                "initial_levels": settings.initial_levels,
                "min_coverage": settings.min_coverage,
                "monoid": settings.monoid,
            },
        }

    @app.post("/metrics")
    def metrics(req: MetricsRequest) -> dict:
        return _respond(req.witnesses, req.config())

    @app.post("/metrics/solver")
    def metrics_from_solver(
        payload: dict[str, Any],
        polarity: str | None = None,
        monoid: str | None = None,
    ) -> dict:
        witnesses = witnesses_from_solver_output(payload, monoid=monoid or settings.monoid)
        cfg = MetricsConfig(polarity=polarity) if polarity is not None else MetricsConfig()
        return _respond(witnesses, cfg)

    return app
