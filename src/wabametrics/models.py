from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wabametrics.schemas.witness import Witness

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Model:
    score: float
    accepted: frozenset[str]
    support: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    contraries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_support(self) -> bool:
        return len(self.support) > 0

    def support_of(self, atom: str) -> float:
        return self.support.get(atom, 0.0)


def _to_model(w: Witness) -> Model:
    return Model(
        score=float(w.score),
        accepted=frozenset(w.accepted),
        support=MappingProxyType(dict(w.support)),
        contraries=MappingProxyType(dict(w.contraries)),
    )


def normalize_witnesses(witnesses: Iterable[Witness | Mapping[str, Any]]) -> tuple[Model, ...]:
    """Convert raw witnesses into models, keeping input order.

    Mappings are validated into ``Witness`` first, so missing fields take
    their defaults and malformed values raise ``ValidationError``.
    """
    if isinstance(witnesses, (str, bytes)) or not isinstance(witnesses, Iterable):
        raise TypeError(f"witnesses must be an iterable of witnesses, got {type(witnesses).__name__}")
    models: list[Model] = []
    for w in witnesses:
        if not isinstance(w, Witness):
            w = Witness.model_validate(w)
        models.append(_to_model(w))
    return tuple(models)


def build_contrary_table(models: Iterable[Model]) -> dict[str, str]:
    """Global assumption -> contrary vocabulary gathered from every model."""
    table: dict[str, str] = {}
    for m in models:
        for atom, contrary in m.contraries.items():
            known = table.setdefault(atom, contrary)
            if known != contrary:
                logger.warning(
                    "Conflicting contrary for %s: keeping %s, ignoring %s", atom, known, contrary
                )
    return table
