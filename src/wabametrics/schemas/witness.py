from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Witness(BaseModel):
    """One candidate solution handed over by the solver.

    The solver's own key names (``cost``, ``in``, ``weights``) are accepted
    alongside ``score``, ``accepted`` and ``support``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    score: float = Field(default=0.0, validation_alias=AliasChoices("score", "cost"))
    accepted: frozenset[str] = Field(
        default_factory=frozenset, validation_alias=AliasChoices("accepted", "in")
    )
    support: dict[str, float] = Field(
        default_factory=dict, validation_alias=AliasChoices("support", "weights")
    )
    contraries: dict[str, str] = Field(default_factory=dict)

    @field_validator("score", mode="before")
    @classmethod
    def _missing_score(cls, v: Any) -> Any:
        return 0.0 if v is None else v

    @field_validator("accepted", mode="before")
    @classmethod
    def _missing_accepted(cls, v: Any) -> Any:
        return frozenset() if v is None else v

    @field_validator("support", "contraries", mode="before")
    @classmethod
    def _missing_mapping(cls, v: Any) -> Any:
        return {} if v is None else v
