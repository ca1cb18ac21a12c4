from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WABAMETRICS_", env_file=".env", extra="ignore")

    # "cost" (lower is better) or "strength" (higher is better)
    polarity: str = "cost"

    # Near-optimal set: K initial score levels, grown until it holds m models.
    initial_levels: int = 2
    min_coverage: int = 3

    # Monoid used to cost witnesses that carry no Optimization value.
    monoid: str = "sum"

    log_level: str = "INFO"


settings = Settings()
