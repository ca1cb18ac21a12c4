"""Entailment and sensitivity metrics over WABA solver witnesses."""

from __future__ import annotations

__version__ = "0.1.0"
