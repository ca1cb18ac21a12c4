from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from wabametrics.models import build_contrary_table, normalize_witnesses
from wabametrics.schemas.witness import Witness


def test_missing_fields_are_defaulted() -> None:
    (m,) = normalize_witnesses([{}])
    assert m.score == 0.0
    assert m.accepted == frozenset()
    assert dict(m.support) == {}
    assert dict(m.contraries) == {}
    assert not m.has_support


def test_null_fields_are_defaulted() -> None:
    w = Witness.model_validate({"score": None, "accepted": None, "support": None, "contraries": None})
    assert w.score == 0.0
    assert w.accepted == frozenset()
    assert w.support == {}


def test_solver_key_names_are_accepted() -> None:
    w = Witness.model_validate({"cost": 7, "in": ["a"], "weights": {"a": "3"}})
    assert w.score == 7.0
    assert w.accepted == frozenset({"a"})
    assert w.support == {"a": 3.0}


def test_order_and_length_are_kept() -> None:
    models = normalize_witnesses([{"score": 3}, {"score": 1}, {"score": 2}])
    assert [m.score for m in models] == [3.0, 1.0, 2.0]


def test_non_iterable_input_raises() -> None:
    with pytest.raises(TypeError):
        normalize_witnesses(42)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        normalize_witnesses("abc")  # type: ignore[arg-type]


def test_non_numeric_score_surfaces() -> None:
    with pytest.raises(ValidationError):
        normalize_witnesses([{"score": "not a number"}])


def test_models_are_immutable() -> None:
    (m,) = normalize_witnesses([{"score": 1, "support": {"a": 1.0}}])
    with pytest.raises(TypeError):
        m.support["a"] = 2.0  # type: ignore[index]


def test_contrary_table_merges_models(caplog: pytest.LogCaptureFixture) -> None:
    models = normalize_witnesses(
        [
            {"contraries": {}},
            {"contraries": {"a": "c_a"}},
            {"contraries": {"b": "c_b", "a": "other"}},
        ]
    )
    with caplog.at_level(logging.WARNING, logger="wabametrics.models"):
        table = build_contrary_table(models)
    assert table == {"a": "c_a", "b": "c_b"}
    assert "Conflicting contrary for a" in caplog.text
