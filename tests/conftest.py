from __future__ import annotations

import pytest


@pytest.fixture
def mock_witnesses() -> list[dict]:
    return [
        {"score": 10, "accepted": ["a", "b"], "support": {"a": 100, "b": 80}, "contraries": {"a": "c_a", "b": "c_b"}},
        {"score": 10, "accepted": ["a", "c"], "support": {"a": 100, "c": 60}, "contraries": {"a": "c_a"}},
        {"score": 15, "accepted": ["b", "d"], "support": {"b": 90, "d": 50}, "contraries": {"b": "c_b"}},
        {"score": 20, "accepted": ["e"], "support": {"e": 40}, "contraries": {}},
    ]


@pytest.fixture
def plain_witnesses() -> list[dict]:
    return [
        {"score": 5, "accepted": ["x"]},
        {"score": 10, "accepted": ["y"]},
        {"score": 15, "accepted": ["z"]},
    ]
