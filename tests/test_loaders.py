from __future__ import annotations

import json
from pathlib import Path

import pytest

from wabametrics.loaders import load_witnesses, witnesses_from_payload


def test_load_jsonl_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "w.jsonl"
    path.write_text('{"score": 1, "accepted": ["a"]}\n\n{"cost": 2, "in": ["b"]}\n', encoding="utf-8")
    ws = load_witnesses(path)
    assert [w.score for w in ws] == [1.0, 2.0]
    assert ws[1].accepted == frozenset({"b"})


def test_load_json_list_and_wrapped(tmp_path: Path) -> None:
    path = tmp_path / "w.json"
    path.write_text(json.dumps({"witnesses": [{"score": 4}]}), encoding="utf-8")
    assert [w.score for w in load_witnesses(path)] == [4.0]


def test_load_solver_output(tmp_path: Path) -> None:
    path = tmp_path / "clingo.json"
    payload = {"Result": "SATISFIABLE", "Call": [{"Witnesses": [{"Value": ["in(a)", "discarded_attack(x,a,2)"]}]}]}
    path.write_text(json.dumps(payload), encoding="utf-8")
    (w,) = load_witnesses(path, monoid="count")
    assert w.score == 1.0
    assert w.accepted == frozenset({"a"})


def test_unexpected_payload_raises() -> None:
    with pytest.raises(ValueError):
        witnesses_from_payload({"foo": 1})
