from __future__ import annotations

import json

from core.high_score import HighScoreStore, load_high_score


def test_missing_file_starts_at_zero(tmp_path) -> None:
    store = HighScoreStore(tmp_path / "scores" / "best.json")
    assert store.best == 0


def test_submit_is_a_monotone_max(tmp_path) -> None:
    path = tmp_path / "best.json"
    store = HighScoreStore(path)

    assert store.submit(120) is True
    assert store.submit(80) is False
    assert store.submit(120) is False
    assert store.best == 120

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["high_score"] == 120
    assert data["version"] == 1
    assert "saved_at" in data

    assert HighScoreStore(path).best == 120


def test_corrupt_file_loads_as_zero(tmp_path) -> None:
    path = tmp_path / "best.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_high_score(path) == 0

    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    assert load_high_score(path) == 0

    path.write_text(json.dumps({"high_score": "lots"}), encoding="utf-8")
    assert load_high_score(path) == 0


def test_is_new_best(tmp_path) -> None:
    store = HighScoreStore(tmp_path / "best.json")
    store.submit(10)
    assert store.is_new_best(11)
    assert not store.is_new_best(10)
