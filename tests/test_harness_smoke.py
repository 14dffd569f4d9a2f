import csv
import json
from pathlib import Path

import pytest
from wordscramble.datasets import WORDS_EN
from wordscramble.dictionary import WordListDictionary
from wordscramble.harness import run_batch, run_game, write_csv, write_manifest
from wordscramble.solvers import create_solver, get_solver_ids

DICT = WordListDictionary.from_path(WORDS_EN)
VOCAB = DICT.vocabulary()


def test_solver_registry():
    assert get_solver_ids() == ["exhaustive", "random_guess"]
    with pytest.raises(ValueError):
        create_solver("nope")


def test_exhaustive_reaches_max_score():
    solver = create_solver("exhaustive")
    r = run_game(solver, "silkworm", dictionary=DICT, vocabulary=VOCAB, seed=42)
    assert r["success"] is True
    assert r["score"] == r["max_score"] > 0
    assert sum(r["rejections"].values()) == 0
    # longest words are played first
    lengths = [len(w) for w, _ in r["history"]]
    assert lengths == sorted(lengths, reverse=True)


def test_random_guess_respects_budget():
    solver = create_solver("random_guess")
    r = run_game(solver, "silkworm", dictionary=DICT, vocabulary=VOCAB,
                 max_submissions=30, seed=7)
    assert r["submitted"] == 30
    assert r["accepted"] + sum(r["rejections"].values()) == r["submitted"]
    assert r["score"] <= r["max_score"]


def test_run_game_is_reproducible():
    a = run_game(create_solver("random_guess"), "absolute", dictionary=DICT,
                 vocabulary=VOCAB, max_submissions=20, seed=3)
    b = run_game(create_solver("random_guess"), "absolute", dictionary=DICT,
                 vocabulary=VOCAB, max_submissions=20, seed=3)
    assert a["history"] == b["history"]


def test_budget_guardrail():
    with pytest.raises(ValueError):
        run_game(create_solver("exhaustive"), "silkworm", dictionary=DICT,
                 vocabulary=VOCAB, max_submissions=0)


def test_run_batch_and_outputs(tmp_path: Path):
    results = run_batch(create_solver("exhaustive"), ["silkworm", "", "Baseball", "absolute"],
                        dictionary=DICT, vocabulary=VOCAB, seed=1, sample=2)
    assert [r["root"] for r in results] == ["silkworm", "baseball"]
    for r in results:
        r["solver_id"] = "exhaustive"

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["root"] == "silkworm" and rows[0]["too_short"] == "0"
    assert "silk" in rows[0]["words"].split()

    m = write_manifest({"num_games": 2}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8")) == {"num_games": 2}


def test_run_batch_normalizes_roots_like_the_game():
    # decomposed accent + padding + caps all map to one canonical root
    results = run_batch(create_solver("exhaustive"), ["  SILKWORM\n", "cafe\u0301"],
                        dictionary=DICT, vocabulary=VOCAB, seed=1)
    assert [r["root"] for r in results] == ["silkworm", "caf\u00e9"]
