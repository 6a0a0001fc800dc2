"""Tests for the terminal runner script."""

import importlib.util
import io
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "run_universe.py"


@pytest.fixture
def runner():
    spec = importlib.util.spec_from_file_location("run_universe", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_runs_fixed_generations(runner):
    stream = io.StringIO()
    results = runner.run_universe(size=6, generations=3, reseed_every=2, delay=0, seed=1, stream=stream)

    assert results["generations"] == 3
    assert results["reseeds"] == 2
    # One 6-line frame per generation
    assert stream.getvalue().count("\n") == 18


def test_seeded_runs_match(runner):
    first, second = io.StringIO(), io.StringIO()
    runner.run_universe(size=8, generations=5, delay=0, seed=3, stream=first)
    runner.run_universe(size=8, generations=5, delay=0, seed=3, stream=second)
    assert first.getvalue() == second.getvalue()


def test_threshold_99_never_seeds(runner):
    results = runner.run_universe(size=5, generations=2, delay=0, seed=3,
                                  threshold=99, stream=io.StringIO())
    assert results["final_live_count"] == 0
