"""Pytest configuration.

Allows running tests directly from the repo without requiring an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


@pytest.fixture(scope="session")
def registry():
    """All built-in challenges, keyed by number."""
    from aoc2020.challenge import all_challenges

    return {ch.number: ch for ch in all_challenges()}


@pytest.fixture
def input_dir(tmp_path: Path, monkeypatch):
    """A scratch input directory wired in through AOC2020_INPUT_DIR."""
    d = tmp_path / "inputs"
    d.mkdir()
    monkeypatch.setenv("AOC2020_INPUT_DIR", str(d))
    return d


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """CLI tests attach handlers to captured streams; drop them between tests."""
    import logging

    yield
    logger = logging.getLogger("aoc2020")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def scratch_registry():
    """The registry module, restored to its prior contents after the test."""
    import importlib

    registry_mod = importlib.import_module("aoc2020.challenge")
    registry_mod.all_challenges()
    before = dict(registry_mod._REGISTRY)
    yield registry_mod
    registry_mod._REGISTRY.clear()
    registry_mod._REGISTRY.update(before)
