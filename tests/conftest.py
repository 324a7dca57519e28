"""
Test configuration and fixtures.

Provides:
- A shared PromptOptimizer
- An in-memory HistoryReporter
- A FastAPI test client wired to in-memory history and a fresh optimize gate
"""

import pytest
from fastapi.testclient import TestClient

from history_reporter.reporter import HistoryReporter
from history_reporter.store import MemoryKeyValueStore
from prompt_optimizer import PromptOptimizer
from prompt_optimizer.scheduling import OptimizeGate

WEAK_PROMPT = "Do something nice with this stuff."
MIDDLING_PROMPT = "Write a story about a dragon"
STRONG_PROMPT = (
    "Act as a senior data analyst. First, review the attached CSV of 2023 sales. "
    "Then list the top 5 products by revenue in a table. "
    "Finally, provide a detailed summary of exactly which regions grew."
)


@pytest.fixture
def optimizer():
    return PromptOptimizer()


@pytest.fixture
def memory_store():
    return MemoryKeyValueStore()


@pytest.fixture
def reporter(memory_store):
    return HistoryReporter(store=memory_store, capacity=5)


@pytest.fixture
def gate():
    return OptimizeGate()


@pytest.fixture
def test_client(monkeypatch, reporter, gate):
    """FastAPI client backed by in-memory history."""
    from backend import main

    monkeypatch.setattr(main, "reporter", reporter)
    monkeypatch.setattr(main, "optimize_gate", gate)
    with TestClient(main.app) as client:
        yield client
