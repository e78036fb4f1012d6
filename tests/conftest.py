"""Shared pytest configuration."""

import os

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class InlineThreadPool:
    """Stand-in for QThreadPool that runs workers synchronously on start()."""

    def __init__(self):
        self.started = []

    def start(self, runnable):
        self.started.append(runnable)
        runnable.run()


class DeferredThreadPool:
    """Stand-in for QThreadPool that holds workers until run_all() is called."""

    def __init__(self):
        self.pending = []

    def start(self, runnable):
        self.pending.append(runnable)

    def run_all(self):
        while self.pending:
            self.pending.pop(0).run()


@pytest.fixture
def inline_pool():
    """Thread pool that runs each worker immediately."""
    return InlineThreadPool()


@pytest.fixture
def deferred_pool():
    """Thread pool that lets the test decide when workers run."""
    return DeferredThreadPool()
