"""conftest.py for benchmarks.

One session-scoped event loop is shared by every benchmark so loop start-up
cost is not part of the measurement.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """Run a coroutine to completion on the shared loop."""

    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run
