"""Root conftest for all tests.

Shared fixtures: a virtual-clock scheduler and a commit recorder.
"""

import pytest
from loguru import logger

from cronselect.select.clicks import ManualScheduler
from cronselect.select.types import Selection


@pytest.fixture(autouse=True)
def reset_logger():
    """Keep loguru sinks added by a test (e.g. the CLI) from leaking into the next one."""
    yield
    logger.remove()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def commits() -> list[Selection]:
    """Records every selection a control commits."""
    return []
