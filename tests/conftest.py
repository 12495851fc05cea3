"""Shared pytest configuration for titlecascade tests.

Every test runs inside its own ``title_scope()`` so module-level
shortcuts (``set_title_part`` and friends) never leak state between
tests.
"""

import pytest

from titlecascade.context import title_scope


@pytest.fixture(autouse=True)
def registry():
    """Fresh context-scoped registry for each test."""
    with title_scope() as scoped:
        yield scoped


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
