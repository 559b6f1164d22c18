from __future__ import annotations

from collections.abc import Generator

import pytest
from platform_core.logging import stdlib_logging
from platform_core.testing import reset_env


@pytest.fixture(autouse=True)
def reset_env_fixture() -> Generator[None, None, None]:
    """Reset the config env hook to the production reader before and after each test."""
    reset_env()
    yield
    reset_env()


@pytest.fixture(autouse=True)
def restore_root_handlers() -> Generator[None, None, None]:
    """Undo setup_logging() handler changes made by a test."""
    root = stdlib_logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
