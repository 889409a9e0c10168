from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_bucket_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so each test starts with a propagating ``bucket`` logger."""
    logger = logging.getLogger("bucket")
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)
