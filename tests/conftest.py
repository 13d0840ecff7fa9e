"""Shared pytest fixtures and configuration for the grepkit test suite.

Guidelines
----------
* Core tests must be pure — no I/O, no process exit.
* CLI tests pass ``argv`` explicitly and capture stdio with ``capsys``.
* Tests must not depend on OS state or the real ``sys.argv``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from grepkit.core.resolver import ArgumentResolver


@pytest.fixture
def resolver() -> ArgumentResolver:
    return ArgumentResolver()


@pytest.fixture(autouse=True)
def _reset_grepkit_logger() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` during a test."""
    logger = logging.getLogger("grepkit")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
