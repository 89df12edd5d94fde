# topmark:header:start
#
#   project      : EDNKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared pytest setup for the EDNKit test suite.

- EDNKit logs at TRACE for the whole run, so the cache's compile messages are
  exercised too.
- ``EDNKIT_LOG_LEVEL`` from the developer's shell is ignored.
- The encoder cache is process-wide. Tests that need a shape compiled from
  scratch request the `fresh_cache` fixture.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from ednkit.config import logging
from ednkit.constants import LOG_LEVEL_ENV_VAR
from ednkit.encoder.cache import clear_cache

F = TypeVar("F", bound=Callable[..., object])


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Type-preserving `pytest.mark.parametrize`.

    Args:
        *args (Any): Forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator returning the test function unchanged in type.
    """
    return cast("Callable[[F], F]", pytest.mark.parametrize(*args, **kwargs))


#: Marks a long-running property test (skipped by the default ``nox -s qa`` run).
mark_hypothesis_slow: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@pytest.fixture(autouse=True)
def silence_ednkit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep an exported EDNKIT_LOG_LEVEL from leaking into tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def fresh_cache() -> Iterator[None]:
    """Start (and finish) the test with an empty encoder cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log EDNKit at TRACE for the whole run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
