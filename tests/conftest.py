"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    # The CLI configures structlog globally; keep each test on the defaults.
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
