"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    # CLI commands configure structlog against the runner's captured streams.
    yield
    structlog.reset_defaults()
