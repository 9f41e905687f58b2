"""Shared pytest fixtures."""

import pytest  # type: ignore


@pytest.fixture
def anyio_backend():
    return "asyncio"
