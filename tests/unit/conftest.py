"""Shared fixtures for unit tests."""

from datetime import datetime, timezone

import pytest

from domain.entities.todo import Todo


@pytest.fixture
def sample_todo() -> Todo:
    """A stored, uncompleted todo with a fixed ID and timestamp."""
    return Todo(
        id="01HQ3Z7Y8K2N4M6P8R0T2V4X6Z",
        task="buy milk",
        created_at=datetime(2026, 1, 28, 10, 0, tzinfo=timezone.utc),
    )
