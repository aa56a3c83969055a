"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

# Settings require a store URL at import time
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.exceptions import StoreError
from domain.entities.todo import Todo


class InMemoryTodoRepository:
    """Dict-backed ITodoRepository mirroring the RedisJSON document semantics.

    ``document`` is ``None`` until the collection is initialized, like an
    absent key. Setting ``fail_with`` makes every call raise ``StoreError``.
    """

    def __init__(self) -> None:
        self.document: dict[str, dict[str, Any]] | None = None
        self.fail_with: str | None = None
        self.ensure_calls = 0

    def _check(self) -> None:
        if self.fail_with is not None:
            raise StoreError(self.fail_with)

    async def ensure_collection(self) -> None:
        self._check()
        self.ensure_calls += 1
        if self.document is None:
            self.document = {}

    async def get_all(self) -> dict[str, Todo]:
        self._check()
        if self.document is None:
            return {}
        return {todo_id: Todo.from_document(doc) for todo_id, doc in self.document.items()}

    async def get(self, todo_id: str) -> Todo | None:
        self._check()
        if self.document is None or todo_id not in self.document:
            return None
        return Todo.from_document(self.document[todo_id])

    async def save(self, todo_id: str, todo: Todo) -> None:
        self._check()
        if self.document is None:
            raise StoreError("ERR new objects must be created at the root")
        self.document[todo_id] = todo.to_document()

    async def delete(self, todo_id: str) -> int:
        self._check()
        if self.document is None or todo_id not in self.document:
            return 0
        del self.document[todo_id]
        return 1


@pytest.fixture
def repository() -> InMemoryTodoRepository:
    """Create an empty in-memory repository (collection key absent)."""
    return InMemoryTodoRepository()


@pytest.fixture
def redis_client() -> MagicMock:
    """Mock redis client whose ``json()`` commands are awaitable."""
    client = MagicMock()
    client.json.return_value = AsyncMock()
    client.ping = AsyncMock(return_value=True)
    return client


@pytest.fixture
async def client(
    repository: InMemoryTodoRepository, redis_client: MagicMock
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client backed by the in-memory repository.

    ASGITransport does not run the lifespan, so the Redis connection is
    replaced by overriding the dependencies that would use it.
    """
    from api.dependencies import get_redis, get_todo_service
    from domain.services.todo_service import TodoService
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_todo_service] = lambda: TodoService(repository)
    app.dependency_overrides[get_redis] = lambda: redis_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
