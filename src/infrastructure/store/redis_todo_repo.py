"""RedisJSON implementation of Todo repository."""

import json
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from core.exceptions import StoreError
from domain.entities.todo import Todo

ROOT_PATH = "$"


def todo_path(todo_id: str) -> str:
    """JSONPath selecting one entry of the collection by ID.

    The ID is emitted as a quoted JSON string in bracket notation so that
    path-parameter text cannot change the shape of the expression.
    """
    return f"$[{json.dumps(todo_id, ensure_ascii=False)}]"


class RedisTodoRepository:
    """RedisJSON implementation of ITodoRepository.

    The whole collection lives under a single key as one JSON object mapping
    todo ID to todo document.
    """

    def __init__(self, client: redis.Redis, key: str) -> None:
        self._client = client
        self._key = key

    async def ensure_collection(self) -> None:
        """Initialize the collection to ``{}`` only if the key does not exist.

        ``JSON.SET ... NX`` makes this a single idempotent command, so two
        concurrent first requests cannot wipe entries written in between.
        """
        try:
            await self._client.json().set(self._key, ROOT_PATH, {}, nx=True)
        except RedisError as e:
            raise StoreError(str(e)) from e

    async def get_all(self) -> dict[str, Todo]:
        """Get the whole collection. An absent key reads as an empty mapping."""
        try:
            result = await self._client.json().get(self._key, ROOT_PATH)
        except RedisError as e:
            raise StoreError(str(e)) from e

        document = _first_match(result)
        if document is None:
            return {}
        try:
            return {todo_id: Todo.from_document(entry) for todo_id, entry in document.items()}
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise StoreError(f"malformed collection document: {e}") from e

    async def get(self, todo_id: str) -> Todo | None:
        """Get a todo by ID."""
        try:
            result = await self._client.json().get(self._key, todo_path(todo_id))
        except RedisError as e:
            raise StoreError(str(e)) from e

        document = _first_match(result)
        if document is None:
            return None
        try:
            return Todo.from_document(document)
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"malformed todo document: {e}") from e

    async def save(self, todo_id: str, todo: Todo) -> None:
        """Write the full todo under ``todo_id``, replacing any previous entry."""
        try:
            await self._client.json().set(self._key, todo_path(todo_id), todo.to_document())
        except RedisError as e:
            raise StoreError(str(e)) from e

    async def delete(self, todo_id: str) -> int:
        """Delete a todo by ID. Returns the number of entries removed."""
        try:
            deleted = await self._client.json().delete(self._key, todo_path(todo_id))
        except RedisError as e:
            raise StoreError(str(e)) from e
        return int(deleted or 0)


def _first_match(result: Any) -> Any:
    """Unwrap a JSONPath ``JSON.GET`` reply, which is a list of matches."""
    if result is None:
        return None
    if isinstance(result, list):
        return result[0] if result else None
    return result
