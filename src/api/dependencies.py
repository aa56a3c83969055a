"""Dependency injection factories for the API."""

import redis.asyncio as redis
from fastapi import Request

from core.config import settings
from domain.services.todo_service import TodoService
from infrastructure.store.redis_todo_repo import RedisTodoRepository


def get_redis(request: Request) -> redis.Redis:
    """Get the shared Redis client opened by the application lifespan."""
    return request.app.state.redis  # type: ignore[no-any-return]


def get_todo_service(request: Request) -> TodoService:
    """Get a Todo service bound to the shared Redis client."""
    return TodoService(RedisTodoRepository(get_redis(request), settings.todos_key))
