"""Todo service layer with business logic."""

import structlog

from core.exceptions import StoreError, TodoNotFoundError, TodoOperationError
from domain.entities.todo import Todo
from domain.repositories.todo_repository import ITodoRepository

logger = structlog.get_logger()


class TodoService:
    """Service layer for todo operations.

    Every mutating operation first makes sure the collection document exists,
    then issues its primary store call. Store failures surface as
    ``TodoOperationError`` (HTTP 500) for all operations.
    """

    def __init__(self, repository: ITodoRepository) -> None:
        self._repository = repository

    async def list_todos(self) -> dict[str, Todo]:
        """Get every todo keyed by ID. A missing collection reads as empty."""
        try:
            return await self._repository.get_all()
        except StoreError as e:
            raise TodoOperationError("list todos", e.message) from e

    async def create(self, task: str) -> Todo:
        """Create a new, uncompleted todo."""
        todo = Todo(task=task)
        try:
            await self._repository.ensure_collection()
            await self._repository.save(todo.id, todo)
        except StoreError as e:
            raise TodoOperationError("create todo", e.message) from e

        logger.info("todo_created", todo_id=todo.id)
        return todo

    async def toggle(self, todo_id: str) -> Todo:
        """Flip the completed flag of an existing todo.

        Raises:
            TodoNotFoundError: If no todo has this ID.
            TodoOperationError: If the store call fails.
        """
        try:
            await self._repository.ensure_collection()
            todo = await self._repository.get(todo_id)
            if todo is None:
                raise TodoNotFoundError(todo_id)

            updated = todo.toggled()
            await self._repository.save(todo_id, updated)
        except StoreError as e:
            raise TodoOperationError("update todo", e.message) from e

        logger.info("todo_toggled", todo_id=todo_id, completed=updated.completed)
        return updated

    async def delete(self, todo_id: str) -> None:
        """Delete a todo. Deleting an unknown ID is not an error."""
        try:
            await self._repository.ensure_collection()
            deleted = await self._repository.delete(todo_id)
        except StoreError as e:
            raise TodoOperationError("delete todo", e.message) from e

        logger.info("todo_deleted", todo_id=todo_id, existed=deleted > 0)
