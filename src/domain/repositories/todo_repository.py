"""Todo repository protocol."""

from typing import Protocol

from domain.entities.todo import Todo


class ITodoRepository(Protocol):
    """Repository interface over the single todo collection document."""

    async def ensure_collection(self) -> None:
        """Create the collection document as an empty mapping if it is absent."""
        ...

    async def get_all(self) -> dict[str, Todo]:
        """Get the whole collection keyed by todo ID."""
        ...

    async def get(self, todo_id: str) -> Todo | None:
        """Get a todo by ID."""
        ...

    async def save(self, todo_id: str, todo: Todo) -> None:
        """Write the full todo entry under the given ID."""
        ...

    async def delete(self, todo_id: str) -> int:
        """Delete a todo and return how many entries were removed."""
        ...
