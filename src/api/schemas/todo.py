"""Pydantic schemas for Todo API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, RootModel

from domain.entities.todo import Todo


class TodoCreate(BaseModel):
    """Schema for creating a Todo."""

    task: str


class TodoResponse(BaseModel):
    """Schema for Todo response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "01HQ3Z7Y8K2N4M6P8R0T2V4X6Z",
                "task": "buy milk",
                "created_at": "2026-01-28T10:00:00Z",
                "completed": False,
            }
        },
    )

    id: str
    task: str
    created_at: datetime
    completed: bool

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoResponse":
        return cls.model_validate(todo)


class TodoCollectionResponse(RootModel[dict[str, TodoResponse]]):
    """The full collection, a mapping from todo ID to todo."""
