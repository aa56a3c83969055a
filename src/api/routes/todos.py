"""Todo API routes."""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_todo_service
from api.schemas.common import ErrorResponse, StatusResponse
from api.schemas.todo import TodoCollectionResponse, TodoCreate, TodoResponse
from domain.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])

_STORE_FAILURE = {500: {"model": ErrorResponse, "description": "Store failure"}}


@router.get(
    "",
    response_model=TodoCollectionResponse,
    summary="List all todos",
    responses={
        200: {"description": "Mapping of todo ID to todo"},
        **_STORE_FAILURE,
    },
)
async def list_todos(
    service: TodoService = Depends(get_todo_service),
) -> TodoCollectionResponse:
    """Get the whole collection as a mapping from ID to todo."""
    todos = await service.list_todos()
    return TodoCollectionResponse(
        {todo_id: TodoResponse.from_entity(todo) for todo_id, todo in todos.items()}
    )


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new todo",
    responses={
        201: {"description": "Todo created successfully"},
        422: {"model": ErrorResponse, "description": "Malformed request body"},
        **_STORE_FAILURE,
    },
)
async def create_todo(
    body: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoResponse:
    """Create a new todo. It starts uncompleted, with a server-generated ID."""
    todo = await service.create(body.task)
    return TodoResponse.from_entity(todo)


@router.patch(
    "/{todo_id}",
    response_model=StatusResponse,
    summary="Toggle a todo",
    responses={
        200: {"description": "Completed flag flipped"},
        500: {"model": ErrorResponse, "description": "Todo not found or store failure"},
    },
)
async def toggle_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> StatusResponse:
    """Flip the completed flag of a todo."""
    await service.toggle(todo_id)
    return StatusResponse()


@router.delete(
    "/{todo_id}",
    response_model=StatusResponse,
    summary="Delete a todo",
    responses={
        200: {"description": "Todo deleted, or it did not exist"},
        **_STORE_FAILURE,
    },
)
async def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> StatusResponse:
    """Delete a todo. Deleting an unknown ID still succeeds."""
    await service.delete(todo_id)
    return StatusResponse()
