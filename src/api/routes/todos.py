"""Todo routes. Every endpoint requires a bearer token.

Endpoints:
- GET /api/todos: List the caller's todos, newest first
- POST /api/todos: Create a todo
- DELETE /api/todos/{todo_id}: Delete one of the caller's todos
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_todo_repo
from api.models import DeleteResponse, TodoRequest, TodoResponse
from api.security import get_current_user_id
from domain.model.errors import DomainError, NotFoundError, ValidationError
from domain.model.todo import Todo
from port.todo_repository import TodoRepository
from services import todo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/todos", tags=["todos"])


def _to_response(todo: Todo) -> TodoResponse:
    return TodoResponse(
        id=todo.id,
        text=todo.text,
        done=todo.done,
        owner_id=todo.owner_id,
        created_at=todo.created_at,
        updated_at=todo.updated_at,
    )


@router.get("", response_model=list[TodoResponse])
async def list_todos(
    user_id: str = Depends(get_current_user_id),
    repo: TodoRepository = Depends(get_todo_repo),
):
    try:
        todos = todo_service.list_todos(repo, user_id)
    except DomainError as e:
        logger.error("GET /api/todos error", extra={"user_id": user_id, "error": str(e)})
        raise HTTPException(status_code=500, detail="Failed to fetch todos")

    return [_to_response(todo) for todo in todos]


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(
    request: Optional[TodoRequest] = None,
    user_id: str = Depends(get_current_user_id),
    repo: TodoRepository = Depends(get_todo_repo),
):
    request = request or TodoRequest()
    try:
        todo = todo_service.create_todo(repo, user_id, request.text)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DomainError as e:
        logger.error("POST /api/todos error", extra={"user_id": user_id, "error": str(e)})
        raise HTTPException(status_code=500, detail="Failed to create todo")

    logger.info("Todo created", extra={"todo_id": todo.id, "user_id": user_id})
    return _to_response(todo)


@router.delete("/{todo_id}", response_model=DeleteResponse)
async def delete_todo(
    todo_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: TodoRepository = Depends(get_todo_repo),
):
    try:
        todo_service.delete_todo(repo, user_id, todo_id)
    except NotFoundError:
        logger.info("Todo not found for delete", extra={"todo_id": todo_id, "user_id": user_id})
        raise HTTPException(status_code=404, detail="Todo not found")
    except DomainError as e:
        logger.error("DELETE /api/todos error", extra={"todo_id": todo_id, "error": str(e)})
        raise HTTPException(status_code=500, detail="Failed to delete todo")

    logger.info("Todo deleted", extra={"todo_id": todo_id, "user_id": user_id})
    return DeleteResponse(success=True)
