"""Todo service — owner-scoped task operations."""

from domain.model.errors import NotFoundError, ValidationError
from domain.model.todo import Todo
from port.todo_repository import TodoRepository


def list_todos(repo: TodoRepository, owner_id: str) -> list[Todo]:
    """All todos of the owner, most recent first. Empty list when none exist."""
    return repo.find_by_owner(owner_id)


def create_todo(repo: TodoRepository, owner_id: str, text: str | None) -> Todo:
    """Create a todo owned by owner_id.

    Raises:
        ValidationError: text missing or empty
    """
    if not text:
        raise ValidationError("Text is required")
    return repo.save(Todo.create(text=text, owner_id=owner_id))


def delete_todo(repo: TodoRepository, owner_id: str, todo_id: str) -> None:
    """Delete a todo owned by owner_id.

    A todo owned by someone else is reported exactly like a missing one.

    Raises:
        NotFoundError: no such todo for this owner
    """
    if not repo.delete(todo_id, owner_id):
        raise NotFoundError("Todo not found")
