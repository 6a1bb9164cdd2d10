"""Port for todo data access."""

from typing import Protocol

from domain.model.todo import Todo


class TodoRepository(Protocol):
    """Protocol for owner-scoped todo storage.

    Implementations raise StorageError when the store fails.
    """

    def save(self, todo: Todo) -> Todo:
        """Insert a new todo and return it."""
        ...

    def find_by_owner(self, owner_id: str) -> list[Todo]:
        """Get all todos of one owner, sorted by created_at descending."""
        ...

    def delete(self, todo_id: str, owner_id: str) -> bool:
        """Delete a todo only if it belongs to owner_id.

        Returns True if deleted, False if missing or owned by someone else.
        """
        ...
