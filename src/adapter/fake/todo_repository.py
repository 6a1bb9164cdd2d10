"""In-memory implementation of TodoRepository for testing."""

from domain.model.todo import Todo


class FakeTodoRepository:
    def __init__(self):
        self.store: dict[str, Todo] = {}

    def save(self, todo: Todo) -> Todo:
        self.store[todo.id] = todo
        return todo

    def find_by_owner(self, owner_id: str) -> list[Todo]:
        owned = [t for t in self.store.values() if t.is_owned_by(owner_id)]
        return sorted(owned, key=lambda t: t.created_at, reverse=True)

    def delete(self, todo_id: str, owner_id: str) -> bool:
        todo = self.store.get(todo_id)
        if not todo or not todo.is_owned_by(owner_id):
            return False
        del self.store[todo_id]
        return True
