"""MongoDB implementation of TodoRepository."""

from logging import getLogger

from pymongo import DESCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import TODOS_COLLECTION_NAME
from domain.model.errors import StorageError
from domain.model.todo import Todo

logger = getLogger(__name__)


class MongoTodoRepository:
    def __init__(self, db: Database):
        self.collection = db[TODOS_COLLECTION_NAME]

    # ── indexes ────────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for todos collection."""
        try:
            self.collection.create_index(
                [('owner_id', 1), ('created_at', -1)],
                name='idx_todos_owner_created_at',
            )
            return True
        except PyMongoError as e:
            logger.error("Failed to create todos indexes", extra={"error": str(e)})
            return False

    # ── mapping ───────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Todo:
        return Todo(
            id=doc['_id'],
            text=doc['text'],
            owner_id=doc['owner_id'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            done=doc.get('done', False),
        )

    def _to_document(self, todo: Todo) -> dict:
        return {
            '_id': todo.id,
            'text': todo.text,
            'done': todo.done,
            'owner_id': todo.owner_id,
            'created_at': todo.created_at,
            'updated_at': todo.updated_at,
        }

    # ── CRUD ──────────────────────────────────────────────────

    def save(self, todo: Todo) -> Todo:
        try:
            self.collection.insert_one(self._to_document(todo))
        except PyMongoError as e:
            logger.error("Failed to save todo", extra={"owner_id": todo.owner_id, "error": str(e)})
            raise StorageError("Failed to save todo") from e
        return todo

    def find_by_owner(self, owner_id: str) -> list[Todo]:
        try:
            cursor = self.collection.find({'owner_id': owner_id}).sort('created_at', DESCENDING)
            return [self._to_domain(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error("Failed to find todos", extra={"owner_id": owner_id, "error": str(e)})
            raise StorageError("Failed to find todos") from e

    def delete(self, todo_id: str, owner_id: str) -> bool:
        """Delete in a single filtered operation so ownership is checked atomically."""
        try:
            result = self.collection.delete_one({'_id': todo_id, 'owner_id': owner_id})
        except PyMongoError as e:
            logger.error("Failed to delete todo", extra={"todo_id": todo_id, "error": str(e)})
            raise StorageError("Failed to delete todo") from e
        return result.deleted_count > 0
