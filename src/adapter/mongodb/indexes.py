"""MongoDB index setup, run once at app startup."""

from logging import getLogger

logger = getLogger(__name__)


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections.

    Existing indexes are never dropped; a conflicting definition is logged
    by the repository and reported as a failure.
    """
    from adapter.mongodb.todo_repository import MongoTodoRepository
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        MongoUserRepository(db).ensure_indexes(),
        MongoTodoRepository(db).ensure_indexes(),
    ]
    if not all(results):
        logger.error("Index setup incomplete", extra={"results": results})
    return all(results)
