from fastapi import Depends, HTTPException, Request

from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.todo_repository import MongoTodoRepository
from adapter.mongodb.user_repository import MongoUserRepository
from api.config import Settings
from port.identity_verifier import IdentityVerifier
from port.todo_repository import TodoRepository
from port.user_repository import UserRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _get_db(settings: Settings):
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client(settings.mongo_url)
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[settings.database_name]


def get_user_repo(settings: Settings = Depends(get_settings)) -> UserRepository:
    return MongoUserRepository(_get_db(settings))


def get_todo_repo(settings: Settings = Depends(get_settings)) -> TodoRepository:
    return MongoTodoRepository(_get_db(settings))


def get_identity_verifier(request: Request) -> IdentityVerifier:
    """The single verifier built with the app; it keeps one certificate-fetching session."""
    return request.app.state.identity_verifier
