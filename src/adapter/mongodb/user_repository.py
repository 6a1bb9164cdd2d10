"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateError, StorageError
from domain.model.user import Provider, User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection.

        The unique (provider, email) index is what actually guarantees
        one identity per email and provider; the service-level lookup
        only produces the friendlier error.
        """
        try:
            self.collection.create_index(
                [('provider', 1), ('email', 1)],
                name='idx_users_provider_email',
                unique=True,
            )
            self.collection.create_index([('created_at', -1)], name='idx_users_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            provider=Provider(doc.get('provider', Provider.LOCAL.value)),
            password_hash=doc.get('password_hash') or None,
        )

    def create(
        self,
        name: str,
        email: str,
        provider: Provider,
        password_hash: str | None = None,
    ) -> User:
        """Create a new user and return the User object."""
        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user_id,
            'name': name,
            'email': email,
            'password_hash': password_hash,
            'provider': Provider(provider).value,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning(
                "User creation failed: email already exists",
                extra={"email": email, "provider": user_doc['provider']},
            )
            raise DuplicateError("Email already in use")
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise StorageError("Failed to create user") from e

        logger.info("User created", extra={"userId": user_id, "provider": user_doc['provider']})
        return self._to_domain(user_doc)

    def get_by_email(self, email: str, provider: Provider) -> User | None:
        """Find a user by email within one provider scope."""
        try:
            doc = self.collection.find_one({'email': email, 'provider': Provider(provider).value})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise StorageError("Failed to get user") from e
        return self._to_domain(doc) if doc else None
