"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
Also exposes the session operations so callers deal with a single repository.
"""

from typing import Any, Mapping, Optional

from bson.errors import BSONError
from pymongo import WriteConcern
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from config import USERS_COLLECTION
from db.connection import get_database
from models.session import Session
from models.user import User
from repositories.errors import (
    DuplicateEntityError,
    InvalidArgumentError,
    OperationResult,
)
from repositories.session_repo import SessionRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users collection."""

    def __init__(self, database: Optional[Database] = None):
        db = database if database is not None else get_database()
        self.users = db[USERS_COLLECTION]
        self.session_repo = SessionRepository(db)

    # ── USERS ─────────────────────────────────────────────

    def add_user(self, user: User) -> OperationResult:
        """
        Insert a new user, acknowledged by a majority of replica set members.

        Args:
            user: The User to persist. Its email must not be registered yet.

        Returns:
            A truthy OperationResult on success, a falsy one on backend errors.

        Raises:
            DuplicateEntityError: If a user with the same email already exists.
        """
        users = self.users.with_options(write_concern=WriteConcern(w="majority"))
        try:
            users.insert_one(user.to_document())
        except DuplicateKeyError as e:
            logger.error(f"Failed to insert user {user.email}: {e}")
            raise DuplicateEntityError("The User is already in the database.") from e
        except (PyMongoError, BSONError) as e:
            logger.error(f"Failed to insert user {user.email}: {e}")
            return OperationResult.failure(str(e))
        logger.info(f"Added user {user.email}")
        return OperationResult.success()

    def get_user(self, email: str) -> Optional[User]:
        """
        Fetch a user by email.

        Returns:
            User or None.
        """
        doc = self.users.find_one({"email": email})
        return User.from_document(doc) if doc else None

    def delete_user(self, email: str) -> OperationResult:
        """Remove a user and all of their sessions."""
        try:
            self.session_repo.delete_all(email)
        except PyMongoError as e:
            return OperationResult.failure(str(e))
        try:
            self.users.delete_many({"email": email})
        except PyMongoError as e:
            logger.error(f"Failed to delete user {email}: {e}")
            return OperationResult.failure(str(e))
        logger.info(f"Deleted user {email}")
        return OperationResult.success()

    def update_user_preferences(
        self, email: str, preferences: Optional[Mapping[str, Any]]
    ) -> OperationResult:
        """
        Replace the stored preferences of a user wholesale.

        Args:
            email: Email of the user to update.
            preferences: New preferences mapping. Cannot be None.

        Raises:
            InvalidArgumentError: If `preferences` is None.
        """
        if preferences is None:
            raise InvalidArgumentError("user preferences cannot be null")
        try:
            self.users.update_one(
                {"email": email}, {"$set": {"preferences": dict(preferences)}}
            )
        except (PyMongoError, BSONError) as e:
            logger.error(f"Failed to update preferences of user {email}: {e}")
            return OperationResult.failure(str(e))
        logger.info(f"Updated preferences of user {email}")
        return OperationResult.success()

    # ── SESSIONS ──────────────────────────────────────────

    def create_user_session(self, user_id: str, jwt: str) -> OperationResult:
        """Create or refresh the session of `user_id`."""
        return self.session_repo.create(user_id, jwt)

    def get_user_session(self, user_id: str) -> Optional[Session]:
        return self.session_repo.get(user_id)

    def delete_user_sessions(self, user_id: str) -> OperationResult:
        return self.session_repo.delete_all(user_id)
