"""
repositories/session_repo.py
-----------------------------
Data access layer for login sessions.
All queries against the `sessions` collection live here.
"""

from typing import Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from config import SESSIONS_COLLECTION
from db.connection import get_database
from models.session import Session
from repositories.errors import OperationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionRepository:
    """Repository for CRUD operations on the sessions collection."""

    def __init__(self, database: Optional[Database] = None):
        db = database if database is not None else get_database()
        self.sessions = db[SESSIONS_COLLECTION]

    # ── CREATE / UPDATE ───────────────────────────────────

    def create(self, user_id: str, jwt: str) -> OperationResult:
        """
        Store the session token of a user, replacing any existing one.

        A single upsert keeps at most one document per user_id. When two first-time
        upserts race, the unique index on user_id rejects the second insert; retrying
        then matches the winner's document and updates its token.

        Returns:
            A truthy OperationResult on success.
        """
        for attempt in range(2):
            try:
                self.sessions.update_one(
                    {"user_id": user_id}, {"$set": {"jwt": jwt}}, upsert=True
                )
                logger.info(f"Stored session for user {user_id}")
                return OperationResult.success()
            except DuplicateKeyError:
                if attempt == 0:
                    logger.warning(f"Concurrent session upsert for user {user_id}, retrying")
                    continue
                logger.error(f"Failed to upsert session for user {user_id}: duplicate key")
                return OperationResult.failure(
                    f"Session for user {user_id} could not be stored: duplicate key"
                )
            except PyMongoError as e:
                logger.error(f"Failed to upsert session for user {user_id}: {e}")
                return OperationResult.failure(str(e))

    # ── READ ──────────────────────────────────────────────

    def get(self, user_id: str) -> Optional[Session]:
        """
        Fetch the session of a user.

        Returns:
            Session or None.
        """
        doc = self.sessions.find_one({"user_id": user_id})
        return Session.from_document(doc) if doc else None

    # ── DELETE ────────────────────────────────────────────

    def delete_all(self, user_id: str) -> OperationResult:
        """Delete every session of a user. Succeeds even when none matched."""
        try:
            result = self.sessions.delete_many({"user_id": user_id})
        except PyMongoError as e:
            logger.error(f"Failed to delete sessions for user {user_id}: {e}")
            raise
        logger.info(f"Deleted {result.deleted_count} session(s) for user {user_id}")
        return OperationResult.success()
