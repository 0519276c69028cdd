"""
db/init_db.py
-------------
Creates the unique indexes the repositories rely on.
Run this module directly to bootstrap a fresh database:
    python -m db.init_db
"""

from typing import Optional

from pymongo import ASCENDING
from pymongo.database import Database

from config import SESSIONS_COLLECTION, USERS_COLLECTION
from db.connection import get_database
from utils.logger import get_logger

logger = get_logger(__name__)

# (collection, field) pairs that must be unique
UNIQUE_INDEXES = [
    (USERS_COLLECTION, "email"),
    (SESSIONS_COLLECTION, "user_id"),
]


def create_indexes(database: Optional[Database] = None) -> None:
    """
    Create the unique indexes on users.email and sessions.user_id.
    Safe to call multiple times (create_index is a no-op for an identical index).
    """
    db = database if database is not None else get_database()
    for collection, field in UNIQUE_INDEXES:
        try:
            db[collection].create_index([(field, ASCENDING)], unique=True)
        except Exception as e:
            logger.error(f"Failed to create unique index on {collection}.{field}: {e}")
            raise
    logger.info("Database indexes initialized successfully.")


if __name__ == "__main__":
    from db.connection import init_client
    init_client()
    create_indexes()
    print("✅ Database indexes created successfully.")
