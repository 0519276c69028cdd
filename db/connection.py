"""
db/connection.py
----------------
Manages the process-wide MongoDB client.
pymongo's MongoClient pools its own sockets, so one client is shared by every repository.
"""

from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import MONGODB_DATABASE, MONGODB_TIMEOUT_MS, MONGODB_URI
from utils.logger import get_logger

logger = get_logger(__name__)

_client: Optional[MongoClient] = None


def init_client(uri: Optional[str] = None) -> None:
    """
    Create the shared MongoDB client.

    The driver connects lazily; call `ping()` to verify the server is reachable.

    Args:
        uri: Connection string. Defaults to MONGODB_URI.
    """
    global _client
    if _client is not None:
        return
    _client = MongoClient(uri or MONGODB_URI, serverSelectionTimeoutMS=MONGODB_TIMEOUT_MS)
    logger.info("MongoDB client initialized.")


def get_client() -> MongoClient:
    """
    Return the shared client.

    Raises:
        RuntimeError: If the client has not been initialized.
    """
    if _client is None:
        raise RuntimeError("MongoDB client not initialized. Call init_client() first.")
    return _client


def get_database(name: Optional[str] = None) -> Database:
    """Return a database handle (MONGODB_DATABASE unless `name` is given)."""
    return get_client()[name or MONGODB_DATABASE]


def ping() -> bool:
    """Round-trip the `ping` command. Returns False if the server cannot be reached."""
    try:
        get_client().admin.command("ping")
        return True
    except PyMongoError as e:
        logger.error(f"MongoDB ping failed: {e}")
        return False


def close_client() -> None:
    """Close the shared client and its connection pool."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed.")
