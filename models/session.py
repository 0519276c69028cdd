"""
models/session.py
-----------------
Domain model for login sessions.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Session:
    """
    Represents the active session of a user (at most one per user).

    Attributes:
        user_id: Identifier of the owning user (their email).
        jwt: Opaque token issued at login.
        id: MongoDB `_id` (None for new records).
    """
    user_id: str
    jwt: str
    id: Optional[Any] = None

    def to_document(self) -> dict:
        return {"user_id": self.user_id, "jwt": self.jwt}

    @classmethod
    def from_document(cls, doc: dict) -> "Session":
        return cls(user_id=doc["user_id"], jwt=doc["jwt"], id=doc.get("_id"))
