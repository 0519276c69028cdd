"""
models/user.py
--------------
Domain model for registered users.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class User:
    """
    Represents a registered user.

    Attributes:
        email: Unique identifier of the user.
        name: Display name.
        hashedpw: Password hash produced by the registration flow.
        is_admin: Whether the user has admin rights.
        preferences: Free-form mapping of user preferences.
        id: MongoDB `_id` (None for new records).
    """
    email: str
    name: str = ""
    hashedpw: str = ""
    is_admin: bool = False
    preferences: dict[str, Any] = field(default_factory=dict)
    id: Optional[Any] = None

    def to_document(self) -> dict:
        """Map to a `users` document. `_id` is left for the server to assign."""
        return {
            "email": self.email,
            "name": self.name,
            "hashedpw": self.hashedpw,
            "isAdmin": self.is_admin,
            "preferences": dict(self.preferences),
        }

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        return cls(
            email=doc["email"],
            name=doc.get("name", ""),
            hashedpw=doc.get("hashedpw", ""),
            is_admin=doc.get("isAdmin", False),
            preferences=doc.get("preferences") or {},
            id=doc.get("_id"),
        )

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
