"""
User Document Model
===================

The ``User`` model represents a registered account stored in the ``users``
collection. The email address is the user identifier.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Document model for the `users` collection.

    Attributes
    ----------
    name : str | None
        Display name of the user.
    email : str
        Unique identifier of the user.
    password : str | None
        Hashed password. Hashing happens before the DAO is called.
    preferences : dict[str, Any] | None
        Free-form user preferences; always replaced as a whole.
    isAdmin : bool
        Whether the user has administrative rights.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str
    password: str | None = None
    preferences: dict[str, Any] | None = None
    isAdmin: bool = Field(False, description="Administrative rights flag.")

    def toDocument(self) -> dict:
        """Return the document stored in `users` (`None` fields dropped)."""
        return self.model_dump(exclude_none=True)

    def __str__(self) -> str:
        return f"User: email:{self.email}, name: {self.name}, admin: {self.isAdmin}"
