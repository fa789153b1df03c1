"""
Session Document Model

One document per user in the ``sessions`` collection, holding the current
authentication token.
"""

from pydantic import BaseModel, ConfigDict


class Session(BaseModel):
    """Login session of a user (`user_id` is the user email)."""

    model_config = ConfigDict(extra="ignore")

    user_id: str
    """Identifier of the session owner."""
    jwt: str
    """Opaque authentication token."""
