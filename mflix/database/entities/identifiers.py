"""
Identifier mapping between the API (plain strings) and stored documents.

The MFlix sample dataset keys comments and movies by BSON ObjectIds while new
records may carry arbitrary externally assigned ids. A 24-hex string is therefore
stored and queried as an ObjectId; anything else is kept verbatim.
"""

from typing import Any

from bson import ObjectId


def documentKey(value: str) -> ObjectId | str:
    """Return the value to store/query for the string identifier `value`."""
    if ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def keyToString(value: Any) -> Any:
    """Inverse of `documentKey` for values read back from MongoDB."""
    if isinstance(value, ObjectId):
        return str(value)
    return value
