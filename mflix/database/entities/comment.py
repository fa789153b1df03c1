"""
Comment Document Model
======================

The ``Comment`` model represents one user comment on a movie, stored in the
``comments`` collection.

Key features
~~~~~~~~~~~~
- Externally assigned identifier (``id`` ↔ ``_id``)
- Owner email (``email``): the only user allowed to update or delete the comment
- Movie reference (``movie_id``), free text (``text``) and timestamp (``date``)

Integration notes
~~~~~~~~~~~~~~~~~
- ``CommentDao`` converts identifiers through ``identifiers.documentKey`` so that
  24-hex ids match the ObjectIds of the sample dataset.
- ``date`` is refreshed to the current UTC time on every text update.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mflix.database.entities.identifiers import documentKey, keyToString


class Comment(BaseModel):
    """
    Document model for the `comments` collection.

    Attributes
    ----------
    id : str | None
        Unique identifier of the comment (stored as `_id`). Must be set before insert.
    name : str | None
        Display name of the author.
    email : str
        Email of the author; used as the ownership key.
    movie_id : str | None
        Identifier of the commented movie.
    text : str
        Comment body.
    date : datetime
        Creation or last-update time. Defaults to the current UTC time.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, alias="_id")
    """Unique identifier of the comment."""

    name: str | None = None
    """Display name of the author."""

    email: str
    """Owner email."""

    movie_id: str | None = None
    """Identifier of the commented movie."""

    text: str
    """Comment body."""

    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    """Creation or last-update timestamp."""

    @field_validator("id", "movie_id", mode="before")
    @classmethod
    def _objectIdToString(cls, value):
        return keyToString(value)

    def toDocument(self) -> dict:
        """
        Return the BSON-ready document for insertion.

        `None` fields are dropped; `_id` and `movie_id` go through `documentKey`.
        """
        document = self.model_dump(by_alias=True, exclude_none=True)
        if "_id" in document:
            document["_id"] = documentKey(document["_id"])
        if "movie_id" in document:
            document["movie_id"] = documentKey(document["movie_id"])
        return document
