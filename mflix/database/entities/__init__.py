"""
Entities Package - Pydantic v2 Document Models (MongoDB)
========================================================

The `entities` package defines the documents of the MFlix collections as
Pydantic models. DAOs (`daos` package) validate raw documents into these
classes on read and dump them back to BSON-ready dicts on write.

Conventions
-----------
- Field names match the stored document keys; `_id` is exposed as `id`
- ObjectId keys are surfaced as `str` (see `identifiers`)
- Timestamps are timezone-aware (UTC) when created by the application

Contents
--------
- Comment
    A user comment on a movie (`comments`).
    * Fields: `id` (`_id`), `name`, `email` (owner), `movie_id`, `text`, `date`

- User
    A registered account (`users`), keyed by `email`.
    * Holds hashed password, `preferences` mapping and `isAdmin` flag

- Session
    The single active login session of a user (`sessions`).
    * Fields: `user_id`, `jwt`

- Critic
    Read-only report row produced by `CommentDao.mostActiveCommenters()`.
    * Fields: `id` (`_id`, the commenter email), `count`
"""

from mflix.database.entities.comment import Comment
from mflix.database.entities.critic import Critic
from mflix.database.entities.session import Session
from mflix.database.entities.user import User

__all__ = ["Comment", "Critic", "Session", "User"]
