"""
User DAO

Purpose
-------
Data-access layer for the `users` and `sessions` collections. Provides:
- User creation (majority write concern, duplicates rejected)
- Lookup of users by email and of sessions by user id
- Session lifecycle: create/refresh on login, delete on logout
- User deletion together with the user's session
- Wholesale replacement of user preferences
- Granting administrative rights

Design
------
- The DAO receives the shared `MongoClient` at construction.
- A user is identified by `email`; a session by `user_id`, which holds that
  same email. There is at most one session per user: sessions are written with
  an upsert filtered on `user_id`.
- `addUser` is a single conditional upsert (`$setOnInsert` filtered on
  `email`): an existing user is never overwritten, and the duplicate is
  detected from the write result instead of a separate lookup.
- `deleteUser` removes the session before the user document. The two deletes
  are not atomic; this order never leaves a session without its user.

Usage
-----
.. code-block:: python

    from mflix.database.daos.user_dao import UserDao
    from mflix.database.entities.user import User

    dao = UserDao(client, settings.MFLIX_DB_NAME)
    dao.addUser(User(name="Roman", email="roman@mflix.com", password=hashed))
    dao.createUserSession("roman@mflix.com", jwt)       # login
    dao.getUserSession("roman@mflix.com")               # -> Session | None
    dao.updateUserPreferences("roman@mflix.com", {"language": "el"})
    dao.deleteUserSessions("roman@mflix.com")           # logout
    dao.deleteUser("roman@mflix.com")

Error Handling
--------------
- Duplicate user, null preferences and database write failures raise
  `IncorrectDaoOperation`.
- Nothing to delete / nothing modified is logged as a warning, not raised.

Return Values
-------------
- addUser(...) -> bool (True, or raises)
- createUserSession(...), deleteUserSessions(...), deleteUser(...),
  updateUserPreferences(...) -> bool: whether MongoDB acknowledged the write
- getUser(...) -> User | None
- getUserSession(...) -> Session | None
- makeAdmin(...) -> bool: whether a user matched
"""

import logging
from typing import Any, Mapping

from pymongo import MongoClient
from pymongo.errors import DuplicateKeyError
from pymongo.write_concern import WriteConcern

from mflix.database.daos.base_dao import AbstractMflixDao
from mflix.database.daos.exceptions import IncorrectDaoOperation
from mflix.database.entities.session import Session
from mflix.database.entities.user import User
from mflix.database.helpers.errorHandling import translateWriteErrors

USER_COLLECTION = "users"
SESSION_COLLECTION = "sessions"

logger = logging.getLogger(__name__)


class UserDao(AbstractMflixDao):
    """
    Data Access Object (DAO) for User and Session documents.

    Parameters
    ----------
    mongo_client : MongoClient
        Shared client.
    database_name : str
        MFlix database name.
    write_timeout_ms : int | None
        `wtimeout` of the majority write concern used by `addUser`. None keeps the
        `wtimeout` the client was configured with (`MFLIX_WRITE_CONCERN_WTIMEOUT_MS`).
    """

    def __init__(self, mongo_client: MongoClient, database_name: str, write_timeout_ms: int | None = None):
        super().__init__(mongo_client, database_name)
        self.usersCollection = self.db[USER_COLLECTION]
        self.sessionsCollection = self.db[SESSION_COLLECTION]
        if write_timeout_ms is None:
            write_timeout_ms = self.usersCollection.write_concern.document.get("wtimeout")
        self.majorityWriteConcern = WriteConcern(w="majority", wtimeout=write_timeout_ms)

    def addUser(self, user: User) -> bool:
        """
        Insert a new user, acknowledged by a majority of the replica set.

        Parameters
        ----------
        user : User
            User to insert. Its password must already be hashed.

        Returns
        -------
        bool
            True once the user is stored.

        Raises
        ------
        IncorrectDaoOperation
            If a user with the same email already exists, or the write fails.
        """
        if user is None or not user.email:
            raise IncorrectDaoOperation("User objects need to have an email field set.")

        document = user.toDocument()
        email = document.pop("email")
        users = self.usersCollection.with_options(write_concern=self.majorityWriteConcern)
        duplicate_message = f"User with email `{email}` already exists."

        with translateWriteErrors(f"Error occurred while adding user `{email}`"):
            try:
                res = users.update_one({"email": email}, {"$setOnInsert": document}, upsert=True)
            except DuplicateKeyError as e:
                # unique index on email rejected a concurrent insert
                raise IncorrectDaoOperation(duplicate_message) from e

        if res.upserted_id is None:
            logger.warning(duplicate_message)
            raise IncorrectDaoOperation(duplicate_message)
        return True

    def createUserSession(self, user_id: str, jwt: str) -> bool:
        """
        Create or refresh the session of a user.

        Parameters
        ----------
        user_id : str
            User identifier (email).
        jwt : str
            Authentication token to store.

        Returns
        -------
        bool
            Whether the upsert was acknowledged.
        """
        with translateWriteErrors(f"Error occurred while creating session for user `{user_id}`"):
            res = self.sessionsCollection.update_one(
                {"user_id": user_id}, {"$set": {"jwt": jwt}}, upsert=True
            )
        return res.acknowledged

    def getUser(self, email: str) -> User | None:
        """Return the user with `email`, or None."""
        document = self.usersCollection.find_one({"email": email})
        if document is None:
            return None
        return User.model_validate(document)

    def getUserSession(self, user_id: str) -> Session | None:
        """Return the session of `user_id`, or None."""
        document = self.sessionsCollection.find_one({"user_id": user_id})
        if document is None:
            return None
        return Session.model_validate(document)

    def deleteUserSessions(self, user_id: str) -> bool:
        """
        Delete the session of a user. A user without a session is not an error.

        Returns
        -------
        bool
            Whether the delete was acknowledged.
        """
        with translateWriteErrors(f"Error occurred while deleting sessions of user `{user_id}`"):
            res = self.sessionsCollection.delete_one({"user_id": user_id})
        if res.deleted_count < 1:
            logger.warning("User `%s` could not be found in sessions collection.", user_id)
        return res.acknowledged

    def deleteUser(self, email: str) -> bool:
        """
        Delete a user and, first, their session.

        Parameters
        ----------
        email : str
            Email of the user to delete.

        Returns
        -------
        bool
            False if the session could not be removed (the user document is then
            left untouched), else whether the user delete was acknowledged.
        """
        if not self.deleteUserSessions(email):
            logger.error("Sessions of user `%s` were not removed; user kept.", email)
            return False

        with translateWriteErrors(f"Error occurred while deleting user `{email}`"):
            res = self.usersCollection.delete_one({"email": email})
        if res.deleted_count < 1:
            logger.warning("User with `email` %s not found. Potential concurrent operation?!", email)
        return res.acknowledged

    def updateUserPreferences(self, email: str, user_preferences: Mapping[str, Any] | None) -> bool:
        """
        Replace the preferences of a user.

        Parameters
        ----------
        email : str
            Email of the user to update.
        user_preferences : Mapping[str, Any]
            New preferences; replaces the stored value as a whole. Cannot be None.

        Returns
        -------
        bool
            Whether the update was acknowledged.

        Raises
        ------
        IncorrectDaoOperation
            If `user_preferences` is None (no database call is made) or the write fails.
        """
        if user_preferences is None:
            raise IncorrectDaoOperation("userPreferences cannot be set to null")

        with translateWriteErrors(f"Error occurred while updating preferences of user `{email}`"):
            res = self.usersCollection.update_one(
                {"email": email}, {"$set": {"preferences": dict(user_preferences)}}
            )
        if res.modified_count < 1:
            logger.warning(
                "User `%s` was not updated. Trying to re-write the same `preferences` field: `%s`",
                email,
                user_preferences,
            )
        return res.acknowledged

    def makeAdmin(self, email: str) -> bool:
        """Grant administrative rights to `email`. Returns whether a user matched."""
        with translateWriteErrors(f"Error occurred while granting admin rights to `{email}`"):
            res = self.usersCollection.update_one({"email": email}, {"$set": {"isAdmin": True}})
        if res.matched_count < 1:
            logger.warning("User `%s` not found; admin rights not granted.", email)
            return False
        return True
