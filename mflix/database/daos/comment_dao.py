"""
Comment DAO

Purpose
-------
Provides the data-access layer for the `comments` collection:
- Fetch a comment by id, or all comments of a movie
- Insert comments carrying an externally assigned id
- Owner-scoped update and delete
- "Most active commenters" report (aggregation pipeline)

Design
------
- The DAO receives the shared `MongoClient` at construction; it never creates one.
- Ownership is enforced in the query filter: update and delete match on
  `{_id, email}` in a single atomic call. There is no fetch-then-check step, so
  a concurrent request cannot slip in between a read and a write.
- The report runs on a collection handle with majority read concern, so only
  data acknowledged by a majority of the replica set is counted.

Usage
-----
.. code-block:: python

    from mflix.database.config.config import load_settings
    from mflix.database.config.connection_engine import mongo_client_lifespan
    from mflix.database.daos.comment_dao import CommentDao
    from mflix.database.entities.comment import Comment

    settings = load_settings()
    with mongo_client_lifespan(settings) as client:
        dao = CommentDao(client, settings.MFLIX_DB_NAME)

        dao.addComment(Comment(id="c1", email="a@x.com", name="A", text="hi"))
        dao.getComment("c1")                        # -> Comment
        dao.updateComment("c1", "bye", "b@x.com")   # -> False, not the owner
        dao.updateComment("c1", "bye", "a@x.com")   # -> True
        dao.deleteComment("c1", "a@x.com")          # -> True
        dao.mostActiveCommenters()                  # -> list[Critic], at most 20

Error Handling
--------------
- Missing comment id on insert raises `IncorrectDaoOperation`.
- Write failures (`WriteError`, `DuplicateKeyError`, `WriteConcernError`) are
  re-raised as `IncorrectDaoOperation` with the driver message appended.
- Not found / not owned is not an error: `None` or `False` plus a log entry.
"""

import logging
from datetime import datetime, timezone

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.read_concern import ReadConcern

from mflix.database.daos.base_dao import AbstractMflixDao
from mflix.database.daos.exceptions import IncorrectDaoOperation
from mflix.database.entities.comment import Comment
from mflix.database.entities.critic import Critic
from mflix.database.entities.identifiers import documentKey
from mflix.database.helpers.errorHandling import translateWriteErrors

COMMENT_COLLECTION = "comments"
MOST_ACTIVE_LIMIT = 20

logger = logging.getLogger(__name__)


class CommentDao(AbstractMflixDao):
    """
    Data Access Object (DAO) for Comment documents.
    Provides CRUD operations on the `comments` collection and the commenters report.
    """

    def __init__(self, mongo_client: MongoClient, database_name: str):
        super().__init__(mongo_client, database_name)
        self.commentCollection = self.db[COMMENT_COLLECTION]

    def getComment(self, comment_id: str) -> Comment | None:
        """
        Fetch a comment by its identifier.

        Parameters
        ----------
        comment_id : str
            Comment identifier.

        Returns
        -------
        Comment | None
            The matching comment, or None if there is none.
        """
        if not comment_id:
            return None
        document = self.commentCollection.find_one({"_id": documentKey(comment_id)})
        if document is None:
            return None
        return Comment.model_validate(document)

    def getMovieComments(self, movie_id: str) -> list[Comment]:
        """
        Fetch all comments of a movie, newest first.

        Parameters
        ----------
        movie_id : str
            Identifier of the movie.

        Returns
        -------
        list[Comment]
            Comments ordered by `date` descending. Empty if the movie has none.
        """
        cursor = self.commentCollection.find({"movie_id": documentKey(movie_id)}).sort("date", DESCENDING)
        return [Comment.model_validate(document) for document in cursor]

    def addComment(self, comment: Comment) -> Comment:
        """
        Insert a new comment.

        Parameters
        ----------
        comment : Comment
            Comment to insert. Its `id` must be set and non-empty.

        Returns
        -------
        Comment
            The inserted comment.

        Raises
        ------
        IncorrectDaoOperation
            If the id is missing, or the insert fails (e.g. duplicate id).
        """
        if comment is None or not comment.id:
            raise IncorrectDaoOperation("Comment objects need to have an id field set.")

        with translateWriteErrors(f"Error occurred while adding a new Comment `{comment.id}`"):
            self.commentCollection.insert_one(comment.toDocument())
        return comment

    def updateComment(self, comment_id: str, text: str, email: str) -> bool:
        """
        Update the text of a comment owned by `email` and refresh its date.

        Parameters
        ----------
        comment_id : str
            Comment identifier.
        text : str
            New comment text.
        email : str
            Email of the requesting user; must match the comment owner.

        Returns
        -------
        bool
            True if a comment matched id and owner (even when the text was
            unchanged), False otherwise.

        Raises
        ------
        IncorrectDaoOperation
            If the database rejects the write.
        """
        query = {"_id": documentKey(comment_id), "email": email}
        update = {"$set": {"text": text, "date": datetime.now(timezone.utc)}}

        with translateWriteErrors(f"Error occurred while updating comment `{comment_id}`"):
            res = self.commentCollection.update_one(query, update)

        if res.matched_count > 0:
            if res.modified_count != 1:
                logger.warning("Comment `%s` text was not updated. Is it the same text?", comment_id)
            return True

        logger.error(
            "Could not update comment `%s`. Make sure the comment is owned by `%s`",
            comment_id,
            email,
        )
        return False

    def deleteComment(self, comment_id: str, email: str) -> bool:
        """
        Delete a comment owned by `email`.

        Parameters
        ----------
        comment_id : str
            Comment identifier.
        email : str
            Email of the requesting user; must match the comment owner.

        Returns
        -------
        bool
            True only if exactly one comment was deleted.

        Raises
        ------
        IncorrectDaoOperation
            If the database rejects the delete.
        """
        query = {"_id": documentKey(comment_id), "email": email}

        with translateWriteErrors(f"Error deleting comment `{comment_id}`"):
            res = self.commentCollection.delete_one(query)

        if res.deleted_count != 1:
            logger.warning(
                "Not able to delete comment `%s` for user `%s`. User does not own comment or already deleted!",
                comment_id,
                email,
            )
            return False
        return True

    def mostActiveCommenters(self) -> list[Critic]:
        """
        Report the users with the most comments.

        Pipeline: skip comments without an owner email, group by `email`
        counting comments, sort by count descending
        (email ascending on ties), keep the top 20. Runs with majority read
        concern: the report favours accuracy over latency.

        Returns
        -------
        list[Critic]
            At most 20 rows, highest count first.
        """
        pipeline = [
            {"$match": {"email": {"$ne": None}}},
            {"$group": {"_id": "$email", "count": {"$sum": 1}}},
            {"$sort": {"count": DESCENDING, "_id": ASCENDING}},
            {"$limit": MOST_ACTIVE_LIMIT},
        ]
        critics = self.commentCollection.with_options(read_concern=ReadConcern("majority"))
        return [Critic.model_validate(row) for row in critics.aggregate(pipeline)]
