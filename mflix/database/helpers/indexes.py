"""
Index bootstrap for the MFlix collections.

Unique indexes back the one-user-per-email and one-session-per-user contracts at
the storage layer, so two concurrent inserts cannot both succeed. Safe to run on
every startup: `create_index` is a no-op for an existing identical index.
"""

import logging

from pymongo import ASCENDING
from pymongo.database import Database

from mflix.database.daos.comment_dao import COMMENT_COLLECTION
from mflix.database.daos.user_dao import SESSION_COLLECTION, USER_COLLECTION

logger = logging.getLogger(__name__)


def ensureIndexes(db: Database) -> list[str]:
    """
    Create the indexes the DAOs rely on.

    Returns
    -------
    list[str]
        Names of the indexes, in creation order.
    """
    names = [
        db[USER_COLLECTION].create_index([("email", ASCENDING)], unique=True),
        db[SESSION_COLLECTION].create_index([("user_id", ASCENDING)], unique=True),
        db[COMMENT_COLLECTION].create_index([("email", ASCENDING)]),
    ]
    logger.info("Indexes ensured on `%s`: %s", db.name, ", ".join(names))
    return names
