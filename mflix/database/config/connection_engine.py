"""
Connection Engine (pymongo)

Purpose
-------
Centralizes database client initialization for the data-access layer:
- Builds one `MongoClient` (connection pool + wire-protocol entry point) from
  environment-backed settings.
- Applies explicit timeout and write-concern values instead of silently relying
  on driver defaults.
- Resolves the configured MFlix database from a client.

Notes
-----
- The client is thread-safe and meant to live for the whole process. Create it
  once at startup and pass it to every DAO constructor.
- A malformed connection string raises `InvalidURI`/`ConfigurationError` from
  `create_mongo_client(...)`, i.e. at startup and not on the first request.
- `mongo_client_lifespan(...)` is the application bootstrap: it configures
  logging from `LOG_LEVEL`, creates the client, ensures the unique indexes the
  DAOs rely on, and closes the pool at exit.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError

from mflix.database.config.config import Settings
from mflix.database.helpers.indexes import ensureIndexes
from mflix.database.helpers.logger import configure_logging

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> MongoClient:
    """
    Create the shared MongoClient.

    Parameters
    ----------
    settings : Settings
        Connection string, timeouts and write-concern values.

    Returns
    -------
    MongoClient
        A long-lived client configured with:
          - connectTimeoutMS / serverSelectionTimeoutMS
          - waitQueueTimeoutMS (max wait for a pooled connection)
          - default write concern `w` + `wTimeoutMS`

    Raises
    ------
    pymongo.errors.ConfigurationError
        If the connection string is malformed (`InvalidURI` is a subclass) or an
        option value is rejected by the driver.
    """
    try:
        client = MongoClient(
            settings.MFLIX_DB_URI,
            connectTimeoutMS=settings.MFLIX_CONNECT_TIMEOUT_MS,
            serverSelectionTimeoutMS=settings.MFLIX_SERVER_SELECTION_TIMEOUT_MS,
            waitQueueTimeoutMS=settings.MFLIX_MAX_POOL_WAIT_MS,
            w=settings.write_concern_w,
            wTimeoutMS=settings.MFLIX_WRITE_CONCERN_WTIMEOUT_MS,
        )
    except ConfigurationError as e:
        logger.error("Failed to create MongoClient: %s", e)
        raise
    logger.info("MongoClient created for database `%s`.", settings.MFLIX_DB_NAME)
    return client


def get_database(client: MongoClient, settings: Settings) -> Database:
    """Return the configured MFlix database from `client`."""
    return client[settings.MFLIX_DB_NAME]


@contextmanager
def mongo_client_lifespan(settings: Settings) -> Iterator[MongoClient]:
    """
    Client lifespan manager.

    On enter logging is configured, the client is created (a bad connection
    string fails right here) and `ensureIndexes` runs on the MFlix database.
    On exit the connection pool is closed, even if the body raised.

    Example
    -------
    >>> with mongo_client_lifespan(load_settings()) as client:
    ...     comments = CommentDao(client, settings.MFLIX_DB_NAME)
    """
    configure_logging(settings.LOG_LEVEL)
    client = create_mongo_client(settings)
    try:
        ensureIndexes(get_database(client, settings))
        yield client
    finally:
        client.close()
        logger.info("MongoClient closed.")
