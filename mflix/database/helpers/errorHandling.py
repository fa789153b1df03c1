"""
DAO Error Translation
=====================

This module turns driver-level write failures into the single domain error of
the data-access layer, `IncorrectDaoOperation`.

Callers above the DAOs never see pymongo exception types for write failures:
the original exception is chained (`raise ... from`) and its message kept, but
the type is always `IncorrectDaoOperation`.

Key features
~~~~~~~~~~~~
- Context manager wrapping exactly one driver call
- Catches `WriteError` (incl. `DuplicateKeyError`) and `WriteConcernError`
- Logs the failure at error level before re-raising
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo.errors import WriteConcernError, WriteError

from mflix.database.daos.exceptions import IncorrectDaoOperation

logger = logging.getLogger(__name__)


@contextmanager
def translateWriteErrors(message: str) -> Iterator[None]:
    """
    Re-raise write failures inside the block as `IncorrectDaoOperation`.

    Parameters
    ----------
    message : str
        Context prefix, e.g. "Error occurred while updating comment `c1`".
        The driver message is appended after a colon.

    Example
    -------
    >>> with translateWriteErrors(f"Error deleting comment `{comment_id}`"):
    ...     res = collection.delete_one(query)
    """
    try:
        yield
    except (WriteError, WriteConcernError) as e:
        error_message = f"{message}: {e}"
        logger.error(error_message)
        raise IncorrectDaoOperation(error_message) from e
