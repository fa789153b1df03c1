"""
Domain exception of the data-access layer.
"""


class IncorrectDaoOperation(Exception):
    """
    A DAO call was rejected: invalid input (missing comment id, null preferences),
    a duplicate record, or a write failure reported by the database.

    The message is meant for the caller; when a driver error is translated it is
    available as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
