"""
The `helpers` package provides utilities that support DAO operations and
cross-cutting concerns.

Contents
--------
- errorHandling
    `translateWriteErrors(message)` context manager: converts pymongo write
    failures into `IncorrectDaoOperation`, keeping the driver message.

- indexes
    `ensureIndexes(db)`: idempotent creation of the unique indexes on
    `users.email` and `sessions.user_id`, plus `comments.email`.

- logger
    `configure_logging(level)`: one-time root logger setup for the host process.
"""
