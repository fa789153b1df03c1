"""
The `config` package provides the two building blocks for reaching the database.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), exposed through a cached Settings object
    - connection_engine: Connection provider - builds the shared pymongo `MongoClient` from those settings, with explicit timeout and write-concern values

The client is created once by the caller and injected into every DAO; no module-level client exists.
"""
