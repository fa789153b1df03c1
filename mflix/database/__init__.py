"""
The `database` package is responsible for all interactions with the MFlix MongoDB database.
It provides configuration, document models, data-access objects and helpers.

Contents:
    - config:
        Settings and the connection provider that builds the shared MongoClient.

    - entities:
        Pydantic models of the stored documents (comments, users, sessions) and
        of the commenters report.

    - daos:
        Data Access Objects providing CRUD and reporting operations.

    - helpers:
        Write-error translation, index bootstrap and logging setup.
"""
