"""
DAOs Package - Data Access Layer (pymongo)
==========================================

The `daos` package provides the Data Access Layer of the MFlix application.
It encapsulates all interactions with the MongoDB collections, providing
clean CRUD APIs to the request handlers while hiding query details.

Conventions
-----------
- Every DAO receives the shared `MongoClient` and the database name at construction
- Ownership checks live in query filters (single atomic filtered operations)
- Invalid input and write failures surface as `IncorrectDaoOperation`
- Not found / nothing changed is a `None`/`False` return plus a log entry

Contents
--------
- AbstractMflixDao (base_dao)
    Holds the client handle and the resolved `Database`.

- CommentDao
    Manages the `comments` collection:
    * Fetches a comment by id, or all comments of a movie
    * Inserts comments (id required)
    * Updates / deletes a comment only when the requesting email owns it
    * Reports the 20 most active commenters (majority read concern)

- UserDao
    Manages the `users` and `sessions` collections:
    * Creates users with majority write concern, rejecting duplicates
    * Creates/refreshes and deletes the single session of a user
    * Deletes users after their session
    * Replaces user preferences, grants admin rights

- IncorrectDaoOperation (exceptions)
    The domain error raised by all DAOs.
"""
