# File: tests/conftest.py

"""
Shared fixtures: an in-memory MongoDB (mongomock) injected into the DAOs.

To run:
    pytest -q
"""

import mongomock
import pytest

from mflix.database.daos.comment_dao import CommentDao
from mflix.database.daos.user_dao import UserDao

DB_NAME = "sample_mflix_test"


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    client.drop_database(DB_NAME)
    yield client
    client.drop_database(DB_NAME)
    client.close()


@pytest.fixture
def db_name():
    return DB_NAME


@pytest.fixture
def db(mongo_client, db_name):
    return mongo_client[db_name]


@pytest.fixture
def comment_dao(mongo_client):
    return CommentDao(mongo_client, DB_NAME)


@pytest.fixture
def user_dao(mongo_client):
    return UserDao(mongo_client, DB_NAME)
