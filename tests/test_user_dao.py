# File: tests/test_user_dao.py

import logging
from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, WriteError
from pymongo.results import UpdateResult

from mflix.database.daos.exceptions import IncorrectDaoOperation
from mflix.database.daos.user_dao import UserDao
from mflix.database.entities.user import User


def make_user(email="roman@mflix.com", password="$2b$12$hashed", **kwargs):
    return User(name="Roman", email=email, password=password, **kwargs)


def test_add_then_get_user(user_dao):
    assert user_dao.addUser(make_user(preferences={"language": "el"})) is True

    user = user_dao.getUser("roman@mflix.com")
    assert user.name == "Roman"
    assert user.password == "$2b$12$hashed"
    assert user.preferences == {"language": "el"}
    assert user.isAdmin is False


def test_get_unknown_user_returns_none(user_dao):
    assert user_dao.getUser("ghost@mflix.com") is None


def test_add_duplicate_user_is_rejected(user_dao, db):
    user_dao.addUser(make_user())

    with pytest.raises(IncorrectDaoOperation, match="already exists"):
        user_dao.addUser(make_user(password="other"))

    assert db.users.count_documents({"email": "roman@mflix.com"}) == 1
    assert user_dao.getUser("roman@mflix.com").password == "$2b$12$hashed"


def test_add_user_duplicate_key_from_index_is_rejected(user_dao):
    user_dao.usersCollection = MagicMock()
    majority = user_dao.usersCollection.with_options.return_value
    majority.update_one.side_effect = DuplicateKeyError("E11000 duplicate key error", code=11000)

    with pytest.raises(IncorrectDaoOperation, match="already exists") as exc_info:
        user_dao.addUser(make_user())
    assert isinstance(exc_info.value.__cause__, DuplicateKeyError)


def test_add_user_uses_majority_write_concern(user_dao):
    user_dao.usersCollection = MagicMock()
    majority = user_dao.usersCollection.with_options.return_value
    majority.update_one.return_value = UpdateResult({"n": 1, "nModified": 0, "upserted": "new-id"}, True)

    assert user_dao.addUser(make_user()) is True

    write_concern = user_dao.usersCollection.with_options.call_args.kwargs["write_concern"]
    assert write_concern.document == {"w": "majority"}
    query, update = majority.update_one.call_args.args
    assert query == {"email": "roman@mflix.com"}
    assert "email" not in update["$setOnInsert"]
    assert majority.update_one.call_args.kwargs["upsert"] is True


def test_write_timeout_is_applied(mongo_client, db_name):
    dao = UserDao(mongo_client, db_name, write_timeout_ms=2500)
    assert dao.majorityWriteConcern.document == {"w": "majority", "wtimeout": 2500}


def test_add_user_write_failure_becomes_domain_error(user_dao):
    user_dao.usersCollection = MagicMock()
    majority = user_dao.usersCollection.with_options.return_value
    majority.update_one.side_effect = WriteError("Document failed validation", code=121)

    with pytest.raises(IncorrectDaoOperation, match="Document failed validation"):
        user_dao.addUser(make_user())


def test_create_user_session_upserts_single_document(user_dao, db):
    assert user_dao.createUserSession("u1", "tok1") is True
    assert user_dao.createUserSession("u1", "tok2") is True

    assert db.sessions.count_documents({"user_id": "u1"}) == 1
    session = user_dao.getUserSession("u1")
    assert session.user_id == "u1"
    assert session.jwt == "tok2"


def test_same_token_for_two_users_is_allowed(user_dao, db):
    user_dao.createUserSession("u1", "tok")
    user_dao.createUserSession("u2", "tok")

    assert db.sessions.count_documents({"jwt": "tok"}) == 2


def test_get_unknown_session_returns_none(user_dao):
    assert user_dao.getUserSession("nobody") is None


def test_delete_user_sessions(user_dao):
    user_dao.createUserSession("u1", "tok1")

    assert user_dao.deleteUserSessions("u1") is True
    assert user_dao.getUserSession("u1") is None


def test_delete_missing_sessions_warns_but_succeeds(user_dao, caplog):
    with caplog.at_level(logging.WARNING):
        assert user_dao.deleteUserSessions("nobody") is True
    assert "could not be found in sessions collection" in caplog.text


def test_delete_user_removes_sessions_then_user(user_dao):
    user_dao.addUser(make_user())
    user_dao.createUserSession("roman@mflix.com", "tok")

    assert user_dao.deleteUser("roman@mflix.com") is True

    assert user_dao.getUser("roman@mflix.com") is None
    assert user_dao.getUserSession("roman@mflix.com") is None


def test_delete_user_without_session(user_dao):
    user_dao.addUser(make_user())

    assert user_dao.deleteUser("roman@mflix.com") is True
    assert user_dao.getUser("roman@mflix.com") is None


def test_delete_user_keeps_user_when_session_delete_fails(user_dao, monkeypatch):
    user_dao.addUser(make_user())
    monkeypatch.setattr(user_dao, "deleteUserSessions", lambda user_id: False)

    assert user_dao.deleteUser("roman@mflix.com") is False
    assert user_dao.getUser("roman@mflix.com") is not None


def test_update_preferences_replaces_whole_mapping(user_dao):
    user_dao.addUser(make_user(preferences={"language": "el", "theme": "dark"}))

    assert user_dao.updateUserPreferences("roman@mflix.com", {"subtitles": True}) is True

    assert user_dao.getUser("roman@mflix.com").preferences == {"subtitles": True}


def test_update_preferences_none_is_rejected_without_db_call(user_dao):
    user_dao.usersCollection = MagicMock()

    with pytest.raises(IncorrectDaoOperation, match="userPreferences cannot be set to null"):
        user_dao.updateUserPreferences("roman@mflix.com", None)

    assert user_dao.usersCollection.method_calls == []


def test_update_preferences_none_leaves_document_untouched(user_dao):
    user_dao.addUser(make_user(preferences={"language": "el"}))

    with pytest.raises(IncorrectDaoOperation):
        user_dao.updateUserPreferences("roman@mflix.com", None)

    assert user_dao.getUser("roman@mflix.com").preferences == {"language": "el"}


def test_update_preferences_not_modified_warns(user_dao, caplog):
    user_dao.usersCollection = MagicMock()
    user_dao.usersCollection.update_one.return_value = UpdateResult({"n": 1, "nModified": 0}, True)

    with caplog.at_level(logging.WARNING):
        assert user_dao.updateUserPreferences("roman@mflix.com", {"language": "el"}) is True
    assert "was not updated" in caplog.text


def test_make_admin(user_dao):
    user_dao.addUser(make_user())

    assert user_dao.makeAdmin("roman@mflix.com") is True
    assert user_dao.getUser("roman@mflix.com").isAdmin is True
    assert user_dao.makeAdmin("ghost@mflix.com") is False
