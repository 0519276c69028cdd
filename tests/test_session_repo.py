from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from repositories.errors import ErrorKind


def test_create_session(session_repo):
    assert session_repo.create("jon@example.com", "first.jwt")

    session = session_repo.get("jon@example.com")
    assert session.user_id == "jon@example.com"
    assert session.jwt == "first.jwt"


def test_create_session_twice_keeps_one(session_repo, database):
    session_repo.create("jon@example.com", "first.jwt")
    session_repo.create("jon@example.com", "second.jwt")

    assert database.sessions.count_documents({"user_id": "jon@example.com"}) == 1
    assert session_repo.get("jon@example.com").jwt == "second.jwt"


def test_sessions_unique_per_user(database):
    database.sessions.insert_one({"user_id": "jon@example.com", "jwt": "a"})

    with pytest.raises(DuplicateKeyError):
        database.sessions.insert_one({"user_id": "jon@example.com", "jwt": "b"})


def test_create_session_retries_lost_race(session_repo):
    sessions = MagicMock()
    sessions.update_one.side_effect = [DuplicateKeyError("E11000 duplicate key"), None]
    session_repo.sessions = sessions

    assert session_repo.create("jon@example.com", "jwt")
    assert sessions.update_one.call_count == 2


def test_create_session_gives_up_after_retry(session_repo):
    sessions = MagicMock()
    sessions.update_one.side_effect = DuplicateKeyError("E11000 duplicate key")
    session_repo.sessions = sessions

    result = session_repo.create("jon@example.com", "jwt")

    assert not result
    assert result.error.kind is ErrorKind.OPERATION_FAILED
    assert sessions.update_one.call_count == 2


def test_create_session_backend_error(session_repo):
    sessions = MagicMock()
    sessions.update_one.side_effect = ServerSelectionTimeoutError("no servers")
    session_repo.sessions = sessions

    result = session_repo.create("jon@example.com", "jwt")

    assert not result
    assert "no servers" in result.error.message


def test_get_session_not_found(session_repo):
    assert session_repo.get("nobody@example.com") is None


def test_delete_all_sessions(session_repo, database):
    database.sessions.insert_one({"user_id": "sansa@example.com", "jwt": "x"})

    assert session_repo.delete_all("sansa@example.com")
    assert session_repo.get("sansa@example.com") is None


def test_delete_all_sessions_none_matched(session_repo):
    assert session_repo.delete_all("nobody@example.com")


def test_delete_all_sessions_backend_error_propagates(session_repo):
    sessions = MagicMock()
    sessions.delete_many.side_effect = ServerSelectionTimeoutError("no servers")
    session_repo.sessions = sessions

    with pytest.raises(ServerSelectionTimeoutError):
        session_repo.delete_all("jon@example.com")
