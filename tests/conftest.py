import mongomock
import pytest

from db.init_db import create_indexes
from models.user import User
from repositories.session_repo import SessionRepository
from repositories.user_repo import UserRepository


@pytest.fixture
def database():
    db = mongomock.MongoClient()["test_mflix"]
    create_indexes(db)
    return db


@pytest.fixture
def user_repo(database):
    return UserRepository(database)


@pytest.fixture
def session_repo(database):
    return SessionRepository(database)


@pytest.fixture
def test_user():
    return User(
        email="ned@example.com",
        name="Ned Stark",
        hashedpw="not-a-real-hash",
        preferences={"favourite_cast": "Sean Bean"},
    )
