# File: tests/conftest.py

"""
Shared fixtures.

Each test gets a fresh in-memory SQLite database with the users table
created, so nothing leaks between tests.
"""

import itertools

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from user_portal.core.security import hash_password
from user_portal.db.init_db import init_db
from user_portal.repositories.user_repository import UserRepository

# cheap hashes keep the suite fast
TEST_HASH_ROUNDS = 1_000


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db):
    return UserRepository.from_session(db)


@pytest.fixture
def make_user(repository):
    """Insert a user, filling any field that is not given."""
    counter = itertools.count(1)

    def _make_user(**overrides):
        n = next(counter)
        data = {
            "name": f"User {n}",
            "email": f"user{n}@example.com",
            "password": hash_password("secret123", iterations=TEST_HASH_ROUNDS),
        }
        data.update(overrides)
        return repository.create(data)

    return _make_user
