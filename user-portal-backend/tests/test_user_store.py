# File: tests/test_user_store.py

"""
Both store backends must behave the same behind UserRepository.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from user_portal.repositories.user_repository import UserRepository
from user_portal.repositories.user_store import (
    DuplicateKeyError,
    InMemoryUserStore,
    SQLAlchemyUserStore,
)


@pytest.fixture(params=["sqlalchemy", "memory"])
def store(request, db):
    if request.param == "sqlalchemy":
        return SQLAlchemyUserStore(db)
    return InMemoryUserStore()


def _data(n):
    return {"name": f"User {n}", "email": f"user{n}@example.com", "password": "hashed"}


def test_insert_assigns_increasing_ids(store):
    first = store.insert(_data(1))
    second = store.insert(_data(2))

    assert first.id is not None
    assert second.id > first.id
    assert store.get(first.id).email == "user1@example.com"


def test_get_missing(store):
    assert store.get(42) is None


def test_update_merges_fields(store):
    user = store.insert(_data(1))

    updated = store.update(user.id, {"email": "new@example.com"})

    assert updated.email == "new@example.com"
    assert updated.name == "User 1"
    assert updated.password == "hashed"


def test_update_missing(store):
    assert store.update(7, {"name": "Nobody"}) is None
    assert store.list_all() == []


def test_delete(store):
    user = store.insert(_data(1))

    assert store.delete(user.id) is True
    assert store.get(user.id) is None
    assert store.delete(user.id) is False


def test_list_all_ordered_by_id(store):
    for n in range(1, 4):
        store.insert(_data(n))

    ids = [u.id for u in store.list_all()]
    assert ids == sorted(ids)
    assert len(ids) == 3


def test_unknown_column_rejected(store):
    with pytest.raises(TypeError):
        store.insert({**_data(1), "nickname": "nope"})


def test_rejected_update_leaves_row_untouched(store):
    user = store.insert(_data(1))

    with pytest.raises(TypeError):
        store.update(user.id, {"name": "Leaked", "nickname": "nope"})

    store.insert(_data(2))
    assert store.get(user.id).name == "User 1"


def test_insert_with_taken_id_fails(store):
    first = store.insert(_data(1))

    with pytest.raises((SQLAlchemyError, DuplicateKeyError)):
        store.insert({**_data(2), "id": first.id})

    users = store.list_all()
    assert len(users) == 1
    assert users[0].name == "User 1"


def test_update_to_taken_id_fails(store):
    a = store.insert(_data(1))
    b = store.insert(_data(2))
    a_id, b_id = a.id, b.id

    with pytest.raises((SQLAlchemyError, DuplicateKeyError)):
        store.update(a_id, {"id": b_id})

    users = store.list_all()
    assert [(u.id, u.name) for u in users] == [(a_id, "User 1"), (b_id, "User 2")]


def test_memory_store_sets_timestamps():
    store = InMemoryUserStore()
    user = store.insert(_data(1))
    created = user.created_at

    store.update(user.id, {"name": "Renamed"})

    assert created is not None
    assert user.updated_at >= created


def test_memory_store_respects_explicit_id():
    store = InMemoryUserStore()
    store.insert({**_data(1), "id": 10})

    nxt = store.insert(_data(2))

    assert nxt.id == 11


def test_repository_round_trip_on_memory_store():
    repo = UserRepository(InMemoryUserStore())
    user = repo.create(_data(1))

    repo.update(user.id, {"name": "Updated", "email": "updated@example.com"})

    fetched = repo.find(user.id)
    assert (fetched.name, fetched.email) == ("Updated", "updated@example.com")
    assert repo.delete(user.id) is True
    assert repo.all() == []
