# File: user_portal/repositories/user_store.py

"""
Storage backends for User records.

``UserRepository`` only talks to a ``UserStore``: five primitive
operations against whatever keeps the rows. Production code uses
``SQLAlchemyUserStore`` on a SQLAlchemy session; tests and scripts can use
``InMemoryUserStore`` without a database.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_portal.models.user import User

USER_COLUMNS = frozenset(column.key for column in User.__table__.columns)


class DuplicateKeyError(ValueError):
    """Raised by InMemoryUserStore when a primary key is already taken."""


def _apply_changes(user: User, data: Mapping[str, Any]) -> None:
    # mirror the declarative constructor, which rejects unknown keywords;
    # every key is checked before the first attribute is touched
    unknown = [key for key in data if key not in USER_COLUMNS]
    if unknown:
        raise TypeError(f"{unknown[0]!r} is an invalid keyword argument for User")

    for key, value in data.items():
        setattr(user, key, value)


class UserStore(Protocol):
    """Capabilities a backing store must offer for User rows."""

    def get(self, user_id: int) -> Optional[User]:
        ...

    def insert(self, data: Mapping[str, Any]) -> User:
        ...

    def update(self, user_id: int, data: Mapping[str, Any]) -> Optional[User]:
        ...

    def delete(self, user_id: int) -> bool:
        ...

    def list_all(self) -> list[User]:
        ...


class SQLAlchemyUserStore:
    """
    ``UserStore`` backed by a SQLAlchemy session.

    Every write commits immediately. Database errors are re-raised as-is
    after the session has been rolled back.
    """

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def insert(self, data: Mapping[str, Any]) -> User:
        user = User(**data)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def update(self, user_id: int, data: Mapping[str, Any]) -> Optional[User]:
        user = self.db.get(User, user_id)
        if user is None:
            return None

        _apply_changes(user, data)
        self._commit()
        self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> bool:
        user = self.db.get(User, user_id)
        if user is None:
            return False

        self.db.delete(user)
        self._commit()
        return True

    def list_all(self) -> list[User]:
        return list(self.db.scalars(select(User).order_by(User.id)))


class InMemoryUserStore:
    """
    Dict-backed ``UserStore``.

    Ids are handed out from 1 upward and an id already in use raises
    DuplicateKeyError. Other column constraints such as the unique email
    are not enforced.
    """

    def __init__(self):
        self._rows: dict[int, User] = {}
        self._next_id = 1

    def get(self, user_id: int) -> Optional[User]:
        return self._rows.get(user_id)

    def insert(self, data: Mapping[str, Any]) -> User:
        user = User(**data)
        if user.id is None:
            user.id = self._next_id
        elif user.id in self._rows:
            raise DuplicateKeyError(f"User id {user.id} already exists")
        self._next_id = max(self._next_id, user.id + 1)

        now = datetime.now(timezone.utc)
        user.created_at = now
        user.updated_at = now

        self._rows[user.id] = user
        return user

    def update(self, user_id: int, data: Mapping[str, Any]) -> Optional[User]:
        user = self._rows.get(user_id)
        if user is None:
            return None

        new_id = data.get("id", user_id)
        if new_id != user_id and new_id in self._rows:
            raise DuplicateKeyError(f"User id {new_id} already exists")

        _apply_changes(user, data)
        user.updated_at = datetime.now(timezone.utc)
        if user.id != user_id:
            # primary key changed; re-key the row
            del self._rows[user_id]
            self._rows[user.id] = user
        return user

    def delete(self, user_id: int) -> bool:
        return self._rows.pop(user_id, None) is not None

    def list_all(self) -> list[User]:
        return [self._rows[key] for key in sorted(self._rows)]
