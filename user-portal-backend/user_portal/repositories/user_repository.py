# File: user_portal/repositories/user_repository.py

"""
Data access for users.

Thin CRUD layer over a ``UserStore``. No validation or transformation is
done here; a missing record is reported as ``None`` / ``False`` and any
store error propagates to the caller untouched.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from sqlalchemy.orm import Session

from user_portal.models.user import User
from user_portal.repositories.user_store import SQLAlchemyUserStore, UserStore

logger = logging.getLogger(__name__)


class UserRepository:
    """CRUD operations for ``User`` records."""

    def __init__(self, store: UserStore):
        self.store = store

    @classmethod
    def from_session(cls, db: Session) -> "UserRepository":
        return cls(SQLAlchemyUserStore(db))

    def find(self, user_id: int) -> Optional[User]:
        logger.debug("find user_id=%s", user_id)
        return self.store.get(user_id)

    def create(self, data: Mapping[str, Any]) -> User:
        logger.debug("create fields=%s", sorted(data))
        user = self.store.insert(data)
        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: int, data: Mapping[str, Any]) -> Optional[User]:
        """
        Merge ``data`` into an existing user.

        Fields not present in ``data`` are left as they are. Returns None,
        without touching the store, when no user has this id.
        """
        user = self.find(user_id)
        if user is None:
            return None

        logger.debug("update user_id=%s fields=%s", user_id, sorted(data))
        return self.store.update(user_id, data)

    def delete(self, user_id: int) -> bool:
        user = self.find(user_id)
        if user is None:
            return False

        deleted = self.store.delete(user_id)
        logger.info("Deleted user %s", user_id)
        return deleted

    def all(self) -> list[User]:
        return self.store.list_all()
