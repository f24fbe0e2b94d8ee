# File: user_portal/services/user_service.py

"""
User business logic.

Adds the required-field check on creation and the "not found" display
fallback on top of ``UserRepository``; everything else is delegated.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from user_portal.models.user import User
from user_portal.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"
REQUIRED_FIELDS_MESSAGE = "name and email are required"


class UserValidationError(ValueError):
    """Raised when user input is missing required fields."""


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def get_user_name(self, user_id: int) -> str:
        user = self.repository.find(user_id)
        return getattr(user, "name", None) or USER_NOT_FOUND_MESSAGE

    def create_user(self, data: Mapping[str, Any]) -> User:
        """
        Create a user after checking that ``name`` and ``email`` are set.

        Raises UserValidationError (and never reaches the repository) when
        either is missing or empty.
        """
        if not data.get("name") or not data.get("email"):
            logger.warning("Rejected user creation, missing name or email")
            raise UserValidationError(REQUIRED_FIELDS_MESSAGE)

        return self.repository.create(data)

    def update_user(self, user_id: int, data: Mapping[str, Any]) -> Optional[User]:
        # the repository checks existence again; both lookups are kept
        if self.repository.find(user_id) is None:
            return None

        return self.repository.update(user_id, data)

    def delete_user(self, user_id: int) -> bool:
        return self.repository.delete(user_id)

    def get_all_users(self) -> list[User]:
        return self.repository.all()
