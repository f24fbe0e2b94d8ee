"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata
before ``create_all`` runs.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from user_portal.core.security import hash_password
from user_portal.db.session import engine
from user_portal.models.base import Base
from user_portal.models import user  # noqa: F401
from user_portal.repositories.user_repository import UserRepository
from user_portal.schemas.user import UserCreate

logger = logging.getLogger(__name__)

DEMO_USERS = [
    UserCreate(name="Alex Doe", email="alex@example.com", password="changeme"),
    UserCreate(name="Maria Santos", email="maria@example.com", password="changeme"),
    UserCreate(name="Pedro Oliveira", email="pedro@example.com", password="changeme"),
]


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=bind or engine)


def seed_initial_data(db: Session, users: Optional[list[UserCreate]] = None) -> int:
    """
    Insert demo users when the users table is empty.

    Returns the number of rows inserted (0 if the table already had data).
    """
    repo = UserRepository.from_session(db)
    if repo.all():
        logger.info("Users table not empty, skipping seed")
        return 0

    inserted = 0
    for payload in users if users is not None else DEMO_USERS:
        data = payload.model_dump()
        data["password"] = hash_password(payload.password)
        repo.create(data)
        inserted += 1

    logger.info("Seeded %d users", inserted)
    return inserted
