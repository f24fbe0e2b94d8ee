from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from user_portal.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    echo=settings.database_echo,
    connect_args={"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ----------------------------------------------------
# DB Session helper
# ----------------------------------------------------
@contextmanager
def get_db() -> Iterator[Session]:
    """
    Provide a SQLAlchemy session and close it afterwards.

    Usage:
        with get_db() as db:
            repo = UserRepository.from_session(db)
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
