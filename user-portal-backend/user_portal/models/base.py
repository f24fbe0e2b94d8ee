# File: user_portal/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Every model inherits from this so its table is registered on Base.metadata.
    """
    pass
