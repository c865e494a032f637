"""SQLAlchemy Declarative Base: shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Table names carry the getlostportal_ prefix of the existing database
"""

from sqlalchemy.orm import DeclarativeBase

TABLE_PREFIX = "getlostportal_"


class Base(DeclarativeBase):
    """Base class for all portal ORM models."""
    pass
