"""SQLAlchemy Declarative Base — shared base class and metadata for ORM models.

Invariants:
    - All models inherit from Base; Base.metadata is what alembic compares against
    - Index, unique, foreign-key and primary-key names are deterministic
      (naming convention) so migrations can drop them by name
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
