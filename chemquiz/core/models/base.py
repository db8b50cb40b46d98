from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase


# -----------------------------------------------------------
# Base Configuration (required for SQLAlchemy 2.0)
# -----------------------------------------------------------
class Base(DeclarativeBase):
    """Base class for every mapped table of the application."""


# Unsigned 64-bit identifiers. SQLite only autoincrements INTEGER primary keys.
BigId = BigInteger().with_variant(Integer(), "sqlite")
