from sqlalchemy.orm import DeclarativeBase


# -----------------------------------------------------------
# Base Configuration (required for SQLAlchemy 2.0)
# -----------------------------------------------------------
class Base(DeclarativeBase):
    """Declarative base shared by every mapped entity."""
    pass
