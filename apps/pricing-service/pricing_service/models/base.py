# pricing_service/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Common base for every SQLAlchemy model.
    Alembic reads Base.metadata to discover tables.
    """
    pass
