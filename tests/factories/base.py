"""Shared polyfactory setup for the SQLModel tables."""

from uuid import UUID, uuid7

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from src.app.models.base import utc_now

__all__ = ["BaseFactory", "generate_uuid7", "utc_now"]


def generate_uuid7() -> UUID:
    return uuid7()


class BaseFactory(SQLAlchemyFactory):
    """Factories build detached rows; related rows are never created.

    Foreign key columns are regular fields, so each factory declares a value
    for them (a fresh uuid7 or None) and tests override them as needed.
    """

    __is_base_factory__ = True
    __set_relationships__ = False
    __set_foreign_keys__ = True
