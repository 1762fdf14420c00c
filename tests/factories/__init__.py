"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, ProjectFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid7, utc_now
from tests.factories.marketplace import BookmarkFactory, ExperienceFactory, ProjectFactory
from tests.factories.user import ClientFactory, UniversityFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid7",
    "utc_now",
    # Users
    "ClientFactory",
    "UniversityFactory",
    "UserFactory",
    # Marketplace
    "BookmarkFactory",
    "ExperienceFactory",
    "ProjectFactory",
]
