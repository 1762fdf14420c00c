"""University, user and client factories for test data generation."""

from polyfactory import Use

from src.app.models import Client, University, User
from src.app.models.enums import UserRole
from tests.factories.base import BaseFactory, generate_uuid7, utc_now


class UniversityFactory(BaseFactory):
    __model__ = University

    id = Use(generate_uuid7)
    name = "Test University"
    slug = Use(lambda: f"uni-{generate_uuid7().hex[-8:]}")
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = Use(generate_uuid7)
    email = Use(lambda: f"user_{generate_uuid7().hex[-8:]}@example.com")
    full_name = "Test User"
    role = UserRole.STUDENT.value
    university_id = None
    is_active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def client(cls, **kwargs):
        """Create a user with the client role."""
        return cls.build(role=UserRole.CLIENT.value, **kwargs)

    @classmethod
    def supervisor(cls, **kwargs):
        return cls.build(role=UserRole.SUPERVISOR.value, **kwargs)


class ClientFactory(BaseFactory):
    """Factory for client profiles."""

    __model__ = Client

    id = Use(generate_uuid7)
    user_id = Use(generate_uuid7)
    organization = "Acme Corp"
    organization_logo_url = "https://example.com/logo.png"
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
