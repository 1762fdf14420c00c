"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Role carried in the access token."""

    STUDENT = "student"
    CLIENT = "client"
    SUPERVISOR = "supervisor"
    ADMIN = "admin"


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    DRAFT = "draft"
    PUBLISHED = "published"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ApprovalStatus(str, Enum):
    """Project review status."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ProjectCategory(str, Enum):
    WEB_DEVELOPMENT = "web_development"
    MOBILE_DEVELOPMENT = "mobile_development"
    DATA_SCIENCE = "data_science"
    MACHINE_LEARNING = "machine_learning"
    DESIGN = "design"
    MARKETING = "marketing"
    RESEARCH = "research"
    CONSULTING = "consulting"
    OTHER = "other"


class ProjectDifficulty(str, Enum):
    ROOKIE = "ROOKIE"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class ExperienceStatus(str, Enum):
    """Experience lifecycle status."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class OwnershipFilter(str, Enum):
    """List filter for bookmarks and experiences.

    CREATED: created by the caller. SHARED: shared with the caller.
    """

    CREATED = "CREATED"
    SHARED = "SHARED"
    ALL = "ALL"


class ExperienceView(str, Enum):
    GRID = "GRID"
    LIST = "LIST"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
