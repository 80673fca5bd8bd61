"""Public exports for deployzzz types."""

from __future__ import annotations

from .billing_account import BillingAccount
from .constants import (
    ADMIN_ROLES,
    BUCKET_LOCATIONS,
    COMMON_ROLES,
    PUBLIC_MEMBER,
    PUBLIC_READER_ROLE,
    STORAGE_CLASSES,
)
from .exceptions import CommandInterrupted, ConfigError, GCloudError
from .organization import Organization
from .policy import OrgPolicy
from .project import ProjectInfo
from .role import Role

__all__ = [
    "ADMIN_ROLES",
    "BUCKET_LOCATIONS",
    "COMMON_ROLES",
    "PUBLIC_MEMBER",
    "PUBLIC_READER_ROLE",
    "STORAGE_CLASSES",
    "BillingAccount",
    "CommandInterrupted",
    "ConfigError",
    "GCloudError",
    "OrgPolicy",
    "Organization",
    "ProjectInfo",
    "Role",
]
