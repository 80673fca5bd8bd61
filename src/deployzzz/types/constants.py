"""Shared constants for deployzzz."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

COMMON_ROLES: Mapping[str, str] = MappingProxyType(
    {
        "roles/owner": "Full access to all resources",
        "roles/editor": "Edit access to all resources",
        "roles/viewer": "View access to all resources",
        "roles/browser": "Read-only access to browse resources",
        "roles/storage.admin": "Full access to storage resources",
        "roles/storage.objectViewer": "View access to storage objects",
        "roles/compute.admin": "Full access to compute resources",
        "roles/cloudfunctions.admin": "Full access to Cloud Functions",
    }
)

ADMIN_ROLES: tuple[str, ...] = (
    "roles/owner",
    "roles/storage.admin",
    "roles/compute.admin",
    "roles/cloudfunctions.admin",
)

BUCKET_LOCATIONS: tuple[str, ...] = (
    "us-central1",
    "us-east1",
    "us-west1",
    "europe-west1",
    "asia-east1",
)

STORAGE_CLASSES: Mapping[str, str] = MappingProxyType(
    {
        "STANDARD": "Hot data, frequent access",
        "NEARLINE": "Access less than once per month",
        "COLDLINE": "Access less than once per quarter",
        "ARCHIVE": "Access less than once per year",
    }
)

PUBLIC_MEMBER = "allUsers"
PUBLIC_READER_ROLE = "roles/storage.objectViewer"

__all__ = [
    "ADMIN_ROLES",
    "BUCKET_LOCATIONS",
    "COMMON_ROLES",
    "PUBLIC_MEMBER",
    "PUBLIC_READER_ROLE",
    "STORAGE_CLASSES",
]
