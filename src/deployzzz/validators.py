"""Validation rules for identifiers typed at prompts."""

import re

PROJECT_ID_RE = re.compile(r"^[a-z][-a-z0-9]{4,28}[a-z0-9]$")
BUCKET_NAME_RE = re.compile(r"^[a-z0-9][-a-z0-9.]+[a-z0-9]$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PROJECT_ID_MESSAGE = (
    "Project ID must be between 6 and 30 characters, start with a letter, "
    "and contain only lowercase letters, numbers, and hyphens"
)
BUCKET_NAME_MESSAGE = "Bucket name must contain only lowercase letters, numbers, dots, and hyphens"
EMAIL_MESSAGE = "Please enter a valid email address"
PROJECT_NAME_MESSAGE = "Project name must be between 4 and 30 characters"
ROLE_MESSAGE = 'Role must start with "roles/"'
RESOURCE_PATH_MESSAGE = 'Resource path must start with "//"'
SELECTION_MESSAGE = "Please select at least one item"


def is_project_id(value: str) -> bool:
    return bool(PROJECT_ID_RE.fullmatch(value))


def is_bucket_name(value: str) -> bool:
    return bool(BUCKET_NAME_RE.fullmatch(value))


def is_email(value: str) -> bool:
    return bool(EMAIL_RE.fullmatch(value))


def is_project_name(value: str) -> bool:
    return 4 <= len(value) <= 30


def is_role(value: str) -> bool:
    return value.startswith("roles/") and len(value) > len("roles/")


def is_resource_path(value: str) -> bool:
    return value.startswith("//") and len(value) > 2


def is_nonempty_selection(values: list) -> bool:
    return len(values) > 0
