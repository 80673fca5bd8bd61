"""Permissions workflow."""

import logging

from deployzzz.services import permissions as permissions_service

logger = logging.getLogger(__name__)


def list_permissions(project_id: str) -> list[str]:
    try:
        logger.info("Listing permissions for project %s", project_id)
        return permissions_service.list_permissions(project_id)
    except Exception as e:
        logger.error("Failed to list permissions: %s", e)
        return []


def check_permissions(project_id: str, permissions: list[str]) -> dict[str, bool]:
    try:
        logger.info("Checking permissions for project %s: %s", project_id, ", ".join(permissions))
        return permissions_service.check_permissions(project_id, permissions)
    except Exception as e:
        logger.error("Failed to check permissions: %s", e)
        return {permission: False for permission in permissions}
