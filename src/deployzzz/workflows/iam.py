"""IAM workflow."""

import logging

from deployzzz.services import iam as iam_service
from deployzzz.types import Role

logger = logging.getLogger(__name__)


def add_role(project_id: str, email: str, role: str) -> bool:
    try:
        logger.info("Adding role %s to user %s in project %s", role, email, project_id)
        return iam_service.add_role(project_id, email, role)
    except Exception as e:
        logger.error("Failed to add role: %s", e)
        return False


def remove_role(project_id: str, email: str, role: str) -> bool:
    try:
        logger.info("Removing role %s from user %s in project %s", role, email, project_id)
        return iam_service.remove_role(project_id, email, role)
    except Exception as e:
        logger.error("Failed to remove role: %s", e)
        return False


def list_user_roles(project_id: str, email: str) -> list[str]:
    try:
        logger.info("Listing roles for user %s in project %s", email, project_id)
        return iam_service.list_user_roles(project_id, email)
    except Exception as e:
        logger.error("Failed to list user roles: %s", e)
        return []


def apply_admin_roles(project_id: str, email: str) -> bool:
    try:
        logger.info("Applying all admin roles to user %s in project %s", email, project_id)
        return iam_service.apply_admin_roles(project_id, email)
    except Exception as e:
        logger.error("Failed to apply admin roles: %s", e)
        return False


def common_roles() -> list[Role]:
    return iam_service.common_roles()
