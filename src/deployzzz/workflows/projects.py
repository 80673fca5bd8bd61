"""Project workflow."""

import logging
from typing import Optional

from deployzzz.services import projects as project_service
from deployzzz.types import Organization, ProjectInfo

logger = logging.getLogger(__name__)


def list_projects() -> list[str]:
    try:
        logger.info("Listing all projects")
        return project_service.list_projects()
    except Exception as e:
        logger.error("Failed to list projects: %s", e)
        return []


def get_project(project_id: str) -> Optional[ProjectInfo]:
    try:
        logger.info("Getting details for project %s", project_id)
        return project_service.describe_project(project_id)
    except Exception as e:
        logger.error("Failed to get project details: %s", e)
        return None


def create_project(project_id: str, name: Optional[str] = None, organization_id: Optional[str] = None) -> bool:
    try:
        logger.info("Creating new project %s", project_id)
        return project_service.create_project(project_id, name, organization_id)
    except Exception as e:
        logger.error("Failed to create project: %s", e)
        return False


def delete_project(project_id: str) -> bool:
    try:
        logger.info("Deleting project %s", project_id)
        return project_service.delete_project(project_id)
    except Exception as e:
        logger.error("Failed to delete project: %s", e)
        return False


def list_organizations() -> list[Organization]:
    try:
        logger.info("Listing all organizations")
        return project_service.list_organizations()
    except Exception as e:
        logger.error("Failed to list organizations: %s", e)
        return []


def set_active_project(project_id: str) -> bool:
    try:
        logger.info("Setting active project to %s", project_id)
        return project_service.set_active_project(project_id)
    except Exception as e:
        logger.error("Failed to set active project: %s", e)
        return False
