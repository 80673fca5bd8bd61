"""Organization policy workflow."""

import logging
from typing import Optional

from deployzzz.services import org_policy as org_policy_service
from deployzzz.types import OrgPolicy

logger = logging.getLogger(__name__)


def list_policies(project_id: str) -> list[OrgPolicy]:
    try:
        logger.info("Listing organization policies for project %s", project_id)
        return org_policy_service.list_policies(project_id)
    except Exception as e:
        logger.error("Failed to list organization policies: %s", e)
        return []


def get_policy(project_id: str, policy_name: str) -> Optional[OrgPolicy]:
    try:
        logger.info("Fetching policy %s for project %s", policy_name, project_id)
        return org_policy_service.get_policy(project_id, policy_name)
    except Exception as e:
        logger.error("Failed to get policy: %s", e)
        return None


def set_enforcement(project_id: str, policy_name: str, enforce: bool) -> bool:
    try:
        logger.info("Setting enforcement status for policy %s in project %s", policy_name, project_id)
        return org_policy_service.set_enforcement(project_id, policy_name, enforce)
    except Exception as e:
        logger.error("Failed to set policy enforcement: %s", e)
        return False


def add_exception(project_id: str, policy_name: str, resource: str) -> bool:
    try:
        logger.info("Adding exception for policy %s in project %s", policy_name, project_id)
        return org_policy_service.add_exception(project_id, policy_name, resource)
    except Exception as e:
        logger.error("Failed to add policy exception: %s", e)
        return False
