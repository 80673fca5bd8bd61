"""Organization policies through ``gcloud resource-manager org-policies``."""

import logging
from typing import Optional

from deployzzz.runner import GCloudRunner, get_runner
from deployzzz.types import GCloudError, OrgPolicy

logger = logging.getLogger(__name__)

_ORG_POLICIES = ["resource-manager", "org-policies"]


def list_policies(project_id: str, *, runner: Optional[GCloudRunner] = None) -> list[OrgPolicy]:
    """List the organization policies set on a project."""
    runner = runner or get_runner()
    try:
        policies = runner.run_json([*_ORG_POLICIES, "list", f"--project={project_id}"]) or []
        return [OrgPolicy.from_json(policy) for policy in policies]
    except (GCloudError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error("Failed to list organization policies: %s", e)
        return []


def get_policy(project_id: str, policy_name: str, *, runner: Optional[GCloudRunner] = None) -> Optional[OrgPolicy]:
    """Get the effective state of one policy on a project.

    Returns:
        The policy, or None if it cannot be described
    """
    runner = runner or get_runner()
    try:
        data = runner.run_json([*_ORG_POLICIES, "describe", policy_name, f"--project={project_id}"])
        if not data:
            return None
        return OrgPolicy.from_json(data)
    except (GCloudError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error("Failed to get organization policy %s: %s", policy_name, e)
        return None


def set_enforcement(
    project_id: str,
    policy_name: str,
    enforce: bool,
    *,
    runner: Optional[GCloudRunner] = None,
) -> bool:
    """Enable or disable enforcement of a boolean constraint on a project."""
    runner = runner or get_runner()
    verb = "enable-enforce" if enforce else "disable-enforce"
    try:
        runner.run([*_ORG_POLICIES, verb, policy_name, f"--project={project_id}"], capture=False)
    except GCloudError as e:
        logger.error("Failed to set organization policy %s: %s", policy_name, e)
        return False
    logger.info("Successfully %s %s", "enabled" if enforce else "disabled", policy_name)
    return True


def add_exception(
    project_id: str,
    policy_name: str,
    resource: str,
    *,
    runner: Optional[GCloudRunner] = None,
) -> bool:
    """Allow ``resource`` under a list constraint on a project."""
    runner = runner or get_runner()
    try:
        runner.run([*_ORG_POLICIES, "allow", policy_name, resource, f"--project={project_id}"], capture=False)
    except GCloudError as e:
        logger.error("Failed to add exception to organization policy %s: %s", policy_name, e)
        return False
    logger.info("Added exception for %s to %s", resource, policy_name)
    return True
