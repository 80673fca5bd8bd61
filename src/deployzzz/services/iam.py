"""Project IAM role bindings through ``gcloud projects *-iam-policy-binding``."""

import logging
from typing import Optional

from deployzzz.runner import GCloudRunner, get_runner
from deployzzz.types import ADMIN_ROLES, COMMON_ROLES, GCloudError, Role

logger = logging.getLogger(__name__)


def _binding_args(verb: str, project_id: str, email: str, role: str) -> list[str]:
    return [
        "projects",
        verb,
        project_id,
        f"--member=user:{email}",
        f"--role={role}",
        "--condition=None",
    ]


def add_role(project_id: str, email: str, role: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Grant ``role`` on the project to the user ``email``."""
    runner = runner or get_runner()
    try:
        runner.run(_binding_args("add-iam-policy-binding", project_id, email, role))
    except GCloudError as e:
        logger.error("Failed to add role: %s", e)
        return False
    logger.info("Role %s added to user %s", role, email)
    return True


def remove_role(project_id: str, email: str, role: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Revoke ``role`` on the project from the user ``email``."""
    runner = runner or get_runner()
    try:
        runner.run(_binding_args("remove-iam-policy-binding", project_id, email, role))
    except GCloudError as e:
        logger.error("Failed to remove role: %s", e)
        return False
    logger.info("Role %s removed from user %s", role, email)
    return True


def list_user_roles(project_id: str, email: str, *, runner: Optional[GCloudRunner] = None) -> list[str]:
    """List roles bound directly to ``user:email`` on the project."""
    runner = runner or get_runner()
    member = f"user:{email}"
    try:
        policy = runner.run_json(["projects", "get-iam-policy", project_id]) or {}
        return [
            binding["role"]
            for binding in policy.get("bindings", [])
            if member in binding.get("members", [])
        ]
    except (GCloudError, ValueError, KeyError, AttributeError) as e:
        logger.error("Failed to list user roles: %s", e)
        return []


def apply_admin_roles(project_id: str, email: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Grant every role in ``ADMIN_ROLES`` to the user.

    All roles are attempted even when one fails; each failure is logged as a
    warning.

    Returns:
        True only if every role was granted
    """
    runner = runner or get_runner()
    success = True
    for role in ADMIN_ROLES:
        try:
            runner.run(_binding_args("add-iam-policy-binding", project_id, email, role))
            logger.info("Role %s added to user %s", role, email)
        except GCloudError as e:
            logger.warning("Failed to add role %s: %s", role, e)
            success = False
    return success


def common_roles() -> list[Role]:
    """Return the catalog of commonly granted roles."""
    return [Role(name=name, description=description) for name, description in COMMON_ROLES.items()]
