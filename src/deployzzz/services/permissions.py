"""The current user's effective roles on a project."""

import logging
from typing import Iterable, Optional

from deployzzz.runner import GCloudRunner, get_runner
from deployzzz.services import auth, iam

logger = logging.getLogger(__name__)


def list_permissions(project_id: str, *, runner: Optional[GCloudRunner] = None) -> list[str]:
    """List the roles the active account holds on a project.

    Roles stand in for permissions: the project IAM policy only records role
    bindings.
    """
    runner = runner or get_runner()
    email = auth.get_current_account(runner=runner)
    if not email:
        logger.error("Failed to list permissions: no active account")
        return []

    roles = iam.list_user_roles(project_id, email, runner=runner)
    if not roles:
        logger.warning("No permissions found for the current user")
    return roles


def check_permissions(
    project_id: str,
    permissions: Iterable[str],
    *,
    runner: Optional[GCloudRunner] = None,
) -> dict[str, bool]:
    """Check which of ``permissions`` the active account holds."""
    available = set(list_permissions(project_id, runner=runner))
    return {permission: permission in available for permission in permissions}
