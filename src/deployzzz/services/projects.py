"""Project lifecycle through ``gcloud projects``."""

import logging
from typing import Optional

from deployzzz.runner import GCloudRunner, get_runner
from deployzzz.types import GCloudError, Organization, ProjectInfo

logger = logging.getLogger(__name__)


def list_projects(*, runner: Optional[GCloudRunner] = None) -> list[str]:
    """List the IDs of all projects visible to the active account."""
    runner = runner or get_runner()
    try:
        projects = runner.run_json(["projects", "list"]) or []
        return [project["projectId"] for project in projects]
    except (GCloudError, ValueError, KeyError, TypeError) as e:
        logger.error("Failed to list projects: %s", e)
        return []


def list_enabled_apis(project_id: str, *, runner: Optional[GCloudRunner] = None) -> list[str]:
    """List the service names enabled on a project."""
    runner = runner or get_runner()
    try:
        output = runner.run([
            "services",
            "list",
            "--enabled",
            f"--project={project_id}",
            "--format=value(config.name)",
        ])
    except GCloudError as e:
        logger.error("Failed to list enabled APIs: %s", e)
        return []
    return [line.strip() for line in output.splitlines() if line.strip()]


def describe_project(project_id: str, *, runner: Optional[GCloudRunner] = None) -> Optional[ProjectInfo]:
    """Get project details, including its enabled APIs.

    Returns:
        The project details, or None if the project cannot be described
    """
    runner = runner or get_runner()
    try:
        data = runner.run_json(["projects", "describe", project_id])
        if not data:
            return None
        info = ProjectInfo.from_json(data)
    except (GCloudError, ValueError, KeyError, TypeError) as e:
        logger.error("Failed to get project details: %s", e)
        return None

    info.enabled_apis = list_enabled_apis(project_id, runner=runner)
    return info


def create_project(
    project_id: str,
    name: Optional[str] = None,
    organization_id: Optional[str] = None,
    *,
    runner: Optional[GCloudRunner] = None,
) -> bool:
    """Create a GCP project.

    Args:
        project_id: The project ID to create
        name: Optional display name (gcloud defaults it to the ID)
        organization_id: Optional parent organization ID
        runner: Runner override

    Returns:
        True if the project was created
    """
    runner = runner or get_runner()
    args = ["projects", "create", project_id]
    if name:
        args.append(f"--name={name}")
    if organization_id:
        args.append(f"--organization={organization_id}")

    try:
        runner.run(args, capture=False)
    except GCloudError as e:
        logger.error("Failed to create project: %s", e)
        return False
    logger.info("Project %s created", project_id)
    return True


def delete_project(project_id: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Delete a GCP project."""
    runner = runner or get_runner()
    try:
        runner.run(["projects", "delete", project_id, "--quiet"], capture=False)
    except GCloudError as e:
        logger.error("Failed to delete project: %s", e)
        return False
    logger.info("Project %s deleted", project_id)
    return True


def list_organizations(*, runner: Optional[GCloudRunner] = None) -> list[Organization]:
    """List organizations that can parent a new project."""
    runner = runner or get_runner()
    try:
        orgs = runner.run_json(["organizations", "list"]) or []
        return [Organization.from_json(org) for org in orgs]
    except (GCloudError, ValueError, TypeError, AttributeError) as e:
        logger.error("Failed to list organizations: %s", e)
        return []


def set_active_project(project_id: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Make ``project_id`` the default project in the gcloud configuration."""
    runner = runner or get_runner()
    try:
        runner.run(["config", "set", "project", project_id])
        return True
    except GCloudError as e:
        logger.error("Failed to set active project: %s", e)
        return False
