"""Cloud Storage buckets through ``gcloud storage buckets``."""

import logging
from typing import Optional

from deployzzz.runner import GCloudRunner, get_runner
from deployzzz.types import PUBLIC_MEMBER, PUBLIC_READER_ROLE, GCloudError

logger = logging.getLogger(__name__)


def _bucket_url(name: str) -> str:
    return f"gs://{name}"


def create_bucket(
    name: str,
    project_id: str,
    location: Optional[str] = None,
    storage_class: Optional[str] = None,
    *,
    runner: Optional[GCloudRunner] = None,
) -> bool:
    """Create a new bucket.

    Args:
        name: Bucket name (without the ``gs://`` prefix)
        project_id: The project that owns the bucket
        location: Optional location such as ``us-central1``
        storage_class: Optional default storage class such as ``STANDARD``
        runner: Runner override

    Returns:
        True if the bucket was created
    """
    runner = runner or get_runner()
    args = ["storage", "buckets", "create", _bucket_url(name), f"--project={project_id}"]
    if location:
        args.append(f"--location={location}")
    if storage_class:
        args.append(f"--default-storage-class={storage_class}")

    try:
        runner.run(args, capture=False)
    except GCloudError as e:
        logger.error("Failed to create bucket: %s", e)
        return False
    logger.info("Bucket %s created", name)
    return True


def list_buckets(project_id: str, *, runner: Optional[GCloudRunner] = None) -> list[str]:
    """List bucket names in a project."""
    runner = runner or get_runner()
    try:
        output = runner.run([
            "storage",
            "buckets",
            "list",
            f"--project={project_id}",
            "--format=value(name)",
        ])
    except GCloudError as e:
        logger.error("Failed to list buckets: %s", e)
        return []
    return [line.strip() for line in output.splitlines() if line.strip()]


def _public_binding(verb: str, name: str, project_id: str) -> list[str]:
    return [
        "storage",
        "buckets",
        verb,
        _bucket_url(name),
        f"--member={PUBLIC_MEMBER}",
        f"--role={PUBLIC_READER_ROLE}",
        f"--project={project_id}",
    ]


def make_bucket_public(name: str, project_id: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Grant ``allUsers`` read access to the bucket's objects."""
    runner = runner or get_runner()
    try:
        runner.run(_public_binding("add-iam-policy-binding", name, project_id))
    except GCloudError as e:
        logger.error("Failed to make bucket public: %s", e)
        return False
    logger.info("Bucket %s is now public", name)
    return True


def make_bucket_private(name: str, project_id: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Remove the ``allUsers`` read binding from the bucket."""
    runner = runner or get_runner()
    try:
        runner.run(_public_binding("remove-iam-policy-binding", name, project_id))
    except GCloudError as e:
        logger.error("Failed to make bucket private: %s", e)
        return False
    logger.info("Bucket %s is now private", name)
    return True


def is_bucket_public(name: str, project_id: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Check whether ``allUsers`` can read the bucket's objects."""
    runner = runner or get_runner()
    try:
        policy = runner.run_json([
            "storage",
            "buckets",
            "get-iam-policy",
            _bucket_url(name),
            f"--project={project_id}",
        ]) or {}
        return any(
            binding.get("role") == PUBLIC_READER_ROLE and PUBLIC_MEMBER in binding.get("members", [])
            for binding in policy.get("bindings", [])
        )
    except (GCloudError, ValueError, AttributeError) as e:
        logger.error("Failed to check bucket public status: %s", e)
        return False
