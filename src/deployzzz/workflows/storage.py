"""Storage workflow."""

import logging
from typing import Optional

from deployzzz.services import storage as storage_service

logger = logging.getLogger(__name__)


def create_bucket(
    bucket_name: str,
    project_id: str,
    location: Optional[str] = None,
    storage_class: Optional[str] = None,
    is_public: bool = False,
) -> bool:
    """Create a bucket, then open it to the public if requested.

    Returns:
        Whether the bucket was created; a failed public toggle is only logged
    """
    try:
        logger.info("Creating bucket %s in project %s", bucket_name, project_id)
        success = storage_service.create_bucket(bucket_name, project_id, location, storage_class)

        if success and is_public:
            logger.info("Making bucket %s public", bucket_name)
            if not storage_service.make_bucket_public(bucket_name, project_id):
                logger.warning("Bucket %s was created but could not be made public", bucket_name)

        return success
    except Exception as e:
        logger.error("Failed to create bucket: %s", e)
        return False


def list_buckets(project_id: str) -> list[str]:
    try:
        logger.info("Listing buckets in project %s", project_id)
        return storage_service.list_buckets(project_id)
    except Exception as e:
        logger.error("Failed to list buckets: %s", e)
        return []


def make_bucket_public(bucket_name: str, project_id: str) -> bool:
    try:
        logger.info("Making bucket %s public", bucket_name)
        return storage_service.make_bucket_public(bucket_name, project_id)
    except Exception as e:
        logger.error("Failed to make bucket public: %s", e)
        return False


def make_bucket_private(bucket_name: str, project_id: str) -> bool:
    try:
        logger.info("Making bucket %s private", bucket_name)
        return storage_service.make_bucket_private(bucket_name, project_id)
    except Exception as e:
        logger.error("Failed to make bucket private: %s", e)
        return False


def is_bucket_public(bucket_name: str, project_id: str) -> bool:
    try:
        logger.info("Checking if bucket %s is public in project %s", bucket_name, project_id)
        return storage_service.is_bucket_public(bucket_name, project_id)
    except Exception as e:
        logger.error("Failed to check bucket public status: %s", e)
        return False
