"""Billing workflow."""

import logging

from deployzzz.services import billing as billing_service
from deployzzz.types import BillingAccount

logger = logging.getLogger(__name__)


def list_billing_accounts() -> list[BillingAccount]:
    try:
        logger.info("Fetching billing accounts")
        return billing_service.list_billing_accounts()
    except Exception as e:
        logger.error("Failed to list billing accounts: %s", e)
        return []


def link_billing_account(project_id: str, billing_account_id: str) -> bool:
    try:
        logger.info("Linking billing account %s to project %s", billing_account_id, project_id)
        return billing_service.link_billing_account(project_id, billing_account_id)
    except Exception as e:
        logger.error("Failed to link billing account: %s", e)
        return False


def is_billing_enabled(project_id: str) -> bool:
    try:
        logger.info("Checking billing status for project %s", project_id)
        return billing_service.is_billing_enabled(project_id)
    except Exception as e:
        logger.error("Failed to check billing status: %s", e)
        return False
