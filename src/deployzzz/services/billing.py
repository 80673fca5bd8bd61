"""Billing accounts through ``gcloud billing``."""

import logging
from typing import Optional

from deployzzz.runner import GCloudRunner, get_runner
from deployzzz.types import BillingAccount, GCloudError

logger = logging.getLogger(__name__)


def list_billing_accounts(*, runner: Optional[GCloudRunner] = None) -> list[BillingAccount]:
    """Get list of available billing accounts."""
    runner = runner or get_runner()
    try:
        accounts = runner.run_json(["billing", "accounts", "list"]) or []
        return [BillingAccount.from_json(account) for account in accounts]
    except (GCloudError, ValueError, TypeError, AttributeError) as e:
        logger.error("Failed to list billing accounts: %s", e)
        return []


def link_billing_account(
    project_id: str,
    billing_account_id: str,
    *,
    runner: Optional[GCloudRunner] = None,
) -> bool:
    """Link a billing account to the project.

    Args:
        project_id: The project ID
        billing_account_id: The billing account ID, with or without the
            ``billingAccounts/`` prefix
        runner: Runner override
    """
    runner = runner or get_runner()
    account_id = billing_account_id.replace("billingAccounts/", "")
    try:
        runner.run(
            ["billing", "projects", "link", project_id, f"--billing-account={account_id}"],
            capture=False,
        )
    except GCloudError as e:
        logger.error("Failed to link billing account: %s", e)
        return False
    logger.info("Billing account %s linked to %s", account_id, project_id)
    return True


def is_billing_enabled(project_id: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Check if billing is enabled for a project."""
    runner = runner or get_runner()
    try:
        info = runner.run_json(["billing", "projects", "describe", project_id]) or {}
        return bool(info.get("billingEnabled", False))
    except (GCloudError, ValueError, AttributeError) as e:
        logger.error("Failed to check billing status: %s", e)
        return False
