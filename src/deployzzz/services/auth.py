"""Account authentication through ``gcloud auth``."""

import logging
from typing import Optional

from deployzzz.runner import GCloudRunner, get_runner
from deployzzz.types import GCloudError

logger = logging.getLogger(__name__)

_LOGIN = ["auth", "login", "--launch-browser"]


def _active_accounts(runner: GCloudRunner) -> list[dict]:
    return runner.run_json(["auth", "list", "--filter=status:ACTIVE"]) or []


def is_authenticated(*, runner: Optional[GCloudRunner] = None) -> bool:
    """Check if at least one account has an active session."""
    runner = runner or get_runner()
    try:
        return len(_active_accounts(runner)) > 0
    except (GCloudError, ValueError):
        return False


def authenticate(*, runner: Optional[GCloudRunner] = None) -> bool:
    """Run the browser login flow and report whether a session is now active.

    The login command inherits the terminal. Failures of the login command
    itself propagate as ``GCloudError`` so the caller decides how to report
    them.
    """
    runner = runner or get_runner()
    runner.run(_LOGIN, capture=False)
    try:
        return len(_active_accounts(runner)) > 0
    except (GCloudError, ValueError) as e:
        logger.error("Failed to authenticate: %s", e)
        return False


def get_current_account(*, runner: Optional[GCloudRunner] = None) -> Optional[str]:
    """Get the account gcloud is currently configured to use."""
    runner = runner or get_runner()
    try:
        account = runner.run(["config", "get-value", "account"])
    except GCloudError:
        return None
    return account or None


def list_all_accounts(*, runner: Optional[GCloudRunner] = None) -> list[str]:
    """List every credentialed account, active or not."""
    runner = runner or get_runner()
    try:
        accounts = runner.run_json(["auth", "list"]) or []
        return [account["account"] for account in accounts]
    except (GCloudError, ValueError, KeyError, TypeError) as e:
        logger.error("Failed to list accounts: %s", e)
        return []


def list_accounts(
    exclude_current: bool = False,
    *,
    runner: Optional[GCloudRunner] = None,
) -> list[str]:
    """List connected accounts.

    Args:
        exclude_current: If True, leave out the active account
        runner: Runner override

    Returns:
        List of account emails
    """
    runner = runner or get_runner()
    accounts = list_all_accounts(runner=runner)
    if exclude_current:
        current = get_current_account(runner=runner)
        return [account for account in accounts if account != current]
    return accounts


def switch_account(email: str, *, runner: Optional[GCloudRunner] = None) -> bool:
    """Make ``email`` the active account."""
    runner = runner or get_runner()
    try:
        runner.run(["config", "set", "account", email])
        return True
    except GCloudError as e:
        logger.error("Failed to switch account: %s", e)
        return False


def logout(*, runner: Optional[GCloudRunner] = None) -> bool:
    """Revoke every credentialed account."""
    runner = runner or get_runner()
    try:
        runner.run(["auth", "revoke", "--all", "--quiet"], capture=False)
        return True
    except GCloudError as e:
        logger.error("Failed to logout: %s", e)
        return False


def add_account(*, runner: Optional[GCloudRunner] = None) -> bool:
    """Log in with an additional account through the browser flow."""
    runner = runner or get_runner()
    try:
        runner.run(_LOGIN, capture=False)
        return True
    except GCloudError as e:
        logger.error("Failed to add account: %s", e)
        return False
