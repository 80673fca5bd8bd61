"""Authentication workflow."""

import logging
from typing import Optional

from deployzzz.services import auth as auth_service

logger = logging.getLogger(__name__)


def is_authenticated() -> bool:
    try:
        logger.info("Checking authentication status")
        return auth_service.is_authenticated()
    except Exception as e:
        logger.error("Failed to check authentication status: %s", e)
        return False


def authenticate() -> bool:
    """Run the login flow.

    ``GCloudError`` from the login command is left to the caller, which
    reports it as a failed login.
    """
    logger.info("Starting browser login")
    return auth_service.authenticate()


def get_current_account() -> Optional[str]:
    try:
        logger.info("Fetching current account")
        return auth_service.get_current_account()
    except Exception as e:
        logger.error("Failed to fetch current account: %s", e)
        return None


def list_accounts(exclude_current: bool = False) -> list[str]:
    try:
        logger.info("Listing connected accounts")
        return auth_service.list_accounts(exclude_current)
    except Exception as e:
        logger.error("Failed to list accounts: %s", e)
        return []


def switch_account(email: str) -> bool:
    try:
        logger.info("Switching to account %s", email)
        return auth_service.switch_account(email)
    except Exception as e:
        logger.error("Failed to switch account: %s", e)
        return False


def add_account() -> bool:
    try:
        logger.info("Adding a new account")
        return auth_service.add_account()
    except Exception as e:
        logger.error("Failed to add account: %s", e)
        return False


def logout() -> bool:
    try:
        logger.info("Revoking all accounts")
        return auth_service.logout()
    except Exception as e:
        logger.error("Failed to logout: %s", e)
        return False
