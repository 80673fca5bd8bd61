"""Guided Google Cloud workflows for the terminal"""

from deployzzz.runner import GCloudRunner, get_runner, set_runner
from deployzzz.types import (
    ADMIN_ROLES,
    COMMON_ROLES,
    BillingAccount,
    CommandInterrupted,
    GCloudError,
    Organization,
    OrgPolicy,
    ProjectInfo,
    Role,
)

__version__ = "0.1.0"


__all__ = [
    "__version__",
    "GCloudRunner",
    "get_runner",
    "set_runner",
    "ADMIN_ROLES",
    "COMMON_ROLES",
    "BillingAccount",
    "CommandInterrupted",
    "GCloudError",
    "Organization",
    "OrgPolicy",
    "ProjectInfo",
    "Role",
]
