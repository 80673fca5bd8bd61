"""Workflows sit between the CLI commands and the gcloud services.

Each function logs what it is about to do, calls one service function and
hands back its result. Unexpected exceptions are logged and replaced by the
same default the service would have returned.
"""

from deployzzz.workflows import auth, billing, iam, org_policy, permissions, projects, storage

__all__ = ["auth", "billing", "iam", "org_policy", "permissions", "projects", "storage"]
