"""gcloud-backed services, one module per resource family.

Every function accepts a keyword-only ``runner`` to override the process-wide
:class:`~deployzzz.runner.GCloudRunner`. Failures are logged and turned into
the documented default value instead of being raised.
"""

from deployzzz.services import auth, billing, iam, org_policy, permissions, projects, storage

__all__ = ["auth", "billing", "iam", "org_policy", "permissions", "projects", "storage"]
