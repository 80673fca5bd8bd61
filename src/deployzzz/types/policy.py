"""Organization policy record."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OrgPolicy:
    """An organization policy as seen from a project.

    Attributes
    ----------
    name : str
        Constraint name (e.g., ``"constraints/storage.publicAccessPrevention"``).
    enforced : bool
        Boolean-constraint enforcement flag.
    update_time : str
        Last update timestamp, empty if the policy was never set.
    exceptions : list[str]
        Resources allowed by a list constraint.
    """

    name: str
    enforced: bool = False
    update_time: str = ""
    exceptions: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> OrgPolicy:
        """Build from ``gcloud resource-manager org-policies`` JSON output."""
        boolean_policy = data.get("booleanPolicy") or {}
        list_policy = data.get("listPolicy") or {}
        return cls(
            name=data["constraint"],
            enforced=bool(boolean_policy.get("enforced", False)),
            update_time=data.get("updateTime", ""),
            exceptions=list(list_policy.get("allowedValues", [])),
        )

    @property
    def enforcement_label(self) -> str:
        return "Enforced" if self.enforced else "Not Enforced"


__all__ = ["OrgPolicy"]
