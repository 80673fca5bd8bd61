"""Project details record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ProjectInfo:
    """Details of a GCP project as reported by ``gcloud projects describe``.

    Attributes
    ----------
    project_id : str
        The project ID.
    name : str
        Display name.
    project_number : str
        Numeric project number.
    lifecycle_state : str
        ``ACTIVE``, ``DELETE_REQUESTED`` and so on.
    create_time : str
        RFC 3339 creation timestamp.
    parent_type : str, optional
        ``organization`` or ``folder`` when the project has a parent.
    parent_id : str, optional
        ID of the parent container.
    enabled_apis : list[str]
        Service names enabled on the project.
    """

    project_id: str
    name: str
    project_number: str = ""
    lifecycle_state: str = ""
    create_time: str = ""
    parent_type: Optional[str] = None
    parent_id: Optional[str] = None
    enabled_apis: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> ProjectInfo:
        parent = data.get("parent") or {}
        return cls(
            project_id=data["projectId"],
            name=data.get("name", ""),
            project_number=str(data.get("projectNumber", "")),
            lifecycle_state=data.get("lifecycleState", ""),
            create_time=data.get("createTime", ""),
            parent_type=parent.get("type"),
            parent_id=parent.get("id"),
        )

    @property
    def organization_id(self) -> Optional[str]:
        """The parent organization ID, if the direct parent is an organization."""
        return self.parent_id if self.parent_type == "organization" else None

    def parent_label(self) -> str:
        if not self.parent_id:
            return "None"
        return f"{self.parent_type}/{self.parent_id}"


__all__ = ["ProjectInfo"]
