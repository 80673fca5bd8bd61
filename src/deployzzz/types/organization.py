"""Organization record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Organization:
    """Information about a GCP organization."""

    id: str
    display_name: str

    @classmethod
    def from_json(cls, data: dict) -> Organization:
        """Build from an entry of ``gcloud organizations list --format=json``.

        The ``name`` field has the form ``organizations/ORG_ID``.
        """
        return cls(
            id=data.get("name", "").replace("organizations/", ""),
            display_name=data.get("displayName", ""),
        )

    def label(self) -> str:
        return f"{self.display_name} ({self.id})"


__all__ = ["Organization"]
