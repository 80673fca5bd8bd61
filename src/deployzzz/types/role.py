"""IAM role dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Role:
    """Information about an IAM role.

    Attributes
    ----------
    name : str
        Role resource name (e.g., ``"roles/owner"``).
    description : str
        Short description of what the role grants.
    """

    name: str
    description: str

    def label(self) -> str:
        """Return the ``"name - description"`` text shown in role pickers."""
        return f"{self.name} - {self.description}" if self.description else self.name


__all__ = ["Role"]
