"""Billing account record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BillingAccount:
    """Information about a GCP billing account.

    Attributes
    ----------
    id : str
        Billing account ID (for example ``"012345-567890-ABCDEF"``).
    display_name : str
        Human-friendly billing account name.
    open : bool
        Whether the account is open (defaults to ``True``).
    """

    id: str
    display_name: str
    open: bool = True

    @classmethod
    def from_json(cls, data: dict) -> BillingAccount:
        """Build from an entry of ``gcloud billing accounts list --format=json``."""
        return cls(
            id=data.get("name", "").replace("billingAccounts/", ""),
            display_name=data.get("displayName", ""),
            open=bool(data.get("open", False)),
        )

    @property
    def status(self) -> str:
        return "OPEN" if self.open else "CLOSED"


__all__ = ["BillingAccount"]
