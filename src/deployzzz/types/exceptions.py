"""Custom exceptions for deployzzz."""

from __future__ import annotations


class GCloudError(Exception):
    """Exception raised for gcloud command errors."""

    pass


class CommandInterrupted(KeyboardInterrupt):
    """Raised when a gcloud subprocess was stopped by the interrupt key.

    Subclasses ``KeyboardInterrupt``, so ``except Exception`` does not catch it.
    """

    pass


class ConfigError(Exception):
    """Raised when the configuration file cannot be read."""

    pass


__all__ = ["CommandInterrupted", "ConfigError", "GCloudError"]
