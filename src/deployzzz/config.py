"""Settings for deployzzz.

Values come from, in increasing priority:

1. built-in defaults,
2. ``~/.config/deployzzz/config.yaml`` (or the file named by ``DEPLOYZZZ_CONFIG``),
3. the ``DEPLOYZZZ_GCLOUD`` and ``DEPLOYZZZ_LOG_LEVEL`` environment variables,
4. command-line flags (applied by the CLI callback).
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

from deployzzz.types import ConfigError

_settings: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    gcloud_path: str = "gcloud"
    log_level: str = "WARNING"
    verbose: bool = False

    def with_overrides(self, *, verbose: bool = False, log_level: Optional[str] = None) -> "Settings":
        """Return a copy with command-line overrides applied."""
        level = log_level or ("DEBUG" if verbose else self.log_level)
        return replace(self, verbose=verbose or self.verbose, log_level=level.upper())


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to the YAML configuration file (it may not exist)
    """
    override = os.getenv("DEPLOYZZZ_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "deployzzz" / "config.yaml"


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from the YAML file and environment.

    Args:
        path: Configuration file to read instead of the default location

    Returns:
        The resolved settings

    Raises:
        ConfigError: If the file exists but is not a valid YAML mapping
    """
    config_file = path or get_config_path()
    data: dict = {}

    if config_file.exists():
        try:
            with open(config_file) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {config_file}: {e}") from e
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{config_file} must contain a mapping, got {type(loaded).__name__}")
        data = loaded

    gcloud_path = os.getenv("DEPLOYZZZ_GCLOUD") or data.get("gcloud_path") or Settings.gcloud_path
    log_level = os.getenv("DEPLOYZZZ_LOG_LEVEL") or data.get("log_level") or Settings.log_level

    return Settings(
        gcloud_path=str(gcloud_path),
        log_level=str(log_level).upper(),
        verbose=bool(data.get("verbose", False)),
    )


def get_settings() -> Settings:
    """Return the active settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Optional[Settings]) -> None:
    """Install the active settings (``None`` forces a reload on next use)."""
    global _settings
    _settings = settings
