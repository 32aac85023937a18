"""
Configuration loader — reads grubutils.yml into a Settings model.

The file is optional. Lookup order:

    --config PATH  >  GRUBUTILS_CONFIG env var  >  /etc/grubutils.yml  >  built-in defaults

A file named explicitly (flag or env var) must exist. The system-wide
file is only used when present.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from grubutils.core.errors import ConfigError
from grubutils.core.models.settings import Settings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GRUBUTILS_CONFIG"
SYSTEM_CONFIG_FILE = Path("/etc/grubutils.yml")

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "SYSTEM_CONFIG_FILE",
    "find_config_file",
    "load_settings",
]


def find_config_file(
    explicit: Path | None = None,
    environ: Mapping[str, str] | None = None,
    system_file: Path = SYSTEM_CONFIG_FILE,
) -> Path | None:
    """Locate the settings file to load.

    Args:
        explicit: Path given with ``--config``.
        environ: Environment to read ``GRUBUTILS_CONFIG`` from.
        system_file: System-wide fallback location.

    Returns:
        Path to the settings file, or None to use built-in defaults.

    Raises:
        ConfigError: If an explicitly named file does not exist.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return explicit

    from_env = (environ or {}).get(CONFIG_ENV_VAR, "")
    if from_env:
        path = Path(from_env)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path} (from ${CONFIG_ENV_VAR})")
        return path

    if system_file.is_file():
        return system_file

    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Settings file to read. None returns the built-in defaults.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    if path is None:
        logger.debug("No config file, using built-in defaults")
        return Settings()

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings from %s", path)
    return settings
