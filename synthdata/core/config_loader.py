#!/usr/bin/env python3
"""Configuration loading for the site asset and runtime settings."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from synthdata.core.config_schema import AppSettings, config_to_dict, validate_site_config
from synthdata.core.errors import ConfigNotLoadedError
from synthdata.core.logging_utils import setup_logger

logger = setup_logger("config_loader")

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "all.json"

SETTINGS_ENV_PREFIX = "SYNTHDATA_"


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load the site asset with environment-based overrides.

    The asset is JSON, parsed with ``yaml.safe_load`` since JSON is a YAML
    subset. An overlay named ``<stem>.<SYNTHDATA_ENV><suffix>`` next to the
    asset (e.g. ``all.dev.json``) is deep-merged on top when present.
    Values are kept verbatim: translation templates may contain ``${...}``
    text that callers substitute as literal args.

    Args:
        config_path: Path to the site asset

    Returns:
        Configuration dictionary with ``languages`` and ``translations``

    Raises:
        FileNotFoundError: If the asset doesn't exist
        yaml.YAMLError: If the asset cannot be parsed
        pydantic.ValidationError: If the asset fails validation

    Environment Variables:
        SYNTHDATA_ENV: Overlay name (optional)
        STRICT_CONFIG: Set to 0 to skip schema validation
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    env = os.getenv("SYNTHDATA_ENV")
    if env:
        env_config_path = config_file.with_name(f"{config_file.stem}.{env}{config_file.suffix}")
        if env_config_path.exists():
            logger.info(f"Loading {env} environment config from {env_config_path}")
            with open(env_config_path, encoding="utf-8") as f:
                env_config = yaml.safe_load(f)
            if env_config:
                _deep_merge(config, env_config)
        else:
            logger.warning(f"No environment config found for '{env}' (expected: {env_config_path})")

    if os.getenv("STRICT_CONFIG", "1") != "0":
        validated = validate_site_config(config)
        config = config_to_dict(validated)
        logger.debug("Config validation passed")

    return config


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """Build runtime settings from ``SYNTHDATA_*`` environment variables.

    ``SYNTHDATA_ROW_COUNT_MAXIMUM=100`` sets ``row_count.maximum``;
    ``SYNTHDATA_LOG_LEVEL=DEBUG`` sets ``log_level``.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Validated AppSettings
    """
    if environ is None:
        environ = os.environ

    overrides: dict[str, Any] = {}
    for key, value in environ.items():
        if not key.startswith(SETTINGS_ENV_PREFIX) or key == "SYNTHDATA_ENV":
            continue
        name = key[len(SETTINGS_ENV_PREFIX):].lower()
        if name.startswith("row_count_"):
            set_nested(overrides, f"row_count.{name[len('row_count_'):]}", value)
        else:
            overrides[name] = value

    return AppSettings(**overrides)


class SiteConfig:
    """Wrapper around the loaded site asset.

    Queries made before :meth:`load` (or construction with data) raise
    :class:`ConfigNotLoadedError` instead of returning empty values.
    """

    def __init__(self, data: dict[str, Any] | None = None):
        self._data = data

    @classmethod
    def from_path(cls, config_path: str | Path = DEFAULT_CONFIG_PATH) -> "SiteConfig":
        config = cls()
        config.load(config_path)
        return config

    def load(self, config_path: str | Path = DEFAULT_CONFIG_PATH) -> "SiteConfig":
        self._data = load_config(config_path)
        logger.info(f"Loaded site config from {config_path}: languages={self._data.get('languages')}")
        return self

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    def assert_loaded(self):
        """Make sure the config data has been loaded."""
        if self._data is None:
            raise ConfigNotLoadedError("Config data has not been preloaded.")

    def languages(self) -> list[str]:
        """Available language codes, in display order."""
        self.assert_loaded()
        return list(self._data.get("languages", []))

    def translations(self) -> dict[str, dict[str, str]]:
        """All translation tables keyed by language code."""
        self.assert_loaded()
        return self._data.get("translations", {})

    def get(self, path: str, default: Any = None) -> Any:
        """Dot-notation access to the raw asset."""
        self.assert_loaded()
        return get_nested(self._data, path, default)


def _deep_merge(base: dict, override: dict):
    """Deep merge override dict into base dict in-place.

    Args:
        base: Base configuration dictionary (modified in-place)
        override: Override configuration dictionary
    """
    for key, value in override.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Get nested config value using dot notation.

    Examples:
        >>> config = {'translations': {'fr': {'Home': 'Accueil'}}}
        >>> get_nested(config, 'translations.fr')
        {'Home': 'Accueil'}
        >>> get_nested(config, 'translations.de', default={})
        {}
    """
    keys = path.split(".")
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def set_nested(config: dict, path: str, value: Any):
    """Set nested config value using dot notation.

    Examples:
        >>> config = {}
        >>> set_nested(config, 'row_count.maximum', 100)
        >>> config
        {'row_count': {'maximum': 100}}
    """
    keys = path.split(".")
    current = config

    for key in keys[:-1]:
        if key not in current:
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
