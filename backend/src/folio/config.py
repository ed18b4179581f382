# backend/src/folio/config.py
"""Configuration system for Folio output generation.

This module handles loading settings from environment variables and INI files,
providing sensible defaults for the output layout and asset discovery used
by the generation pipeline.
"""

from configparser import ConfigParser
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional
import os

from folio.constants.files import (
    DEFAULT_ASSET_EXCLUDES,
    DEFAULT_OUTPUT_EXTENSION,
    RESERVED_OUTPUT_DIRS,
)
from folio.constants.generation import STYLE_ASSET_DIR


# =============================================================================
# ConfigError Exception
# =============================================================================


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# =============================================================================
# CONFIG_SCHEMA
# =============================================================================

# Schema: section -> key -> (type, default, min, max, description)
CONFIG_SCHEMA: dict[str, dict[str, tuple[type, Any, Any, Any, str]]] = {
    "output": {
        "reserved_dirs": (
            list,
            list(RESERVED_OUTPUT_DIRS),
            None,
            None,
            "Top-level output directories skipped by orphan cleanup",
        ),
        "extension": (str, DEFAULT_OUTPUT_EXTENSION, None, None, "Derived output extension"),
        "directory_index": (bool, True, None, None, "Render README.md as the directory index"),
    },
    "assets": {
        "style_dir": (str, STYLE_ASSET_DIR, None, None, "Leading directory of style assets"),
        "ignore": (
            list,
            list(DEFAULT_ASSET_EXCLUDES),
            None,
            None,
            "Patterns skipped when listing assets",
        ),
    },
}


# =============================================================================
# Section Dataclasses
# =============================================================================


@dataclass(frozen=True)
class OutputConfig:
    """Output tree configuration."""

    reserved_dirs: list[str]
    extension: str
    directory_index: bool


@dataclass(frozen=True)
class AssetsConfig:
    """Asset discovery configuration."""

    style_dir: str
    ignore: list[str]


# =============================================================================
# Config Loader Function
# =============================================================================


def _split_list(raw_value: str) -> list[str]:
    """Split a comma-separated INI value into a list of stripped items."""
    return [item.strip() for item in raw_value.split(",") if item.strip()]


def _load_section(
    parser: ConfigParser, section: str, schema: dict[str, tuple[type, Any, Any, Any, str]]
) -> dict[str, Any]:
    """Load and validate a configuration section.

    Args:
        parser: ConfigParser instance with loaded config
        section: Section name to load
        schema: Schema definition for the section

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If validation fails
    """
    result = {}

    for key, (typ, default, min_val, max_val, _) in schema.items():
        # Get value from parser or use default
        if parser.has_option(section, key):
            raw_value = parser.get(section, key)
            value: bool | int | float | str | list[str]
            try:
                if typ is bool:
                    value = raw_value.lower() in ("true", "1", "yes", "on")
                elif typ is int:
                    value = int(raw_value)
                elif typ is float:
                    value = float(raw_value)
                elif typ is list:
                    value = _split_list(raw_value)
                else:
                    value = raw_value
            except ValueError as e:
                raise ConfigError(
                    f"Invalid value for [{section}].{key}: {raw_value!r} (expected {typ.__name__})"
                ) from e
        else:
            value = list(default) if typ is list else default

        # Validate range for numeric types
        if typ in (int, float) and value is not None:
            if min_val is not None and value < min_val:
                raise ConfigError(
                    f"Value for [{section}].{key} is {value}, but minimum is {min_val}"
                )
            if max_val is not None and value > max_val:
                raise ConfigError(
                    f"Value for [{section}].{key} is {value}, but maximum is {max_val}"
                )

        if typ is str and not value:
            raise ConfigError(f"Value for [{section}].{key} must not be empty")

        result[key] = value

    return result


def _default_section(section: str) -> dict[str, Any]:
    """Build a section's values from schema defaults."""
    return {
        key: list(default) if typ is list else default
        for key, (typ, default, _, _, _) in CONFIG_SCHEMA[section].items()
    }


def _load_config(config_path: Optional[Path] = None) -> "Config":
    """Load configuration from an INI file.

    Args:
        config_path: Path to config file. If None, uses defaults from schema.

    Returns:
        Config object with all sections populated

    Raises:
        ConfigError: If validation fails
    """
    parser = ConfigParser()

    if config_path and config_path.exists():
        parser.read(config_path)

    output_values = _load_section(parser, "output", CONFIG_SCHEMA["output"])
    assets_values = _load_section(parser, "assets", CONFIG_SCHEMA["assets"])

    return Config(
        config_path=config_path,
        output=OutputConfig(**output_values),
        assets=AssetsConfig(**assets_values),
    )


# =============================================================================
# Config Dataclass
# =============================================================================


@dataclass(frozen=True)
class Config:
    """Complete generation configuration."""

    config_path: Optional[Path] = None

    # Section configs - defaults set in __post_init__, type: ignore needed because
    # frozen dataclass doesn't allow proper initialization pattern
    output: OutputConfig = None  # type: ignore[assignment]
    assets: AssetsConfig = None  # type: ignore[assignment]

    def __post_init__(self):
        """Initialize section configs with defaults if not provided."""
        # Since frozen=True, we need to use object.__setattr__
        if self.output is None:
            object.__setattr__(self, "output", OutputConfig(**_default_section("output")))
        if self.assets is None:
            object.__setattr__(self, "assets", AssetsConfig(**_default_section("assets")))

    @property
    def reserved_dirs(self) -> frozenset[str]:
        """Top-level output directories that orphan cleanup leaves alone."""
        return frozenset(self.output.reserved_dirs)


# =============================================================================
# load_settings
# =============================================================================


@lru_cache(maxsize=1)
def load_settings() -> Config:
    """Load settings from environment variables and config file.

    Settings are cached for the lifetime of the process.
    Use load_settings.cache_clear() to reload settings.

    Environment:
        FOLIO_CONFIG: Optional path to an INI config file.
        FOLIO_RESERVED_DIRS: Optional comma-separated override for
            ``[output] reserved_dirs``.

    Returns:
        Config object populated from the config file and environment.

    Raises:
        ConfigError: If FOLIO_CONFIG points at a missing file or validation fails.
    """
    config_path_str = os.getenv("FOLIO_CONFIG")
    config_path = Path(config_path_str) if config_path_str else None
    if config_path is not None and not config_path.exists():
        raise ConfigError(f"FOLIO_CONFIG points to a missing file: {config_path}")

    base_config = _load_config(config_path)

    reserved_env = os.getenv("FOLIO_RESERVED_DIRS")
    if reserved_env is None:
        return base_config

    output = OutputConfig(
        reserved_dirs=_split_list(reserved_env),
        extension=base_config.output.extension,
        directory_index=base_config.output.directory_index,
    )
    return Config(
        config_path=base_config.config_path,
        output=output,
        assets=base_config.assets,
    )
