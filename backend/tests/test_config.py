# backend/tests/test_config.py
"""Configuration tests.

Tests verify behavior (types, parsing, loading) not specific values.
"""

from pathlib import Path

import pytest

from folio.config import (
    CONFIG_SCHEMA,
    Config,
    ConfigError,
    _load_config,
    load_settings,
)


def write_config(workspace: Path, content: str) -> Path:
    """Write a config.ini file to the workspace and return the path."""
    config_path = workspace / "config.ini"
    config_path.write_text(content)
    return config_path


# =============================================================================
# Type Validation Tests
# =============================================================================


def test_all_settings_have_correct_types():
    """Every setting matches its declared type from schema."""
    config = _load_config(None)  # Load with defaults only

    for section_name, keys in CONFIG_SCHEMA.items():
        section = getattr(config, section_name)
        for key, (expected_type, *_) in keys.items():
            value = getattr(section, key)
            assert isinstance(value, expected_type), (
                f"{section_name}.{key}: expected {expected_type.__name__}, "
                f"got {type(value).__name__}"
            )


def test_default_config_matches_schema_defaults():
    """Config() without arguments carries the schema defaults."""
    config = Config()

    for section_name, keys in CONFIG_SCHEMA.items():
        section = getattr(config, section_name)
        for key, (_, default, *_) in keys.items():
            assert getattr(section, key) == default


def test_empty_string_setting_raises_clear_error(tmp_path: Path):
    """An empty value for a string setting names the offending key."""
    config_path = write_config(tmp_path, "[assets]\nstyle_dir =\n")

    with pytest.raises(ConfigError) as exc_info:
        _load_config(config_path)

    assert "assets" in str(exc_info.value)
    assert "style_dir" in str(exc_info.value)


# =============================================================================
# Config File Loading Tests
# =============================================================================


def test_config_file_overrides_defaults(tmp_path: Path):
    """Values from config.ini override schema defaults."""
    config_path = write_config(
        tmp_path,
        "[output]\nextension = .xhtml\ndirectory_index = false\n",
    )

    config = _load_config(config_path)

    assert config.output.extension == ".xhtml"
    assert config.output.directory_index is False
    assert config.config_path == config_path


def test_list_settings_are_split_on_commas(tmp_path: Path):
    """Comma-separated values become stripped lists without empty items."""
    config_path = write_config(
        tmp_path,
        "[output]\nreserved_dirs = gitbook, vendor ,,\n[assets]\nignore = *.psd,drafts\n",
    )

    config = _load_config(config_path)

    assert config.output.reserved_dirs == ["gitbook", "vendor"]
    assert config.reserved_dirs == frozenset({"gitbook", "vendor"})
    assert config.assets.ignore == ["*.psd", "drafts"]


def test_partial_config_uses_defaults_for_missing_keys(tmp_path: Path):
    """Only the keys present in the file are overridden."""
    config_path = write_config(tmp_path, "[assets]\nstyle_dir = theme\n")

    config = _load_config(config_path)

    assert config.assets.style_dir == "theme"
    assert config.output == Config().output


def test_missing_config_file_uses_defaults(tmp_path: Path):
    """A config path that does not exist falls back to defaults."""
    config = _load_config(tmp_path / "missing.ini")

    assert config.output == Config().output
    assert config.assets == Config().assets


# =============================================================================
# load_settings Tests
# =============================================================================


def test_load_settings_without_environment_uses_defaults():
    settings = load_settings()

    assert settings.config_path is None
    assert settings.reserved_dirs == frozenset({"gitbook", "src", "style"})


def test_load_settings_reads_folio_config(tmp_path: Path, monkeypatch):
    config_path = write_config(tmp_path, "[output]\nextension = .htm\n")
    monkeypatch.setenv("FOLIO_CONFIG", str(config_path))

    settings = load_settings()

    assert settings.output.extension == ".htm"


def test_load_settings_rejects_missing_folio_config(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("FOLIO_CONFIG", str(tmp_path / "nope.ini"))

    with pytest.raises(ConfigError, match="missing file"):
        load_settings()


def test_reserved_dirs_environment_override(tmp_path: Path, monkeypatch):
    """FOLIO_RESERVED_DIRS replaces the reserved list and keeps other settings."""
    config_path = write_config(tmp_path, "[output]\nextension = .htm\n")
    monkeypatch.setenv("FOLIO_CONFIG", str(config_path))
    monkeypatch.setenv("FOLIO_RESERVED_DIRS", "assets, vendor")

    settings = load_settings()

    assert settings.reserved_dirs == frozenset({"assets", "vendor"})
    assert settings.output.extension == ".htm"


def test_load_settings_is_cached(monkeypatch):
    first = load_settings()
    monkeypatch.setenv("FOLIO_RESERVED_DIRS", "other")

    assert load_settings() is first

    load_settings.cache_clear()
    assert load_settings().reserved_dirs == frozenset({"other"})
