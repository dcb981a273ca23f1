"""Configuration for bbgen.

Loads configuration from:
1. bbgen.yaml (default platform, default formatting values, log level)
2. Environment variables (.env, BBGEN_*)

Everything is optional; with no config file the built-in defaults apply.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

CONFIG_FILENAME = "bbgen.yaml"

_LIST_TYPES = {"bullet", "numbered", "lettered"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SettingsError(RuntimeError):
    """Raised when bbgen.yaml exists but cannot be used."""


@dataclass(frozen=True)
class DefaultsConfig:
    """Values used when a command does not pass them explicitly."""
    platform: str = "phpBB"
    font_size: str = "3"
    color: str = ""
    list_type: str = "bullet"
    table_separator: str = "|"


@dataclass(frozen=True)
class AdvancedConfig:
    log_level: str = "INFO"


@dataclass(frozen=True)
class Settings:
    """Complete bbgen configuration."""
    project_root: Path
    config_path: Path | None
    defaults: DefaultsConfig
    advanced: AdvancedConfig


def _find_project_root() -> Path:
    """Walk up from the cwd looking for bbgen.yaml or .env."""
    override = os.getenv("BBGEN_PROJECT_ROOT")
    if override:
        return Path(override).expanduser().resolve()

    current = Path.cwd().resolve()
    for path in [current] + list(current.parents):
        if (path / CONFIG_FILENAME).exists():
            return path
        if (path / ".env").exists():
            return path

    # Fallback to current directory
    return current


def _load_yaml_config(path: Path) -> dict[str, Any]:
    """Load and parse YAML config file."""
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise SettingsError(f"{path} must contain a mapping at the top level")
    return data


def load_settings() -> Settings:
    """Load bbgen configuration.

    Process:
    1. Find project root
    2. Load .env file
    3. Load bbgen.yaml (if exists)
    4. Apply BBGEN_* environment overrides
    """
    project_root = _find_project_root()

    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    config_file = project_root / CONFIG_FILENAME
    config = _load_yaml_config(config_file)

    defaults_config = config.get("defaults") or {}
    list_type = str(defaults_config.get("list_type") or "bullet").strip().lower()
    if list_type not in _LIST_TYPES:
        list_type = "bullet"

    defaults = DefaultsConfig(
        platform=str(os.getenv("BBGEN_PLATFORM") or defaults_config.get("platform") or "phpBB"),
        font_size=str(defaults_config.get("font_size") or "3"),
        color=str(defaults_config.get("color") or ""),
        list_type=list_type,
        table_separator=str(defaults_config.get("table_separator") or "|"),
    )

    advanced_config = config.get("advanced") or {}
    log_level = str(
        os.getenv("BBGEN_LOG_LEVEL") or advanced_config.get("log_level") or "INFO"
    ).strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        project_root=project_root,
        config_path=config_file if config_file.exists() else None,
        defaults=defaults,
        advanced=AdvancedConfig(log_level=log_level),
    )
