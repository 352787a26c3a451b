"""Configuration management for the Groovy shell completer.

Handles loading and merging configuration from:
1. Global config file (~/.gshcomplete/config.toml)
2. Local project config file (./gshcomplete.toml)
3. Environment variables
"""

import os
from pathlib import Path
from typing import Any, Dict

import toml
from pydantic import BaseModel, Field


class CompletionConfig(BaseModel):
    """Which completion strategies are enabled."""
    filenames: bool = True  # filename completion inside open strings
    keywords: bool = True
    variables: bool = True
    reflection: bool = True
    include_private: bool = False


class ShellConfig(BaseModel):
    """Interactive shell configuration."""
    history_file: str = "~/.gshcomplete/history"
    log_level: str = "WARNING"


class GshConfig(BaseModel):
    """Main configuration."""
    completion: CompletionConfig = Field(default_factory=CompletionConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)


def get_config_dir() -> Path:
    return Path.home() / ".gshcomplete"


def get_config_path(local: bool = False) -> Path:
    """Get the path to the configuration file."""
    if local:
        return Path("./gshcomplete.toml")
    else:
        return get_config_dir() / "config.toml"


def _merge(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


def load_config() -> GshConfig:
    """Load configuration from files and environment variables."""
    config_data: Dict[str, Any] = {}

    # Load global config, then local config on top of it
    for path in (get_config_path(local=False), get_config_path(local=True)):
        if path.exists():
            with open(path, "r") as f:
                _merge(config_data, toml.load(f))

    # Override with environment variables
    if "GSHCOMPLETE_HISTORY_FILE" in os.environ:
        config_data.setdefault("shell", {})["history_file"] = os.environ["GSHCOMPLETE_HISTORY_FILE"]
    if "GSHCOMPLETE_LOG_LEVEL" in os.environ:
        config_data.setdefault("shell", {})["log_level"] = os.environ["GSHCOMPLETE_LOG_LEVEL"]

    return GshConfig(**config_data)


def ensure_config_dir() -> None:
    """Ensure the configuration directory exists."""
    get_config_dir().mkdir(parents=True, exist_ok=True)


def create_default_config() -> Path:
    """Create a default configuration file."""
    config_path = get_config_path(local=False)
    ensure_config_dir()

    if not config_path.exists():
        with open(config_path, "w") as f:
            toml.dump(GshConfig().model_dump(), f)

    return config_path
