"""Runtime configuration for the shell completer."""

from .config import (
    CompletionConfig,
    GshConfig,
    ShellConfig,
    create_default_config,
    ensure_config_dir,
    load_config,
)
from .logsetup import configure_logging

__all__ = [
    "CompletionConfig",
    "GshConfig",
    "ShellConfig",
    "create_default_config",
    "ensure_config_dir",
    "load_config",
    "configure_logging",
]
