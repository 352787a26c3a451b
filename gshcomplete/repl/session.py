"""Shell session state management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..runtime import GshConfig, ensure_config_dir, load_config
from .bindings import bind_statement
from .commands import CommandRegistry, default_registry


class BufferManager:
    """Lines of the statement being typed that were already submitted."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def current(self) -> List[str]:
        return list(self._lines)

    def append(self, line: str) -> None:
        self._lines.append(line)

    def clear(self) -> None:
        self._lines.clear()

    def is_empty(self) -> bool:
        return not self._lines

    def text(self) -> str:
        return "\n".join(self._lines)


@dataclass
class ShellSession:
    """Container for interactive shell state."""

    config: GshConfig
    history_file: Path
    registry: CommandRegistry = field(default_factory=default_registry)
    buffers: BufferManager = field(default_factory=BufferManager)
    namespace: Dict[str, Any] = field(default_factory=dict)
    status_message: str = ""

    @classmethod
    def create(cls, config: Optional[GshConfig] = None) -> "ShellSession":
        """Factory that wires configuration and history paths."""
        ensure_config_dir()
        config = config or load_config()

        history_file = Path(config.shell.history_file).expanduser()
        history_file.parent.mkdir(parents=True, exist_ok=True)

        return cls(config=config, history_file=history_file)

    def reset(self) -> None:
        """Drop buffered lines and bound names."""
        self.buffers.clear()
        self.namespace.clear()
        self.status_message = "Session reset"

    def bind(self, statement: str) -> Optional[str]:
        """Record literal assignments from an accepted statement."""
        return bind_statement(self.namespace, statement)

    def variable_names(self) -> List[str]:
        return sorted(self.namespace)

    def set_status(self, message: str) -> None:
        self.status_message = message
