"""Shell command registry and dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Optional

from rich.table import Table

from ..completion import tokenize_buffer
from .renderer import Renderer

if TYPE_CHECKING:
    from .session import ShellSession


@dataclass(frozen=True)
class ShellCommand:
    name: str
    aliases: FrozenSet[str] = frozenset()
    description: str = ""
    usage: str = ""


@dataclass
class MetaCommand:
    name: str
    args: List[str]


@dataclass
class CommandOutcome:
    exit_repl: bool = False


class CommandRegistry:
    """Named shell commands; the completion engine skips lines starting with one."""

    def __init__(self) -> None:
        self._commands: Dict[str, ShellCommand] = {}

    def register(self, command: ShellCommand) -> None:
        for text in (command.name, *command.aliases):
            clash = self.find(text)
            if clash:
                raise ValueError(f"Command {command.name} clashes with {clash.name} on {text!r}")
        self._commands[command.name] = command

    def commands(self) -> List[ShellCommand]:
        return list(self._commands.values())

    def find(self, text: str) -> Optional[ShellCommand]:
        """Look up a command by name or alias."""
        for command in self._commands.values():
            if text == command.name or text in command.aliases:
                return command
        return None


BUILTIN_COMMANDS = (
    ShellCommand(":help", frozenset({":h", ":?"}), "Show this help message", ":help"),
    ShellCommand(":clear", frozenset({":c"}), "Discard the buffered lines", ":clear"),
    ShellCommand(":show", frozenset({":s"}), "Show the buffered lines", ":show"),
    ShellCommand(":tokens", frozenset({":t"}), "Show how the buffer is tokenized", ":tokens [text]"),
    ShellCommand(":exit", frozenset({":x", ":q"}), "Exit the shell", ":exit"),
)


def default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    for command in BUILTIN_COMMANDS:
        registry.register(command)
    return registry


class CommandExecutor:
    """Dispatch colon-prefixed shell commands."""

    def __init__(self, session: "ShellSession", renderer: Renderer) -> None:
        self._session = session
        self._renderer = renderer

    # Public API ------------------------------------------------------------------
    def execute(self, raw_command: str) -> CommandOutcome:
        meta = parse_meta_command(raw_command)
        command = self._session.registry.find(meta.name) if meta else None
        if not meta or not command:
            self._renderer.error(f"Unknown command: {raw_command.strip()}")
            return CommandOutcome()

        name = command.name
        if name == ":help":
            self._cmd_help()
        elif name == ":clear":
            self._session.buffers.clear()
            self._session.set_status("Buffer cleared")
        elif name == ":show":
            self._cmd_show()
        elif name == ":tokens":
            self._cmd_tokens(meta.args, raw_command)
        elif name == ":exit":
            return CommandOutcome(exit_repl=True)
        else:
            self._renderer.error(f"Unsupported command: {raw_command.strip()}")
        return CommandOutcome()

    # Command implementations ------------------------------------------------------
    def _cmd_help(self) -> None:
        table = Table(title=":help - Shell Commands", show_lines=False)
        table.add_column("Command", style="bold cyan")
        table.add_column("Aliases")
        table.add_column("Description")
        for command in self._session.registry.commands():
            table.add_row(command.usage or command.name, ", ".join(sorted(command.aliases)), command.description)
        self._renderer.console.print(table)
        self._renderer.info("Press Tab to complete names, members after '.', and paths inside strings.")

    def _cmd_show(self) -> None:
        if self._session.buffers.is_empty():
            self._renderer.warn("Buffer is empty")
        else:
            self._renderer.render_buffer(self._session.buffers.current())
        names = self._session.variable_names()
        if names:
            self._renderer.info("Bound names: " + ", ".join(names))

    def _cmd_tokens(self, args: List[str], raw_command: str) -> None:
        # keep the argument text verbatim, quotes and spacing included
        line = raw_command.strip().split(None, 1)[1] if args else ""
        previous = self._session.buffers.current()
        if not line and previous:
            line = previous.pop()
        self._renderer.render_tokenize_result(tokenize_buffer(line, previous))


# Helper functions ----------------------------------------------------------------------

def parse_meta_command(text: str) -> Optional[MetaCommand]:
    text = text.strip()
    if not text.startswith(":"):
        return None
    parts = text.split()
    if not parts or parts[0] == ":":
        return None
    name, *args = parts
    return MetaCommand(name=name.lower(), args=args)
