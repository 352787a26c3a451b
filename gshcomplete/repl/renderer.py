"""Utilities for rendering shell output with rich."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..completion import InString, LexFailure, Tokens
from ..completion.tokenizer import TokenizeResult


class Renderer:
    """Render buffers, token streams and completion candidates."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    # General messages -----------------------------------------------------------------
    def banner(self) -> None:
        self.console.print(Panel("Groovy shell completion - type :help for commands", title="gshcomplete"))

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]{message}[/cyan]")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")

    def error(self, message: str) -> None:
        self.console.print(Panel(message, title="Error", border_style="red"))

    # Buffers and tokens ---------------------------------------------------------------
    def render_buffer(self, lines: Sequence[str], title: str = "Buffer") -> None:
        body = Syntax("\n".join(lines), "groovy", line_numbers=True)
        self.console.print(Panel(body, title=title, border_style="green"))

    def render_tokenize_result(self, outcome: TokenizeResult) -> None:
        if isinstance(outcome, InString):
            self.warn(f"Inside a string opened at column {outcome.column}")
        elif isinstance(outcome, LexFailure):
            self.warn(f"No tokens to complete against: {outcome.reason}")
        elif isinstance(outcome, Tokens):
            table = Table(title="Tokens", show_lines=False)
            table.add_column("#", style="bold")
            table.add_column("Kind", style="bold cyan")
            table.add_column("Text")
            table.add_column("Line", justify="right")
            table.add_column("Column", justify="right")
            for idx, token in enumerate(outcome.tokens, start=1):
                table.add_row(str(idx), token.kind.value, token.text, str(token.line), str(token.column))
            self.console.print(table)

    # Completion -----------------------------------------------------------------------
    def render_candidates(self, offset: int, candidates: Iterable[str]) -> None:
        candidates = list(candidates)
        if offset < 0 or not candidates:
            self.warn("No completions")
            return
        self.console.print(Text(f"insert at {offset}", style="magenta"))
        self.console.print(Columns(candidates, equal=True))
