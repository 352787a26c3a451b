"""CLI commands for gshcomplete using Typer."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from .completion import build_completor, tokenize_buffer
from .repl import start_repl
from .repl.renderer import Renderer
from .repl.session import ShellSession
from .runtime import configure_logging, create_default_config, load_config

app = typer.Typer(help="gshcomplete - syntax-aware completion for the Groovy shell")
console = Console()


def _setup(verbose: bool):
    config = load_config()
    configure_logging("DEBUG" if verbose else config.shell.log_level)
    return config


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """Default callback to launch the shell when no subcommand is invoked."""
    if ctx.invoked_subcommand is not None:
        return
    start_repl(_setup(False))
    raise typer.Exit()


@app.command()
def shell(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Start the interactive shell."""
    start_repl(_setup(verbose))


@app.command()
def complete(
    text: str = typer.Argument(..., help="Current line of the buffer"),
    cursor: Optional[int] = typer.Option(None, "--cursor", "-c", help="Cursor offset (defaults to end of line)"),
    previous: List[str] = typer.Option([], "--previous", "-p", help="Earlier buffered line (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print the insertion offset and candidates for TEXT."""
    try:
        config = _setup(verbose)
        if cursor is None:
            cursor = len(text)
        if cursor < 0 or cursor > len(text):
            console.print(f"[red]Error:[/red] Cursor {cursor} is outside the line")
            raise typer.Exit(1)

        session = ShellSession(config=config, history_file=Path(config.shell.history_file).expanduser())
        for line in previous:
            session.buffers.append(line)
            session.bind(line)

        candidates: List[str] = []
        offset = build_completor(session).complete(text, cursor, candidates)
        Renderer(console).render_candidates(offset, candidates)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


@app.command()
def tokens(
    text: str = typer.Argument(..., help="Current line of the buffer"),
    previous: List[str] = typer.Option([], "--previous", "-p", help="Earlier buffered line (repeatable)"),
) -> None:
    """Show how TEXT is tokenized for completion."""
    Renderer(console).render_tokenize_result(tokenize_buffer(text, previous))


@app.command()
def init() -> None:
    """Initialize gshcomplete configuration."""
    try:
        path = create_default_config()
        console.print(f"[green]Success:[/green] configuration initialized at {path}")
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    try:
        from importlib.metadata import version as _v

        ver = _v("gshcomplete")
    except Exception:
        ver = "unknown"
    console.print(f"gshcomplete v{ver}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
