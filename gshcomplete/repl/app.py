"""Interactive shell harness built on prompt_toolkit."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console

from ..completion import build_completor
from ..runtime import GshConfig
from .commands import CommandExecutor
from .renderer import Renderer
from .session import ShellSession


PROMPT_TOOLKIT_DEPENDENCIES = (
    "prompt-toolkit>=3.0.43",
    "pygments>=2.17.0",
)


def start_repl(config: Optional[GshConfig] = None) -> None:
    """Launch the interactive shell."""
    console = Console()

    try:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
        from prompt_toolkit.history import FileHistory
        from prompt_toolkit.lexers import PygmentsLexer
        from prompt_toolkit.styles import Style

        from ..completion import GroovyShellLexer
        from .completer import SyntaxCompleter

    except ModuleNotFoundError as exc:  # pragma: no cover - runtime guard
        missing = exc.name or "prompt_toolkit"
        joined = ", ".join(PROMPT_TOOLKIT_DEPENDENCIES)
        console.print(
            f"[red]The shell requires the dependency '{missing}'.[/red]"
        )
        console.print(
            f"Install via `[bold]pip install {joined}[/bold]` or reinstall the project with `[bold]pip install -e .[/bold]`."
        )
        raise SystemExit(1) from exc

    session = ShellSession.create(config)
    renderer = Renderer(console)
    renderer.banner()

    command_executor = CommandExecutor(session, renderer)

    style = Style.from_dict(
        {
            "prompt": "ansibrightcyan bold",
            "toolbar": "ansibrightblack",
        }
    )

    prompt_session = PromptSession(
        completer=SyntaxCompleter(session, build_completor(session)),
        lexer=PygmentsLexer(GroovyShellLexer),
        history=FileHistory(str(session.history_file)),
        auto_suggest=AutoSuggestFromHistory(),
        complete_while_typing=False,
        bottom_toolbar=lambda: _toolbar(session),
        style=style,
    )

    while True:
        try:
            text = prompt_session.prompt(_prompt_message(session))
        except KeyboardInterrupt:
            session.buffers.clear()
            session.set_status("(cancelled)")
            continue
        except EOFError:
            renderer.info("Exiting shell")
            break

        stripped = text.strip()
        if stripped.startswith(":"):
            outcome = command_executor.execute(stripped)
            if outcome.exit_repl:
                renderer.info("Bye")
                break
            continue

        if not stripped and session.buffers.is_empty():
            continue

        session.buffers.append(text)
        if _delimiters_balanced(session.buffers.text()):
            renderer.render_buffer(session.buffers.current(), title="Accepted")
            bound = session.bind(session.buffers.text())
            session.buffers.clear()
            session.set_status(f"Bound {bound}" if bound else "Statement accepted")


# Prompt helpers -----------------------------------------------------------------------

def _prompt_message(session: ShellSession):
    from prompt_toolkit.formatted_text import FormattedText

    return FormattedText([("class:prompt", f"groovy:{len(session.buffers.current()):03d}> ")])


def _toolbar(session: ShellSession):
    from prompt_toolkit.formatted_text import HTML

    pieces: List[str] = []
    if session.status_message:
        pieces.append(session.status_message)
    pieces.append("Tab complete • :help commands • :clear buffer • Ctrl-D exit")
    return HTML("  •  ".join(pieces))


# Utilities ---------------------------------------------------------------------------

def _delimiters_balanced(text: str) -> bool:
    """Return True when (), [], {} are balanced and we're not mid-string.

    Handles escaped quotes inside strings (\" or \\').
    """
    pairs = {"{": "}", "[": "]", "(": ")"}
    stack: List[str] = []
    quote: Optional[str] = None
    escaped = False

    for ch in text:
        if quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue

        if ch in ("'", '"'):
            quote = ch
        elif ch in pairs:
            stack.append(pairs[ch])
        elif ch in pairs.values():
            if not stack or stack.pop() != ch:
                return False

    return not stack and quote is None
