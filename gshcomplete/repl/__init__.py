"""Interactive Groovy shell with syntax-aware completion."""

__all__ = ["start_repl"]


def start_repl(config=None) -> None:
    """Start the shell; prompt_toolkit is only imported once the shell runs."""
    from .app import start_repl as run

    run(config)
