"""gshcomplete - syntax-aware tab completion for a Groovy shell."""

__version__ = "0.1.0"

from . import completion, runtime
from .cli import main

__all__ = ["completion", "runtime", "main"]
