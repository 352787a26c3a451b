"""prompt_toolkit completer backed by the syntax completion engine."""

from __future__ import annotations

from typing import List

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..completion import SyntaxCompletor
from .session import ShellSession


class SyntaxCompleter(Completer):
    """Context-aware completion for identifiers, members and quoted paths."""

    def __init__(self, session: ShellSession, engine: SyntaxCompletor):
        self._session = session
        self._engine = engine

    def get_completions(self, document: Document, complete_event):  # type: ignore[override]
        line = document.current_line
        cursor = document.cursor_position_col
        # earlier lines of a multiline document count as buffered lines
        previous = self._session.buffers.current() + document.lines[: document.cursor_position_row]

        candidates: List[str] = []
        offset = self._engine.complete(line, cursor, candidates, previous_lines=previous)
        if offset < 0 or offset > cursor:
            return

        seen = set()
        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            yield Completion(candidate, start_position=offset - cursor)
