"""Filename completion for paths typed inside an open string literal."""

from __future__ import annotations

from typing import List, Protocol

from prompt_toolkit.completion import CompleteEvent, PathCompleter
from prompt_toolkit.document import Document


class FilenameCompletor(Protocol):
    def complete(self, buffer: str, cursor: int, candidates: List[str]) -> int:
        ...


class FileNameCompletor:
    """Complete the last path segment left of ``cursor``.

    Candidates are basenames (directories end with ``/``) and the return
    value is the offset in ``buffer`` where that segment starts, or -1.
    """

    def __init__(self, only_directories: bool = False):
        self._paths = PathCompleter(only_directories=only_directories, expanduser=True)

    def complete(self, buffer: str, cursor: int, candidates: List[str]) -> int:
        text = buffer[:cursor]
        document = Document(text=text, cursor_position=len(text))
        matches = [
            completion.display_text
            for completion in self._paths.get_completions(document, CompleteEvent())
        ]
        if not matches:
            return -1
        candidates.extend(matches)
        return text.rfind("/") + 1
