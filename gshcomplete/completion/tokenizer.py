"""Tokenize the shell buffer up to the cursor.

The whole buffer (previously entered lines plus the current line) is lexed
again on every completion request. That is the only way to get quote,
bracket and interpolation state right without keeping lexer state between
keystrokes.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from pygments.lexer import Lexer

from .lexer import GroovyShellLexer
from .tokens import Token, TokenKind, TokenStream, is_error, is_skipped, kind_for

QUOTE_CHARS = ('"', "'")


@dataclass(frozen=True)
class Tokens:
    """Successful tokenization; ``tokens`` is never empty."""

    tokens: TokenStream


@dataclass(frozen=True)
class InString:
    """The cursor sits inside a string opened at ``column`` (0-based) of the current line."""

    column: int


@dataclass(frozen=True)
class LexFailure:
    reason: str


TokenizeResult = Union[Tokens, InString, LexFailure]


class _LineIndex:
    """Translate string offsets into 1-based (line, column) pairs."""

    def __init__(self, source: str):
        self._starts = [0] + [idx + 1 for idx, char in enumerate(source) if char == "\n"]

    def locate(self, offset: int) -> Tuple[int, int]:
        line = bisect_right(self._starts, offset)
        return line, offset - self._starts[line - 1] + 1


def join_buffer(buffer_line: str, previous_lines: Sequence[str]) -> str:
    if not previous_lines:
        return buffer_line
    return "".join(line + "\n" for line in previous_lines) + buffer_line


def tokenize_buffer(
    buffer_line: str,
    previous_lines: Sequence[str],
    lexer: Optional[Lexer] = None,
) -> TokenizeResult:
    """Lex ``previous_lines`` followed by ``buffer_line`` (the text left of the cursor)."""
    lexer = lexer or GroovyShellLexer()
    source = join_buffer(buffer_line, previous_lines)
    index = _LineIndex(source)
    current_line = len(previous_lines) + 1

    result: List[Token] = []
    in_gstring = False
    for offset, token_type, value in lexer.get_tokens_unprocessed(source):
        line, column = index.locate(offset)
        if is_error(token_type):
            # an unmatched quote on the line being typed opens a string
            if not in_gstring and value in QUOTE_CHARS and line == current_line:
                return InString(column=column - 1)
            return LexFailure(f"unexpected {value!r} at line {line}, column {column}")
        if is_skipped(token_type):
            continue
        kind = kind_for(token_type, value)
        if kind is TokenKind.GSTRING:
            in_gstring = True
        result.append(Token(kind=kind, text=value, line=line, column=column))

    eof_line, _ = index.locate(len(source))
    if result and eof_line > result[-1].line:
        return LexFailure("no tokens on the cursor line")
    if not result:
        return LexFailure("empty buffer")
    return Tokens(tokens=result)
