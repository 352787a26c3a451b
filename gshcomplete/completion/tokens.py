"""Token model shared by the tokenizer, classifier and completors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from pygments.token import Comment, Error, Keyword, Name, Number, Punctuation, String, Text


class TokenKind(str, Enum):
    IDENT = "IDENT"
    DOT = "DOT"
    KEYWORD = "KEYWORD"
    STRING = "STRING"
    GSTRING = "GSTRING"
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexed token; ``line`` and ``column`` are 1-based."""

    kind: TokenKind
    text: str
    line: int
    column: int


TokenStream = List[Token]


# Keywords after which the identifier under the cursor is a declaration target
DECLARATION_KEYWORDS = frozenset(
    {
        "import",
        "class",
        "interface",
        "enum",
        "def",
        "void",
        "boolean",
        "byte",
        "char",
        "short",
        "int",
        "float",
        "long",
        "double",
        "package",
        "true",
        "false",
        "as",
        "this",
        "try",
        "finally",
        "catch",
    }
)


def is_skipped(token_type) -> bool:
    """Whitespace and comments never reach the token stream."""
    return token_type in Text or token_type in Comment


def is_error(token_type) -> bool:
    return token_type in Error


def kind_for(token_type, value: str) -> TokenKind:
    """Map a Pygments token type onto a ``TokenKind``."""
    if token_type in Name:
        return TokenKind.IDENT
    if token_type in Punctuation and value == ".":
        return TokenKind.DOT
    if token_type in Keyword:
        return TokenKind.KEYWORD
    if token_type in String.Interpol:
        return TokenKind.GSTRING
    if token_type in String:
        return TokenKind.STRING
    if token_type in Number:
        return TokenKind.NUMBER
    return TokenKind.OPERATOR
