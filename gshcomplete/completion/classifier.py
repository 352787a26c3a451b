"""Decide what kind of completion applies from the last tokens before the cursor."""

from __future__ import annotations

from enum import Enum

from .tokens import DECLARATION_KEYWORDS, TokenKind, TokenStream


class CompletionCase(str, Enum):
    NO_COMPLETION = "NO_COMPLETION"
    DOT_LAST = "DOT_LAST"
    PREFIX_AFTER_DOT = "PREFIX_AFTER_DOT"
    NO_DOT_PREFIX = "NO_DOT_PREFIX"


def get_completion_case(tokens: TokenStream) -> CompletionCase:
    """Classify a non-empty token stream by its last one or two tokens."""
    current = tokens[-1]

    if current.kind is TokenKind.IDENT:
        # cursor is on an identifier, use it as prefix
        if len(tokens) == 1:
            return CompletionCase.NO_DOT_PREFIX
        previous = tokens[-2]
        if previous.kind is TokenKind.DOT:
            # the statement up to the dot must be evaluated, which needs a receiver
            if len(tokens) < 3:
                return CompletionCase.NO_COMPLETION
            return CompletionCase.PREFIX_AFTER_DOT
        if previous.kind is TokenKind.KEYWORD and previous.text in DECLARATION_KEYWORDS:
            # the identifier is being declared, not referenced
            return CompletionCase.NO_COMPLETION
        if previous.kind is TokenKind.IDENT:
            # either a declaration or a closure call; closure calls are not completed
            return CompletionCase.NO_COMPLETION
        return CompletionCase.NO_DOT_PREFIX

    if current.kind is TokenKind.DOT:
        if len(tokens) == 1:
            return CompletionCase.NO_COMPLETION
        return CompletionCase.DOT_LAST

    return CompletionCase.NO_COMPLETION
