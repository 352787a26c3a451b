"""Completion of bare identifiers (no dot before the prefix)."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Sequence

import structlog

from .lexer import GroovyShellLexer
from .tokens import TokenStream

logger = structlog.get_logger(__name__)


class IdentifierCompletor(Protocol):
    def complete(self, tokens: TokenStream, candidates: List[str]) -> bool:
        ...


def _prefix(tokens: TokenStream) -> str:
    return tokens[-1].text


class KeywordSyntaxCompletor:
    """Offer language keywords matching the identifier prefix."""

    KEYWORDS: Sequence[str] = tuple(
        sorted(
            set(GroovyShellLexer.DECLARATION_KEYWORDS)
            | set(GroovyShellLexer.TYPE_KEYWORDS)
            | set(GroovyShellLexer.CONSTANT_KEYWORDS)
            | set(GroovyShellLexer.RESERVED_KEYWORDS)
        )
    )

    def __init__(self, keywords: Optional[Iterable[str]] = None):
        self._keywords = tuple(keywords) if keywords is not None else self.KEYWORDS

    def complete(self, tokens: TokenStream, candidates: List[str]) -> bool:
        prefix = _prefix(tokens)
        matches = [word for word in self._keywords if word.startswith(prefix)]
        candidates.extend(matches)
        return bool(matches)


class VariableSyntaxCompletor:
    """Offer names bound in the shell namespace."""

    def __init__(self, namespace: Callable[[], Dict[str, Any]], include_private: bool = False):
        self._namespace = namespace
        self._include_private = include_private

    def complete(self, tokens: TokenStream, candidates: List[str]) -> bool:
        prefix = _prefix(tokens)
        show_private = self._include_private or prefix.startswith("_")
        matches = sorted(
            name
            for name in self._namespace()
            if name.startswith(prefix) and (show_private or not name.startswith("_"))
        )
        candidates.extend(matches)
        return bool(matches)


class IdentifierAggregator:
    """Run every registered identifier completor, in order, on the same candidates."""

    def __init__(self, completors: Optional[Iterable[IdentifierCompletor]] = None):
        self._completors: List[IdentifierCompletor] = list(completors or [])

    def register(self, completor: IdentifierCompletor) -> None:
        self._completors.append(completor)

    @property
    def completors(self) -> List[IdentifierCompletor]:
        return list(self._completors)

    def complete(self, tokens: TokenStream, candidates: List[str]) -> bool:
        found_matches = False
        for completor in self._completors:
            try:
                found_matches |= bool(completor.complete(tokens, candidates))
            except Exception as exc:
                logger.warning(
                    "completion.identifier.provider_failed",
                    provider=type(completor).__name__,
                    error=str(exc),
                )
        return found_matches
