"""Syntax-aware completion entry point.

Tokenizes the buffer left of the cursor, classifies the completion context
from the last tokens and hands off to identifier, member or filename
completion. Every return value is an offset into the current line where
candidates are inserted; -1 means nothing to complete.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence

import structlog

from .classifier import CompletionCase, get_completion_case
from .filenames import FileNameCompletor, FilenameCompletor
from .identifiers import (
    IdentifierAggregator,
    IdentifierCompletor,
    KeywordSyntaxCompletor,
    VariableSyntaxCompletor,
)
from .reflection import NamespaceReflectionCompletor, ReflectionCompletor, receiver_text
from .tokenizer import InString, LexFailure, Tokens, tokenize_buffer
from .tokens import TokenStream

logger = structlog.get_logger(__name__)


class UnknownCompletionCaseError(RuntimeError):
    """Raised when a completion case has no dispatch branch."""

    def __init__(self, case: object):
        self.case = case
        super().__init__(f"Unknown completion case: {case}")


class ShellCommandSpec(Protocol):
    name: str
    aliases: Iterable[str]


class CommandRegistry(Protocol):
    def commands(self) -> Sequence[ShellCommandSpec]:
        ...


class BufferSource(Protocol):
    def current(self) -> Sequence[str]:
        ...


def is_command(buffer_line: str, registry: CommandRegistry) -> bool:
    """Shell commands are not syntax-completed."""
    command_end = buffer_line.find(" ")
    if command_end == -1:
        return False
    command_text = buffer_line[:command_end]
    for command in registry.commands():
        if command_text == command.name or command_text in command.aliases:
            return True
    return False


class SyntaxCompletor:
    """Route a completion request to the strategy matching the cursor context."""

    def __init__(
        self,
        registry: CommandRegistry,
        buffers: BufferSource,
        reflection_completor: ReflectionCompletor,
        identifier_completors: Iterable[IdentifierCompletor],
        filename_completor: Optional[FilenameCompletor] = None,
    ):
        self._registry = registry
        self._buffers = buffers
        self._reflection_completor = reflection_completor
        self._identifiers = IdentifierAggregator(identifier_completors)
        self._filename_completor = filename_completor

    def complete(
        self,
        buffer_line: str,
        cursor: int,
        candidates: List[str],
        previous_lines: Optional[Sequence[str]] = None,
    ) -> int:
        if not buffer_line:
            return -1
        if is_command(buffer_line, self._registry):
            return -1

        if previous_lines is None:
            previous_lines = self._buffers.current()

        # complete in the context of the whole buffer, not just the last line
        outcome = tokenize_buffer(buffer_line[:cursor], previous_lines)
        if isinstance(outcome, InString):
            return self._complete_filename(buffer_line, cursor, outcome.column, candidates)
        if isinstance(outcome, LexFailure):
            logger.debug("completion.lex.failed", reason=outcome.reason)
            return -1
        if not isinstance(outcome, Tokens):
            raise TypeError(f"Unexpected tokenizer outcome: {outcome!r}")

        tokens = outcome.tokens
        case = get_completion_case(tokens)
        logger.debug("completion.dispatch", case=case, token_count=len(tokens))
        if case is CompletionCase.NO_COMPLETION:
            return -1
        if case is CompletionCase.NO_DOT_PREFIX:
            return self.complete_identifier(tokens, candidates)
        if case in (CompletionCase.DOT_LAST, CompletionCase.PREFIX_AFTER_DOT):
            logger.debug("completion.reflection", receiver=receiver_text(tokens))
            return self._reflection_completor.complete(tokens, candidates)
        raise UnknownCompletionCaseError(case)

    def complete_identifier(self, tokens: TokenStream, candidates: List[str]) -> int:
        if self._identifiers.complete(tokens, candidates):
            return tokens[-1].column - 1
        return -1

    def _complete_filename(
        self, buffer_line: str, cursor: int, column: int, candidates: List[str]
    ) -> int:
        if self._filename_completor is None:
            return -1
        completion_start = column + 1
        file_result = self._filename_completor.complete(
            buffer_line[completion_start:], cursor - completion_start, candidates
        )
        logger.debug("completion.filename", start=completion_start, result=file_result)
        if file_result >= 0:
            return completion_start + file_result
        return -1


def build_completor(session) -> SyntaxCompletor:
    """Wire the default providers for a shell session."""
    settings = session.config.completion

    def namespace():
        return session.namespace

    identifiers: List[IdentifierCompletor] = []
    if settings.keywords:
        identifiers.append(KeywordSyntaxCompletor())
    if settings.variables:
        identifiers.append(VariableSyntaxCompletor(namespace, settings.include_private))

    if settings.reflection:
        reflection: ReflectionCompletor = NamespaceReflectionCompletor(
            namespace, settings.include_private
        )
    else:
        reflection = _NoReflection()

    return SyntaxCompletor(
        registry=session.registry,
        buffers=session.buffers,
        reflection_completor=reflection,
        identifier_completors=identifiers,
        filename_completor=FileNameCompletor() if settings.filenames else None,
    )


class _NoReflection:
    def complete(self, tokens: TokenStream, candidates: List[str]) -> int:
        return -1
