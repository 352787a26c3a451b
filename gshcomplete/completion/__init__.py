"""Syntax-aware completion engine for the Groovy shell."""

from .classifier import CompletionCase, get_completion_case
from .engine import SyntaxCompletor, UnknownCompletionCaseError, build_completor, is_command
from .filenames import FileNameCompletor
from .identifiers import IdentifierAggregator, KeywordSyntaxCompletor, VariableSyntaxCompletor
from .lexer import GroovyShellLexer
from .reflection import NamespaceReflectionCompletor
from .tokenizer import InString, LexFailure, Tokens, tokenize_buffer
from .tokens import Token, TokenKind

__all__ = [
    "CompletionCase",
    "get_completion_case",
    "SyntaxCompletor",
    "UnknownCompletionCaseError",
    "build_completor",
    "is_command",
    "FileNameCompletor",
    "IdentifierAggregator",
    "KeywordSyntaxCompletor",
    "VariableSyntaxCompletor",
    "GroovyShellLexer",
    "NamespaceReflectionCompletor",
    "InString",
    "LexFailure",
    "Tokens",
    "tokenize_buffer",
    "Token",
    "TokenKind",
]
