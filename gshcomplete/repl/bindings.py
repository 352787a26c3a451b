"""Record names assigned from literals in accepted statements.

Only literal right-hand sides are evaluated: strings, numbers, booleans,
``null`` and lists of those. Anything else (calls, names, closures, GStrings)
leaves the namespace untouched.
"""

from __future__ import annotations

import ast
import re
from typing import Any, Dict, List, Optional, Tuple

import structlog
from pygments.token import Comment, Error, Keyword, Number, Operator, String, Text

from ..completion.lexer import GroovyShellLexer

logger = structlog.get_logger(__name__)

ASSIGNMENT_RE = re.compile(
    r"^\s*(?:[A-Za-z_$][\w$.<>,]*\s+)?(?P<name>[A-Za-z_$][\w$]*)\s*=(?!=)\s*(?P<value>.+?)\s*;?\s*$"
)

CONSTANTS = {"true": "True", "false": "False", "null": "None"}
LITERAL_OPERATORS = frozenset("[](),-+")
NUMBER_SUFFIXES = "lLgGiIfFdD"


class NotALiteral(ValueError):
    """The right-hand side needs evaluation beyond literal parsing."""


def groovy_literal(text: str) -> Any:
    """Evaluate a Groovy literal expression as the matching Python value."""
    parts: List[str] = []
    for _, token_type, value in GroovyShellLexer().get_tokens_unprocessed(text):
        if token_type in Error or token_type in String.Interpol:
            raise NotALiteral(text)
        if token_type in Comment:
            continue
        if token_type in String.Double and value.startswith('"') and "$" in value:
            # GString, needs evaluation
            raise NotALiteral(text)
        if token_type in Text or token_type in String:
            parts.append(value)
        elif token_type in Number:
            if token_type in Number.Hex:
                parts.append(value.rstrip("lL"))
            else:
                parts.append(value.rstrip(NUMBER_SUFFIXES))
        elif token_type in Keyword.Constant:
            parts.append(CONSTANTS[value])
        elif token_type in Operator and value in LITERAL_OPERATORS:
            parts.append(value)
        else:
            raise NotALiteral(text)
    try:
        return ast.literal_eval("".join(parts))
    except (SyntaxError, TypeError, ValueError) as exc:
        raise NotALiteral(text) from exc


def parse_binding(statement: str) -> Optional[Tuple[str, Any]]:
    """Split ``[def|Type] NAME = <literal>`` into its name and value."""
    match = ASSIGNMENT_RE.match(statement)
    if not match:
        return None
    try:
        value = groovy_literal(match.group("value"))
    except NotALiteral:
        return None
    return match.group("name"), value


def bind_statement(namespace: Dict[str, Any], statement: str) -> Optional[str]:
    """Bind each literal assignment line of ``statement``; return the last name bound."""
    bound = None
    for line in statement.splitlines():
        binding = parse_binding(line)
        if binding is None:
            continue
        name, value = binding
        namespace[name] = value
        logger.debug("repl.binding.recorded", name=name, type=type(value).__name__)
        bound = name
    return bound
