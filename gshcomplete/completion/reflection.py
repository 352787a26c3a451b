"""Member completion after a dot, resolved against the shell namespace."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Protocol

from .tokens import TokenKind, TokenStream

_MISSING = object()


class ReflectionCompletor(Protocol):
    def complete(self, tokens: TokenStream, candidates: List[str]) -> int:
        ...


def split_member_access(tokens: TokenStream):
    """Return ``(receiver_names, prefix, insert_offset)`` for a dotted access.

    ``receiver_names`` is ``None`` when the receiver is not a plain chain of
    names (calls, indexing and literals would need evaluation).
    """
    last = tokens[-1]
    if last.kind is TokenKind.DOT:
        dot_index = len(tokens) - 1
        prefix = ""
        # column is 1-based, so it is also the 0-based offset right after the dot
        offset = last.column
    else:
        dot_index = len(tokens) - 2
        prefix = last.text
        offset = last.column - 1

    names: List[str] = []
    index = dot_index - 1
    while index >= 0 and tokens[index].kind is TokenKind.IDENT:
        names.insert(0, tokens[index].text)
        if index == 0 or tokens[index - 1].kind is not TokenKind.DOT:
            break
        index -= 2
    else:
        return None, prefix, offset
    return names, prefix, offset


class NamespaceReflectionCompletor:
    """List attributes of a receiver found by walking ``getattr`` from a bound name."""

    def __init__(self, namespace: Callable[[], Dict[str, Any]], include_private: bool = False):
        self._namespace = namespace
        self._include_private = include_private

    def resolve(self, names: List[str]) -> Any:
        target = self._namespace().get(names[0], _MISSING)
        for name in names[1:]:
            if target is _MISSING:
                break
            target = getattr(target, name, _MISSING)
        return target

    def complete(self, tokens: TokenStream, candidates: List[str]) -> int:
        names, prefix, offset = split_member_access(tokens)
        if not names:
            return -1
        receiver = self.resolve(names)
        if receiver is _MISSING:
            return -1

        show_private = self._include_private or prefix.startswith("_")
        members = sorted(
            member
            for member in dir(receiver)
            if member.startswith(prefix) and (show_private or not member.startswith("_"))
        )
        if not members:
            return -1
        candidates.extend(members)
        return offset


def receiver_text(tokens: TokenStream) -> Optional[str]:
    """Dotted receiver expression, e.g. ``foo.bar`` for ``foo.bar.ba``."""
    names, _, _ = split_member_access(tokens)
    return ".".join(names) if names else None
