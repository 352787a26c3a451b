"""Shared fakes for the completion engine's collaborators."""

from types import SimpleNamespace
from typing import List

import pytest
import structlog

from gshcomplete.completion.reflection import split_member_access


class FakeRegistry:
    def __init__(self, *commands):
        self._commands = [SimpleNamespace(name=name, aliases=set(aliases)) for name, aliases in commands]

    def commands(self):
        return self._commands


class FakeBuffers:
    def __init__(self, lines=None):
        self.lines = list(lines or [])

    def current(self) -> List[str]:
        return list(self.lines)


class RecordingReflection:
    """Records receiver and prefix, answers with fixed members."""

    def __init__(self, members=("bar", "baz"), result=4):
        self.members = list(members)
        self.result = result
        self.calls = []

    def complete(self, tokens, candidates):
        names, prefix, _ = split_member_access(tokens)
        self.calls.append((names, prefix, list(tokens)))
        candidates.extend(self.members)
        return self.result


class RecordingFilenames:
    def __init__(self, result=0, matches=("local/",)):
        self.result = result
        self.matches = list(matches)
        self.calls = []

    def complete(self, buffer, cursor, candidates):
        self.calls.append((buffer, cursor))
        if self.result >= 0:
            candidates.extend(self.matches)
        return self.result


class StaticIdentifiers:
    def __init__(self, *names):
        self.names = names
        self.calls = 0

    def complete(self, tokens, candidates):
        self.calls += 1
        prefix = tokens[-1].text
        matches = [name for name in self.names if name.startswith(prefix)]
        candidates.extend(matches)
        return bool(matches)


@pytest.fixture
def registry():
    return FakeRegistry((":help", {":h"}), (":load", {":l"}))


@pytest.fixture
def buffers():
    return FakeBuffers()


@pytest.fixture
def reflection():
    return RecordingReflection()


@pytest.fixture
def filenames():
    return RecordingFilenames(result=0)


@pytest.fixture
def identifiers():
    return StaticIdentifiers("import", "impossible", "return")


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
