"""Tests for the shell command registry and executor."""

import io

import pytest
from rich.console import Console

from gshcomplete.completion import is_command
from gshcomplete.repl.commands import (
    CommandExecutor,
    CommandRegistry,
    ShellCommand,
    default_registry,
    parse_meta_command,
)
from gshcomplete.repl.renderer import Renderer
from gshcomplete.repl.session import ShellSession
from gshcomplete.runtime import GshConfig


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def session(tmp_path):
    return ShellSession(config=GshConfig(), history_file=tmp_path / "history")


@pytest.fixture
def executor(session, output):
    return CommandExecutor(session, Renderer(Console(file=output, width=120)))


class TestCommandRegistry:
    def test_builtins(self):
        names = [command.name for command in default_registry().commands()]
        assert names == [":help", ":clear", ":show", ":tokens", ":exit"]

    def test_find_by_alias(self):
        assert default_registry().find(":q").name == ":exit"

    def test_find_missing(self):
        assert default_registry().find(":nope") is None

    def test_clash_rejected(self):
        registry = default_registry()
        with pytest.raises(ValueError):
            registry.register(ShellCommand(":quit", frozenset({":q"})))

    def test_engine_skips_registered_commands(self):
        registry = CommandRegistry()
        registry.register(ShellCommand("load", frozenset({"l"})))
        assert is_command("load scr", registry)
        assert is_command("l scr", registry)
        assert not is_command(":help me", registry)


class TestParseMetaCommand:
    def test_name_and_args(self):
        meta = parse_meta_command("  :Tokens foo.b ")
        assert meta.name == ":tokens"
        assert meta.args == ["foo.b"]

    def test_not_a_command(self):
        assert parse_meta_command("foo") is None

    def test_bare_colon(self):
        assert parse_meta_command(":") is None


class TestCommandExecutor:
    def test_exit(self, executor):
        assert executor.execute(":q").exit_repl

    def test_clear(self, executor, session):
        session.buffers.append("foo {")
        assert not executor.execute(":clear").exit_repl
        assert session.buffers.is_empty()

    def test_show_empty(self, executor, output):
        executor.execute(":show")
        assert "Buffer is empty" in output.getvalue()

    def test_show_buffer(self, executor, session, output):
        session.buffers.append("def total = 0")
        executor.execute(":s")
        assert "total" in output.getvalue()

    def test_show_bound_names(self, executor, session, output):
        session.bind("def total = 0\nname = 'x'")
        executor.execute(":show")
        text = output.getvalue()
        assert "Buffer is empty" in text
        assert "Bound names: name, total" in text

    def test_tokens_of_argument(self, executor, output):
        executor.execute(":tokens foo.b")
        text = output.getvalue()
        assert "IDENT" in text
        assert "DOT" in text

    def test_tokens_of_open_string(self, executor, output):
        executor.execute(':t println "/usr')
        assert "Inside a string opened at column 8" in output.getvalue()

    def test_tokens_of_buffer(self, executor, session, output):
        session.buffers.append("def x = 1")
        session.buffers.append("x.")
        executor.execute(":tokens")
        assert "DOT" in output.getvalue()
        assert session.buffers.current() == ["def x = 1", "x."]

    def test_help_lists_commands(self, executor, output):
        executor.execute(":help")
        assert ":tokens" in output.getvalue()

    def test_unknown(self, executor, output):
        assert not executor.execute(":bogus").exit_repl
        assert "Unknown command" in output.getvalue()


def test_banner_is_plain_ascii(output):
    Renderer(Console(file=output, width=120)).banner()
    text = output.getvalue()
    assert "Groovy shell completion - type :help for commands" in text
