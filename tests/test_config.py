"""Tests for configuration loading and logging setup."""

import pytest
import toml

from gshcomplete.completion import IdentifierAggregator, tokenize_buffer
from gshcomplete.runtime import GshConfig, configure_logging, create_default_config, load_config
from gshcomplete.runtime.config import get_config_path


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("GSHCOMPLETE_HISTORY_FILE", raising=False)
    monkeypatch.delenv("GSHCOMPLETE_LOG_LEVEL", raising=False)
    monkeypatch.chdir(work_dir)
    return home_dir


class TestLoadConfig:
    def test_defaults(self, home):
        config = load_config()
        assert config == GshConfig()
        assert config.completion.filenames
        assert config.shell.log_level == "WARNING"

    def test_local_overrides_global(self, home):
        (home / ".gshcomplete").mkdir()
        get_config_path().write_text(toml.dumps({"completion": {"filenames": False, "keywords": False}}))
        get_config_path(local=True).write_text(toml.dumps({"completion": {"keywords": True}}))

        config = load_config()
        assert config.completion.filenames is False
        assert config.completion.keywords is True

    def test_environment(self, home, monkeypatch):
        monkeypatch.setenv("GSHCOMPLETE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("GSHCOMPLETE_HISTORY_FILE", "/tmp/gsh-history")
        config = load_config()
        assert config.shell.log_level == "DEBUG"
        assert config.shell.history_file == "/tmp/gsh-history"

    def test_create_default_config(self, home):
        path = create_default_config()
        assert path == home / ".gshcomplete" / "config.toml"
        assert toml.load(path)["completion"]["filenames"] is True
        assert load_config() == GshConfig()


class TestConfigureLogging:
    def test_known_level(self):
        configure_logging("debug")
        configure_logging("WARNING")

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging("chatty")

    def test_warnings_go_to_stderr(self, capsys):
        class Broken:
            def complete(self, tokens, candidates):
                raise RuntimeError("provider exploded")

        configure_logging("WARNING")
        tokens = tokenize_buffer("x", []).tokens
        assert not IdentifierAggregator([Broken()]).complete(tokens, [])
        captured = capsys.readouterr()
        assert "completion.identifier.provider_failed" in captured.err
        assert captured.out == ""
