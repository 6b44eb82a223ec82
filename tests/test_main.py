"""
Tests for the command-line entry point in src/__main__.py.

The entry module is loaded under its own name, since "__main__" is already taken
by the test runner.
"""

import importlib.util
import logging
from pathlib import Path

import pytest

from core.config import RANDOM_WALK_OUTPUT_FILE


ENTRY_POINT = Path(__file__).parent.parent / "src" / "__main__.py"


@pytest.fixture
def entry():
    """Load the entry point module."""
    spec = importlib.util.spec_from_file_location("word_graph_entry", ENTRY_POINT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def corpus(tmp_path, sample_text) -> Path:
    path = tmp_path / "corpus.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


class RecordingCLI:
    """Stands in for WordGraphCLI and records what main hands over."""

    instances = []

    def __init__(self, graph, config=None, rng=None):
        self.graph = graph
        self.config = config
        self.ran = False
        RecordingCLI.instances.append(self)

    def run(self):
        self.ran = True


@pytest.fixture
def recording_cli(entry, monkeypatch):
    RecordingCLI.instances = []
    monkeypatch.setattr(entry, "WordGraphCLI", RecordingCLI)
    return RecordingCLI


class TestBuildGraph:
    """Test build_graph."""

    def test_builds_frozen_graph(self, entry, corpus, capsys):
        graph = entry.build_graph(corpus)
        assert graph.is_frozen
        assert graph.get_successors("new") == {"worlds": 1, "life": 1, "civilizations": 1}
        assert "Graph built from" in capsys.readouterr().out

    def test_missing_corpus(self, entry, tmp_path, capsys):
        assert entry.build_graph(tmp_path / "missing.txt") is None
        assert "File not found" in capsys.readouterr().err


class TestParseArgs:
    """Test parse_args."""

    def test_corpus_and_output(self, entry):
        args = entry.parse_args(["text.txt", "--output", "walk.txt"])
        assert args.corpus == Path("text.txt")
        assert args.output == Path("walk.txt")

    def test_defaults(self, entry):
        args = entry.parse_args([])
        assert args.corpus is None
        assert args.output is None


class TestMain:
    """Drive main() end to end with the CLI replaced."""

    def test_frozen_graph_handed_to_cli(self, entry, corpus, recording_cli):
        entry.main([str(corpus)])
        (cli,) = recording_cli.instances
        assert cli.ran
        assert cli.graph.is_frozen
        assert cli.graph.has_node("civilizations")
        assert cli.config.walk_output_file == RANDOM_WALK_OUTPUT_FILE

    def test_output_option(self, entry, corpus, recording_cli, tmp_path):
        entry.main([str(corpus), "--output", str(tmp_path / "walk.txt")])
        assert recording_cli.instances[0].config.walk_output_file == tmp_path / "walk.txt"

    def test_prompts_for_corpus_when_omitted(self, entry, corpus, recording_cli, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": f"  {corpus}  ")
        entry.main([])
        assert recording_cli.instances[0].graph.has_node("explore")

    def test_runs_real_menu_until_exit(self, entry, corpus, monkeypatch, capsys):
        answers = iter(["1", "7"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        entry.main([str(corpus)])
        out = capsys.readouterr().out
        assert "new -> {civilizations(weight: 1), life(weight: 1), worlds(weight: 1)}" in out
        assert "Exiting." in out

    @pytest.mark.parametrize("content", ["", "lonely"])
    def test_too_few_words_exits_with_1(self, entry, tmp_path, recording_cli, content, capsys):
        path = tmp_path / "short.txt"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            entry.main([str(path)])
        assert exc_info.value.code == 1
        assert "enough words" in capsys.readouterr().err
        assert recording_cli.instances == []

    def test_missing_corpus_exits_with_1(self, entry, tmp_path, recording_cli):
        with pytest.raises(SystemExit) as exc_info:
            entry.main([str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1

    def test_keyboard_interrupt_exits_with_0(self, entry, corpus, monkeypatch, capsys):
        def interrupted(prompt=""):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupted)
        with pytest.raises(SystemExit) as exc_info:
            entry.main([str(corpus)])
        assert exc_info.value.code == 0
        assert "Program terminated by user" in capsys.readouterr().out

    def test_unknown_log_level_exits_with_1(self, entry, corpus, recording_cli, monkeypatch, capsys):
        monkeypatch.setattr(entry, "LOG_LEVEL", "LOUD")
        with pytest.raises(SystemExit) as exc_info:
            entry.main([str(corpus)])
        assert exc_info.value.code == 1
        assert "Unknown log level" in capsys.readouterr().err
        assert recording_cli.instances == []

    def test_lowercase_log_level_is_accepted(self, entry, corpus, recording_cli, monkeypatch):
        monkeypatch.setattr(entry, "LOG_LEVEL", "info")
        entry.main([str(corpus)])
        assert recording_cli.instances[0].ran


class TestConfigureLogging:
    """Test configure_logging."""

    @pytest.mark.parametrize("name", ["info", "DEBUG", " Warning "])
    def test_accepts_any_case(self, entry, monkeypatch, name):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        entry.configure_logging(name)
        assert calls[0]["level"] == logging.getLevelName(name.strip().upper())

    def test_rejects_unknown_level(self, entry):
        with pytest.raises(ValueError, match="Unknown log level"):
            entry.configure_logging("loud")
