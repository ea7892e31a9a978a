"""Integration tests for the noitu CLI."""

import json
import tempfile
from pathlib import Path

import pytest

from noitu.cli import DEFAULT_CONFIG, load_config, main


@pytest.fixture
def dictionary_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "pairs.json"
        path.write_text(
            json.dumps(
                {"thế": ["chân", "giới"], "chân": ["thật", "trời"], "trời": ["xanh"]},
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
        yield str(path)


def _run(*argv):
    return main(list(argv) + ["--config", "/nonexistent/config.json"])


class TestLoadConfig:
    def test_defaults_when_missing(self):
        assert load_config("/nonexistent/config.json") == DEFAULT_CONFIG

    def test_overrides_merge(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text('{"seed": 42}', encoding="utf-8")
            cfg = load_config(path)
            assert cfg["seed"] == 42
            assert cfg["dictionary_path"] == DEFAULT_CONFIG["dictionary_path"]

    @pytest.mark.parametrize("seed", ['"abc"', "1.5", "true", "[1]"])
    def test_bad_seed_rejected(self, seed):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text(f'{{"seed": {seed}}}', encoding="utf-8")
            with pytest.raises(ValueError, match="seed"):
                load_config(path)

    def test_non_object_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text("[]", encoding="utf-8")
            with pytest.raises(ValueError):
                load_config(path)

    def test_bad_config_reported(self, dictionary_file, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text('{"seed": "abc"}', encoding="utf-8")
            code = main(["next", "--config", str(path), "--dictionary", dictionary_file])
        assert code == 1
        assert "Error:" in capsys.readouterr().out

    def test_unknown_keys_ignored(self, dictionary_file, capsys):
        """Stale keys such as a null max_alternatives do not break a run."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text('{"seed": 1, "max_alternatives": null}', encoding="utf-8")
            code = main([
                "next", "--current", "thế chân",
                "--config", str(path), "--dictionary", dictionary_file,
            ])
        assert code == 0
        assert "Alternatives:" in capsys.readouterr().out


class TestCheckCommand:
    def test_valid(self, dictionary_file, capsys):
        assert _run("check", "thế chân", "--dictionary", dictionary_file) == 0
        assert "Valid" in capsys.readouterr().out

    def test_not_found(self, dictionary_file, capsys):
        assert _run("check", "hello world", "--dictionary", dictionary_file) == 2
        assert "word_not_found" in capsys.readouterr().out

    def test_used(self, dictionary_file, capsys):
        code = _run("check", "thế chân", "--used", "the chan", "--dictionary", dictionary_file)
        assert code == 2
        assert "word_used" in capsys.readouterr().out

    def test_no_connection(self, dictionary_file, capsys):
        code = _run("check", "chân thật", "--current", "thế giới", "--dictionary", dictionary_file)
        assert code == 2
        assert "no_connection" in capsys.readouterr().out

    def test_missing_dictionary(self, capsys):
        assert _run("check", "thế chân", "--dictionary", "/nonexistent/pairs.json") == 1
        assert "Error:" in capsys.readouterr().out


class TestNextCommand:
    def test_next(self, dictionary_file, capsys):
        code = _run("next", "--current", "thế chân", "--dictionary", dictionary_file, "--seed", "1")
        assert code == 0
        out = capsys.readouterr().out
        assert "Next word: chân" in out

    def test_exhausted(self, dictionary_file, capsys):
        code = _run(
            "next", "--current", "thế chân",
            "--history", "chân thật", "--history", "chân trời",
            "--dictionary", dictionary_file,
        )
        assert code == 2
        assert "already in history" in capsys.readouterr().out

    def test_malformed_pair(self, dictionary_file, capsys):
        assert _run("next", "--current", "thế", "--dictionary", dictionary_file) == 1
        assert "Error:" in capsys.readouterr().out


class TestMovesAndDemo:
    def test_moves(self, dictionary_file, capsys):
        assert _run("moves", "--current", "thế chân", "--dictionary", dictionary_file) == 0
        out = capsys.readouterr().out
        assert "Possible moves: 2" in out
        assert "Can continue: yes" in out

    def test_demo(self, dictionary_file, capsys):
        assert _run("demo", "--turns", "5", "--seed", "3", "--dictionary", dictionary_file) == 0
        assert "Game history:" in capsys.readouterr().out

    def test_demo_stops_when_chain_breaks(self, capsys):
        """A dead end ends the game and the loop stops asking for moves."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "pairs.json"
            path.write_text(json.dumps({"thế": ["giới"]}, ensure_ascii=False), encoding="utf-8")
            assert _run("demo", "--turns", "5", "--dictionary", str(path)) == 0
        out = capsys.readouterr().out
        assert "Move 1: No more moves available!" in out
        assert "Move 2" not in out
        assert "Game over: yes (1 words played)" in out

    def test_demo_open_game(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "pairs.json"
            path.write_text(json.dumps({"a": ["b"], "b": ["a"]}), encoding="utf-8")
            assert _run("demo", "--turns", "1", "--dictionary", str(path)) == 0
        assert "Game over: no (2 words played)" in capsys.readouterr().out
