"""
Integration tests for the textops command-line interface.

Each test drives cli.main() with an argv list and checks the printed
output and exit status.
"""

import json
from io import StringIO

import pytest

from textops import __version__
from textops.cli import Colors, create_parser, main


@pytest.fixture
def run(capsys):
    """Run the CLI and return (exit_code, stdout, stderr)."""

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


class TestColors:
    """Tests for the Colors palette."""

    def test_disable_clears_every_code(self, monkeypatch):
        """After disable() no escape code is left."""
        codes = [name for name in vars(Colors) if name.isupper()]
        for name in codes:
            monkeypatch.setattr(Colors, name, getattr(Colors, name))
        Colors.disable()
        assert codes == ["RED", "GREEN", "DIM", "RESET"]
        assert all(getattr(Colors, name) == "" for name in codes)


class TestParser:
    """Tests for argument parsing."""

    def test_no_command_prints_help(self, run):
        """Without a command the help text is shown."""
        code, out, _ = run()
        assert code == 0
        assert "usage: textops" in out

    def test_version(self, capsys):
        """--version prints the package version."""
        with pytest.raises(SystemExit) as exc:
            create_parser().parse_args(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestStringCommands:
    """Tests for the string manipulation commands."""

    def test_split(self, run):
        """One fragment per line, empty fragments kept."""
        code, out, _ = run("split", "a,b,,c", "-d", ",")
        assert code == 0
        assert out == "a\nb\n\nc\n"

    def test_split_json(self, run):
        """JSON list output."""
        code, out, _ = run("split", "a,b,,c", "-d", ",", "--json")
        assert json.loads(out) == ["a", "b", "", "c"]

    def test_chunk(self, run):
        """Fixed-size chunks."""
        code, out, _ = run("chunk", "abcde", "-n", "2", "--json")
        assert json.loads(out) == ["ab", "cd", "e"]

    def test_chunk_zero_is_error(self, run):
        """Contract violations exit with status 1."""
        code, out, err = run("chunk", "abc", "-n", "0")
        assert code == 1
        assert "split_by_len" in err

    def test_pair(self, run):
        """Key and value on separate lines."""
        code, out, _ = run("pair", "key=value", "-d", "=")
        assert out == "key\nvalue\n"

    def test_replace_first(self, run):
        """Without --all only the first occurrence changes."""
        code, out, _ = run("replace", "a-b-c", "-s", "-", "-r", "+")
        assert out == "a+b-c\n"

    def test_replace_all_multi(self, run):
        """Repeated -s/-r pairs with --all."""
        code, out, _ = run("replace", "x y x", "-s", "x", "-r", "1", "-s", "y", "-r", "2", "--all")
        assert out == "1 2 1\n"

    def test_replace_mismatched_pairs(self, run):
        """Unequal -s/-r counts are rejected."""
        code, _, err = run("replace", "abc", "-s", "a", "-s", "b", "-r", "x")
        assert code == 1
        assert "Error" in err

    def test_remove_all(self, run):
        """Remove every occurrence."""
        code, out, _ = run("remove", "a-b_c", "-s", "-", "-s", "_", "--all")
        assert out == "abc\n"

    def test_between(self, run):
        """Text between markers, with offset."""
        assert run("between", "k=[value];", "[", "]")[1] == "value\n"
        assert run("between", "k=[value];", "[", "]", "--offset", "1")[1] == "alue]\n"

    def test_clip(self, run):
        """Centred window."""
        code, out, _ = run("clip", "aaa bbb ccc", "BBB", "-w", "7", "-i")
        assert out == "a bbb c\n"

    def test_contains(self, run):
        """Exit status reports presence."""
        code, out, _ = run("contains", "xxabcxx", "ABC", "-i")
        assert code == 0
        assert "true" in out
        code, out, _ = run("contains", "xxabcxx", "ABC")
        assert code == 1
        assert "false" in out

    def test_contains_unknown_folding(self, run):
        """Unknown folding names are reported."""
        code, _, err = run("contains", "abc", "A", "-i", "--folding", "nope")
        assert code == 1
        assert "unknown folding" in err

    def test_case(self, run):
        """Case conversion."""
        assert run("case", "Hello", "upper")[1] == "HELLO\n"
        assert run("case", "Hello", "lower")[1] == "hello\n"

    def test_repeat(self, run):
        """Repetition."""
        assert run("repeat", "ab", "3")[1] == "ababab\n"

    def test_text_from_stdin(self, run, monkeypatch):
        """A TEXT argument of "-" reads standard input."""
        monkeypatch.setattr("sys.stdin", StringIO("a;b\n"))
        assert run("split", "-", "-d", ";")[1] == "a\nb\n"


class TestPromptCommands:
    """Tests for the interactive commands."""

    def test_confirm_yes(self, run, monkeypatch):
        """Exit status 0 for yes."""
        monkeypatch.setattr("sys.stdin", StringIO("yes\n"))
        code, out, _ = run("confirm", "Proceed?")
        assert code == 0
        assert "[y/N]" in out

    def test_confirm_default(self, run, monkeypatch):
        """Empty answer uses --default-yes."""
        monkeypatch.setattr("sys.stdin", StringIO("\n"))
        assert run("confirm", "Proceed?", "--default-yes")[0] == 0
        monkeypatch.setattr("sys.stdin", StringIO("\n"))
        assert run("confirm", "Proceed?")[0] == 1

    def test_confirm_env_tokens(self, run, monkeypatch):
        """Answer tokens come from the environment."""
        monkeypatch.setenv("TEXTOPS_YES_TOKENS", "oui")
        monkeypatch.setattr("sys.stdin", StringIO("OUI\n"))
        assert run("confirm", "Continuer?")[0] == 0

    def test_confirm_end_of_input(self, run, monkeypatch):
        """Exhausted input is an error."""
        monkeypatch.setattr("sys.stdin", StringIO(""))
        code, _, err = run("confirm", "Proceed?")
        assert code == 1
        assert "end of input" in err

    def test_prompt(self, run, monkeypatch):
        """Answer on stdout, prompt text on stderr."""
        monkeypatch.setattr("sys.stdin", StringIO("\n"))
        code, out, err = run("prompt", "Port", "--default", "8080")
        assert code == 0
        assert out == "8080\n"
        assert "Port [8080]: " in err

    def test_prompt_password_masked(self, run, monkeypatch):
        """Masked password read from a non-terminal stream."""
        monkeypatch.setattr("sys.stdin", StringIO("pw\n"))
        code, out, err = run("prompt", "Password", "--password", "--mask", "*")
        assert out == "pw\n"
        assert "**" in err
