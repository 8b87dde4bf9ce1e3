"""
Tests for terminal output: colour handling, the suggestion block, the config
listing and the spinner.

Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import re
import time

import pytest

import cba.output as output
from cba.output import (
    Spinner,
    colorize_commit_type,
    paint,
    print_config,
    print_error,
    print_suggestion,
)

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def colors_on(monkeypatch):
    monkeypatch.setattr(output, "COLORS_ENABLED", True)


@pytest.fixture
def colors_off(monkeypatch):
    monkeypatch.setattr(output, "COLORS_ENABLED", False)


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


# ---------------------------------------------------------------------------
# Colour detection
# ---------------------------------------------------------------------------

class TestColorsEnabled:

    def test_force_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert output._colors_enabled() is True

    def test_no_color_wins(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert output._colors_enabled() is False

    def test_captured_stdout_is_not_a_terminal(self, capsys, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        assert output._colors_enabled() is False


class TestPaint:

    def test_combines_styles(self, colors_on):
        assert paint("hi", "bold", "green") == "\033[1;32mhi\033[0m"

    def test_plain_when_disabled(self, colors_off):
        assert paint("hi", "bold", "green") == "hi"


# ---------------------------------------------------------------------------
# Commit type colouring
# ---------------------------------------------------------------------------

class TestColorizeCommitType:

    @pytest.mark.parametrize("message, prefix, code", [
        ("feat(cli): add flag", "feat(cli):", "1;32"),
        ("fix: handle timeout", "fix:", "1;31"),
        ("feat!: drop python 3.9", "feat!:", "1;32"),
        ("chore: bump deps", "chore:", "1;90"),
    ])
    def test_prefix_coloured(self, colors_on, message, prefix, code):
        result = colorize_commit_type(message)
        assert result.startswith(f"\033[{code}m{prefix}\033[0m")
        assert result.endswith(message[len(prefix):])

    def test_only_first_line(self, colors_on):
        message = "fix: handle timeout\n\nfix: not a prefix here"
        result = colorize_commit_type(message)
        assert result.count("\033[") == 2
        assert result.endswith("\n\nfix: not a prefix here")

    @pytest.mark.parametrize("message", [
        "Add greeting to readme",
        "wip: not a known type",
        "No changes",
    ])
    def test_unknown_prefix_untouched(self, colors_on, message):
        assert colorize_commit_type(message) == message

    def test_untouched_when_disabled(self, colors_off):
        assert colorize_commit_type("feat: add flag") == "feat: add flag"


# ---------------------------------------------------------------------------
# Printed blocks
# ---------------------------------------------------------------------------

class TestPrintSuggestion:

    def test_plain_layout(self, colors_off, capsys):
        print_suggestion("feat: add greeting", 'git commit -m "feat: add greeting"')
        out = capsys.readouterr().out

        assert out == (
            "\nSuggested commit message:\n\n"
            "feat: add greeting\n"
            '\nUse it with: git commit -m "feat: add greeting"\n'
        )

    def test_staging_note(self, colors_off, capsys):
        print_suggestion("fix: typo", 'git commit -m "fix: typo"', auto_staged=True)
        assert "Note: All files were automatically staged" in capsys.readouterr().out

    def test_coloured_command_is_gray(self, colors_on, capsys, strip_ansi):
        print_suggestion("docs: explain flags", 'git commit -m "docs: explain flags"')
        out = capsys.readouterr().out

        assert '\033[90m\nUse it with: git commit -m "docs: explain flags"\033[0m' in out
        assert "\033[1;36mdocs:\033[0m explain flags" in out
        assert "Suggested commit message:" in strip_ansi(out)


class TestPrintConfig:

    def test_lists_entries_and_path(self, colors_off, capsys, tmp_path):
        print_config({"OPENROUTER_API_KEY": "Not set", "OTHER": "1"}, tmp_path / ".env")
        lines = capsys.readouterr().out.splitlines()

        assert lines[0] == "Current configuration:"
        assert lines[1] == "OPENROUTER_API_KEY: Not set"
        assert lines[2] == "OTHER: 1"
        assert str(tmp_path / ".env") in lines[3]


class TestPrintError:

    def test_goes_to_stderr(self, colors_off, capsys):
        print_error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: boom\n"


# ---------------------------------------------------------------------------
# Spinner
# ---------------------------------------------------------------------------

class TestSpinner:

    def test_silent_when_not_a_terminal(self, capsys):
        with Spinner("Generating...") as spinner:
            pass
        assert spinner._thread is None
        assert capsys.readouterr().out == ""

    def test_animates_on_terminal(self, capsys, monkeypatch):
        monkeypatch.setattr(output.sys.stdout, "isatty", lambda: True)
        with Spinner("Generating...", interval=0.01) as spinner:
            time.sleep(0.1)
        out = capsys.readouterr().out

        assert not spinner._thread.is_alive()
        assert f"{Spinner.FRAMES[0]} Generating..." in out
        assert out.endswith("\r\033[K")

    def test_body_exceptions_propagate(self, capsys):
        with pytest.raises(RuntimeError):
            with Spinner():
                raise RuntimeError("provider failed")
