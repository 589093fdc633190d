"""Tests for the run log and color output."""

import os
import tempfile

from shells.progress import (
    CYAN,
    GREEN,
    RED,
    YELLOW,
    ProgressLog,
    _color_enabled,
    _detect_color,
    colorize,
)


# ── colorize ────────────────────────────────────────────────

def test_colorize():
    result = colorize("hello", GREEN)
    assert result.startswith(GREEN)
    assert result.endswith("\033[0m")
    assert "hello" in result


# ── _detect_color ───────────────────────────────────────────

def test_detect_command_line():
    assert _detect_color("▸ sh -c echo hi") == CYAN


def test_detect_nonzero_exit():
    assert _detect_color("  exit_code=1") == RED


def test_detect_zero_exit():
    assert _detect_color("  exit_code=0") == GREEN


def test_detect_launch_failure():
    assert _detect_color("  launch failed: not found (exit_code=127)") == YELLOW


def test_detect_plain_message():
    assert _detect_color("nothing special") is None


# ── _color_enabled ──────────────────────────────────────────

def test_color_disabled_by_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert _color_enabled() is False


def test_color_disabled_by_shells_no_color(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("SHELLS_NO_COLOR", "1")
    assert _color_enabled() is False


# ── ProgressLog output ──────────────────────────────────────

def test_progress_log_writes_plain_to_file(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "logs", "run.log")
        log = ProgressLog(path)
        log.log("▸ sh -c true")
        log.log("  exit_code=0")
        log.close()

        with open(path) as f:
            lines = f.read().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("] ▸ sh -c true")
        assert lines[1].endswith("]   exit_code=0")
        # File should never contain ANSI codes
        assert all("\033[" not in line for line in lines)


def test_progress_log_appends(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "run.log")
        for message in ("first", "second"):
            log = ProgressLog(path)
            log.log(message)
            log.close()

        with open(path) as f:
            content = f.read()
        assert "first" in content
        assert "second" in content


def test_progress_log_silent_without_echo(capsys):
    log = ProgressLog()
    log.log("hidden")
    log.close()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_progress_log_echo_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("NO_COLOR", "1")
    log = ProgressLog(echo=True)
    log.log("  exit_code=2")
    log.close()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "exit_code=2" in captured.err
    assert "\033[" not in captured.err


def test_progress_log_color_forced_off(monkeypatch, capsys):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("SHELLS_NO_COLOR", raising=False)
    monkeypatch.setattr("shells.progress._color_enabled", lambda: True)
    log = ProgressLog(echo=True, color=False)
    log.log("  exit_code=1")
    log.close()
    assert "\033[" not in capsys.readouterr().err


def test_progress_log_color_forced_on(capsys):
    log = ProgressLog(echo=True, color=True)
    log.log("  exit_code=1")
    log.close()
    assert RED in capsys.readouterr().err
