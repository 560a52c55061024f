# tests/test_main.py - on-modify hook entry point
import io
import json

import pytest

from taskhook.main import main, read_two_lines


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TASKHOOK_LOG_LEVEL", "TASKHOOK_ARCHIVE_FROM_STATUS", "TASKHOOK_ARCHIVE_TO_STATUSES"):
        monkeypatch.delenv(name, raising=False)


def run_hook(text, argv=None):
    out = io.StringIO()
    code = main(argv or [], stdin=io.StringIO(text), stdout=out)
    return code, out.getvalue().splitlines()


def test_read_two_lines():
    assert read_two_lines(io.StringIO("a\r\nb\nc\n")) == ["a", "b"]
    assert read_two_lines(io.StringIO("only one\n")) is None


def test_hook_reports_archive_transition(original_line, modified_line):
    code, lines = run_hook(f"{original_line}\n{modified_line}\n")
    assert code == 0
    assert len(lines) == 2
    payload = json.loads(lines[0])
    assert payload["status"] == "completed"
    assert payload["modified"] == "20240102T120000Z"
    assert lines[1] == "Task archived from pending to completed"


def test_hook_without_transition(original_line):
    code, lines = run_hook(f"{original_line}\n{original_line}")
    assert code == 0
    assert len(lines) == 1
    assert json.loads(lines[0]) == json.loads(original_line)


def test_hook_missing_second_line(original_line):
    code, lines = run_hook(f"{original_line}\n")
    assert code == 1
    assert lines[0].startswith("Error reading standard input")


def test_hook_decode_error_emits_no_json(original_line):
    code, lines = run_hook(f'{original_line}\n{{"status":"completed","due":"tomorrow"}}\n')
    assert code == 1
    assert len(lines) == 1
    assert lines[0].startswith("Error decoding JSON:")
    assert "due" in lines[0]


def test_hook_verbose_logs_to_stderr(original_line, modified_line, capsys):
    code, lines = run_hook(f"{original_line}\n{modified_line}\n", argv=["--verbose"])
    assert code == 0
    assert len(lines) == 2
    assert capsys.readouterr().out == ""


def test_hook_bad_log_level_fails_cleanly(original_line, modified_line, monkeypatch):
    monkeypatch.setenv("TASKHOOK_LOG_LEVEL", "verbose")
    code, lines = run_hook(f"{original_line}\n{modified_line}\n")
    assert code == 1
    assert lines[0].startswith("Error loading settings:")
    assert not any(line.startswith("{") for line in lines)
