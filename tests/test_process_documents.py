"""Tests for the process_documents command-line script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "process_documents.py"

OVERRIDE_VARIABLES = [
    "TURNOVER_ENV",
    "SOURCE_DIR",
    "OUTPUT_DIR",
    "FILTER_YEAR",
    "MAX_FILE_SIZE_MB",
    "LOG_LEVEL",
]


def load_script():
    spec = importlib.util.spec_from_file_location("process_documents", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_malformed_session_expiry_exits_cleanly(tmp_path, monkeypatch, capsys):
    """Test that an unparseable SESSION_EXPIRES_AT is reported, not raised."""
    monkeypatch.chdir(tmp_path)
    for name in OVERRIDE_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SESSION_TOKEN", "t" * 64)
    monkeypatch.setenv("SESSION_EXPIRES_AT", "next tuesday")
    script = load_script()

    with pytest.raises(SystemExit) as exc_info:
        script.main([str(tmp_path), "--output-dir", str(tmp_path / "output")])

    assert exc_info.value.code == 1
    assert "invalid access session" in capsys.readouterr().out


def test_load_session_reads_environment(monkeypatch):
    """Test that a well-formed session is passed through."""
    monkeypatch.setenv("SESSION_TOKEN", "t" * 64)
    monkeypatch.setenv("SESSION_EXPIRES_AT", "2030-01-01T00:00:00+00:00")

    session = load_script().load_session()

    assert session.token == "t" * 64
    assert session.expires_at.year == 2030
