"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from config import Config
from models import Session, TokenExpiryValidator
from processors import DocumentPipeline

TOKEN = "t" * 64
YEAR = "2024"

CONFIG_ATTRIBUTES = [
    "SOURCE_DIR",
    "OUTPUT_DIR",
    "INVALID_DIR_NAME",
    "TEXT_EXTENSION",
    "FILTER_YEAR",
    "MAX_FILE_SIZE_MB",
    "STATS_FILE_NAME",
    "INVALID_REPORT_FILE_NAME",
    "SESSION_TOKEN_LENGTH",
    "LOG_LEVEL",
    "LOG_FILE",
    "CURRENT_ENVIRONMENT",
]


@pytest.fixture(autouse=True)
def restore_config():
    """Config is class-level state; put it back after every test."""
    saved = {name: getattr(Config, name) for name in CONFIG_ATTRIBUTES}
    yield
    for name, value in saved.items():
        setattr(Config, name, value)


@pytest.fixture
def valid_session() -> Session:
    return Session(token=TOKEN, expires_at=datetime.now(timezone.utc) + timedelta(minutes=30))


@pytest.fixture
def expired_session() -> Session:
    return Session(token=TOKEN, expires_at=datetime.now(timezone.utc) - timedelta(minutes=1))


@pytest.fixture
def documents_dir(tmp_path) -> Path:
    directory = tmp_path / "documents"
    directory.mkdir()
    return directory


@pytest.fixture
def output_dir(tmp_path) -> Path:
    directory = tmp_path / "output"
    directory.mkdir()
    return directory


@pytest.fixture
def write_document(documents_dir):
    """Create a file in the documents directory."""

    def _write(name: str, content: str = "") -> Path:
        path = documents_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_pipeline(valid_session):
    """Build a pipeline for the test year with a valid session."""

    def _make(session: Session = None, **kwargs) -> DocumentPipeline:
        kwargs.setdefault("year", YEAR)
        kwargs.setdefault("session_validator", TokenExpiryValidator(token_length=64))
        return DocumentPipeline(session=session or valid_session, **kwargs)

    return _make
