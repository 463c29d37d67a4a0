"""Shared pytest fixtures for transmem tests.

Provides temporary translation memories and CLI helpers.
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from transmem.memory import TranslationMemory
from transmem.utils import config

# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Point the default store at a temporary file and reset cached settings."""
    monkeypatch.setenv("TRANSMEM_DB_PATH", str(tmp_path / "default.sqlitedb"))
    monkeypatch.delenv("TRANSMEM_BASE_LANGUAGE", raising=False)
    monkeypatch.delenv("TRANSMEM_LOG_LEVEL", raising=False)
    monkeypatch.setattr(config, "_settings", None)


# ============================================================================
# Translation Memory Fixtures
# ============================================================================


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Provide a path for a translation memory file that does not exist yet."""
    return tmp_path / "translations.sqlitedb"


@pytest.fixture
def temp_tm(db_path: Path) -> Generator[TranslationMemory, None, None]:
    """Provide an open, empty translation memory."""
    tm = TranslationMemory(db_path)
    tm.open()

    yield tm

    tm.close()


@pytest.fixture
def sample_tm(temp_tm: TranslationMemory) -> TranslationMemory:
    """Provide a translation memory with two sources and one translation.

    Contents:
        "Hello World" - comment "Start screen greeting", es: "Hola Mundo"
        "Goodbye"     - no comments, no translations
    """
    hello = temp_tm.add_source("Hello World", ["Start screen greeting"])
    temp_tm.add_source("Goodbye", [])
    temp_tm.add_translation(hello, "es", "Hola Mundo")
    return temp_tm


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Typer CLI test runner."""
    return CliRunner()
