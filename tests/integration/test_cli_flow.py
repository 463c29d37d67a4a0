"""Integration tests for full CLI flow.

Tests complete workflows against a real translation memory file: sources
and translations are added with commands and then found through the
interactive menu.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from transmem.cli.main import app

runner = CliRunner()


@pytest.mark.integration
class TestCLIIntegrationFlow:
    """Test complete CLI workflows."""

    def test_add_then_search_in_shell(self, tmp_path: Path) -> None:
        """Test data added by commands is found from the interactive menu."""
        # Arrange
        db = str(tmp_path / "app.sqlitedb")
        added = runner.invoke(app, ["add-source", "Hello World", "-c", "greeting", "--db", db])
        assert added.exit_code == 0, added.stdout
        guid = added.stdout.strip()

        translated = runner.invoke(app, ["add-translation", guid, "es", "Hola Mundo", "--db", db])
        assert translated.exit_code == 0, translated.stdout

        # Act - search translations (8), then exit (9)
        result = runner.invoke(
            app, ["shell", "--db", db, "--no-clear"], input="8\n  Hello  \n9\n"
        )

        # Assert
        assert result.exit_code == 0, f"exit_code={result.exit_code}, output: {result.stdout}"
        assert "Number of sources: 1" in result.stdout
        assert "Source: Hello World" in result.stdout
        assert "es: Hola Mundo" in result.stdout

    def test_repeated_add_source_merges_comments(self, tmp_path: Path) -> None:
        """Test adding a source twice keeps one record with both comments."""
        # Arrange
        db = str(tmp_path / "app.sqlitedb")

        # Act
        first = runner.invoke(app, ["add-source", "Save", "-c", "Button label", "--db", db])
        second = runner.invoke(app, ["add-source", "Save", "-c", "Menu item", "--db", db])
        comments = runner.invoke(app, ["comments", "Save", "--db", db])

        # Assert
        assert first.stdout.strip() == second.stdout.strip()
        assert "Button label" in comments.stdout
        assert "Menu item" in comments.stdout

    def test_update_translation_then_search(self, tmp_path: Path) -> None:
        """Test re-adding a translation replaces the stored text."""
        # Arrange
        db = str(tmp_path / "app.sqlitedb")
        guid = runner.invoke(app, ["add-source", "Cancel", "--db", db]).stdout.strip()
        runner.invoke(app, ["add-translation", guid, "fr", "Annuler", "--db", db])

        # Act
        runner.invoke(app, ["add-translation", guid, "fr", "Annuler l'action", "--db", db])
        result = runner.invoke(app, ["search", "Cancel", "--translations", "--db", db])

        # Assert
        assert result.exit_code == 0
        assert "fr: Annuler l'action" in result.stdout
        assert "fr: Annuler\n" not in result.stdout

    def test_empty_search_in_shell_does_nothing(self, tmp_path: Path) -> None:
        """Test an empty term in the menu skips the search."""
        # Arrange
        db = str(tmp_path / "app.sqlitedb")

        # Act - search sources (7) with blank input, then exit (9)
        result = runner.invoke(app, ["shell", "--db", db, "--no-clear"], input="7\n\n9\n")

        # Assert
        assert result.exit_code == 0
        assert "Search Results:" not in result.stdout
