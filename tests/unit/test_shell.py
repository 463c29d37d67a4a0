"""Unit tests for the interactive shell.

Prompts are patched so the menu loop can run without a terminal.
"""

from unittest.mock import MagicMock, patch

import pytest

from transmem.cli.shell import (
    MAIN_MENU,
    MenuAction,
    Session,
    menu_choices,
    prompt_menu,
    prompt_search_term,
    run_action,
    run_shell,
    search_sources,
    search_translations,
)
from transmem.memory import TranslationMemory
from transmem.utils.config import Settings

PROMPT_ASK = "transmem.cli.shell.Prompt.ask"


@pytest.fixture
def session(sample_tm: TranslationMemory) -> Session:
    """Provide a session over the sample translation memory."""
    return Session(tm=sample_tm, settings=Settings(_env_file=None))


@pytest.mark.unit
class TestMenu:
    """Test the main menu definition and prompt."""

    def test_menu_choices_skip_separators(self) -> None:
        """Test only selectable entries are numbered."""
        choices = menu_choices()

        assert len(choices) == 9
        assert len(MAIN_MENU) > len(choices)
        assert choices[-1].action is MenuAction.EXIT

    def test_menu_offers_search_actions(self) -> None:
        """Test both search actions are on the menu."""
        actions = {item.action for item in menu_choices()}

        assert MenuAction.SEARCH_SOURCES in actions
        assert MenuAction.SEARCH_TRANSLATIONS in actions

    def test_prompt_menu_maps_number_to_action(self) -> None:
        """Test the chosen number selects the matching entry."""
        with patch(PROMPT_ASK, return_value="7") as mock_ask:
            action = prompt_menu()

        assert action is MenuAction.SEARCH_SOURCES
        assert mock_ask.call_args.kwargs["choices"] == [str(i) for i in range(1, 10)]

    def test_prompt_search_term_trims(self) -> None:
        """Test surrounding whitespace is removed from search terms."""
        with patch(PROMPT_ASK, return_value="  Hello  "):
            assert prompt_search_term() == "Hello"


@pytest.mark.unit
class TestActions:
    """Test menu actions."""

    def test_empty_term_skips_search(self) -> None:
        """Test an empty search term does not query the store."""
        tm = MagicMock(spec=TranslationMemory)
        session = Session(tm=tm, settings=Settings(_env_file=None))

        with patch(PROMPT_ASK, return_value="   "):
            search_sources(session)
            search_translations(session)

        tm.search_sources.assert_not_called()
        tm.search_translations.assert_not_called()

    def test_search_sources_prints_matches(
        self, session: Session, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test matching sources are printed."""
        with patch(PROMPT_ASK, return_value="Hello"):
            search_sources(session)

        out = capsys.readouterr().out
        assert "Search Results:" in out
        assert "Hello World" in out
        assert "Goodbye" not in out

    def test_search_translations_prints_translations(
        self, session: Session, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test translations are printed under each source."""
        with patch(PROMPT_ASK, return_value="Hello"):
            search_translations(session)

        out = capsys.readouterr().out
        assert "Source: Hello World" in out
        assert "es: Hola Mundo" in out

    @pytest.mark.parametrize(
        "action",
        [
            MenuAction.ANDROID_IMPORT_BASE_XML,
            MenuAction.ANDROID_BUILD_TRANSLATIONS,
            MenuAction.EXTRACT_FOR_TRANSLATION,
            MenuAction.IMPORT_NEW_TRANSLATIONS,
            MenuAction.NOT_IMPLEMENTED,
        ],
    )
    def test_unimplemented_actions(
        self, session: Session, action: MenuAction, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test actions without an implementation report it and return."""
        run_action(session, action)

        assert f"TODO: Implement the action for: {action.value}" in capsys.readouterr().out


@pytest.mark.unit
class TestRunShell:
    """Test the menu loop."""

    def test_loop_until_exit(
        self, session: Session, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test actions run in order until Exit is chosen."""
        answers = ["7", "Good", "8", "Hello", "9"]

        with patch(PROMPT_ASK, side_effect=answers) as mock_ask:
            run_shell(session, clear=False)

        out = capsys.readouterr().out
        assert mock_ask.call_count == len(answers)
        assert "TODO TRANSLATION" in out
        assert "Number of sources: 2" in out
        assert "Goodbye" in out
        assert "es: Hola Mundo" in out

    def test_exit_immediately(self, session: Session) -> None:
        """Test choosing Exit first leaves the store untouched and open."""
        with patch(PROMPT_ASK, return_value="9"):
            run_shell(session, clear=False)

        assert session.tm.is_open

    def test_input_end_propagates(self, session: Session) -> None:
        """Test EOF on a prompt ends the loop with EOFError."""
        with patch(PROMPT_ASK, side_effect=EOFError), pytest.raises(EOFError):
            run_shell(session, clear=False)

    def test_custom_banner(
        self, sample_tm: TranslationMemory, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the banner text comes from the session settings."""
        session = Session(tm=sample_tm, settings=Settings(_env_file=None, banner_text="My App"))

        with patch(PROMPT_ASK, return_value="9"):
            run_shell(session, clear=False)

        assert "MY APP" in capsys.readouterr().out
