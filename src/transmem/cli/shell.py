# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Interactive terminal menu over a Translation Memory.

The session owns the store handle; every action receives the session
rather than reaching for a global store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from rich.prompt import Prompt

from transmem.cli.ui import (
    console,
    print_banner,
    print_source_results,
    print_store_statistics,
    print_translation_results,
)
from transmem.memory import TranslationMemory
from transmem.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MenuAction(str, Enum):
    """Actions offered by the main menu."""

    ANDROID_IMPORT_BASE_XML = "android_import_base_xml"
    ANDROID_BUILD_TRANSLATIONS = "android_build_translations"
    EXTRACT_FOR_TRANSLATION = "extract_for_translation"
    IMPORT_NEW_TRANSLATIONS = "import_new_translations"
    SEARCH_SOURCES = "search_sources"
    SEARCH_TRANSLATIONS = "search_translations"
    NOT_IMPLEMENTED = "not_implemented"
    EXIT = "exit"


@dataclass
class MenuItem:
    """Selectable menu entry."""

    label: str
    action: MenuAction


# Separators are plain strings, selectable entries are MenuItems
MAIN_MENU: list[str | MenuItem] = [
    "---- ANDROID ----",
    MenuItem("Import base (English) XML File", MenuAction.ANDROID_IMPORT_BASE_XML),
    MenuItem("Build translated XML Files", MenuAction.ANDROID_BUILD_TRANSLATIONS),
    "------ IOS ------",
    MenuItem("Not implemented yet", MenuAction.NOT_IMPLEMENTED),
    "------ MAC ------",
    MenuItem("Not implemented yet", MenuAction.NOT_IMPLEMENTED),
    "-----------------",
    MenuItem("Extract strings for translation", MenuAction.EXTRACT_FOR_TRANSLATION),
    MenuItem("Import new translated strings", MenuAction.IMPORT_NEW_TRANSLATIONS),
    MenuItem("Search source strings", MenuAction.SEARCH_SOURCES),
    MenuItem("Search for a translation", MenuAction.SEARCH_TRANSLATIONS),
    "-----------------",
    MenuItem("Exit", MenuAction.EXIT),
]


@dataclass
class Session:
    """State of one interactive session."""

    tm: TranslationMemory
    settings: Settings = field(default_factory=get_settings)


def menu_choices(menu: list[str | MenuItem] = MAIN_MENU) -> list[MenuItem]:
    """Get the selectable entries of a menu, in display order."""
    return [entry for entry in menu if isinstance(entry, MenuItem)]


def prompt_menu(menu: list[str | MenuItem] = MAIN_MENU) -> MenuAction:
    """Show the menu and ask for a numbered choice.

    Raises:
        EOFError: If the input stream ends
    """
    console.print()
    number = 0
    for entry in menu:
        if isinstance(entry, MenuItem):
            number += 1
            console.print(f"  [cyan]{number:>2})[/cyan] {entry.label}")
        else:
            console.print(f"  [dim]{entry}[/dim]")

    items = menu_choices(menu)
    answer = Prompt.ask(
        "What do you want to do?",
        console=console,
        choices=[str(i) for i in range(1, len(items) + 1)],
        show_choices=False,
    )
    return items[int(answer) - 1].action


def prompt_search_term() -> str:
    """Ask for a search term, trimmed of surrounding whitespace."""
    answer = Prompt.ask(
        "Enter a string to search for", console=console, default="", show_default=False
    )
    return answer.strip()


def search_sources(session: Session) -> None:
    """Prompt for a term and print the matching source strings."""
    term = prompt_search_term()
    if not term:
        return

    print_source_results(session.tm.search_sources(term))


def search_translations(session: Session) -> None:
    """Prompt for a term and print matching sources with their translations."""
    term = prompt_search_term()
    if not term:
        return

    print_translation_results(session.tm.search_translations(term))


def run_action(session: Session, action: MenuAction) -> None:
    """Run one menu action."""
    logger.debug(f"Running menu action: {action.value}")
    if action is MenuAction.SEARCH_SOURCES:
        search_sources(session)
    elif action is MenuAction.SEARCH_TRANSLATIONS:
        search_translations(session)
    else:
        # TODO: Android XML import/build and the extract/import round trip
        console.print(f"TODO: Implement the action for: {action.value}")


def run_shell(session: Session, clear: bool = True) -> None:
    """Run the main menu loop until Exit is chosen.

    Args:
        session: Session owning the open store
        clear: Clear the terminal before showing the banner

    Raises:
        EOFError: If the input stream ends while prompting
        KeyboardInterrupt: If the user interrupts a prompt
    """
    if clear:
        console.clear()
    print_banner(session.settings.banner_text)
    print_store_statistics(session.tm.db_path, session.tm.get_statistics())

    while True:
        action = prompt_menu()
        if action is MenuAction.EXIT:
            break
        run_action(session, action)
