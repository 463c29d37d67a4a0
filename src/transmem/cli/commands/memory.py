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


"""Translation Memory CLI commands.

Non-interactive access to the store: searching, adding sources and
translations, and listing languages.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from transmem.cli.shell import Session, run_shell
from transmem.cli.ui import (
    console,
    print_comments,
    print_error,
    print_languages,
    print_source_results,
    print_store_statistics,
    print_success,
    print_translation_results,
    print_warning,
)
from transmem.memory import TranslationMemory
from transmem.utils.config import get_settings
from transmem.utils.languages import get_language_registry

# Help text constants
DB_OPTION_HELP = "Translation memory file (default: TRANSMEM_DB_PATH)"


def open_memory(db: Path | None = None) -> TranslationMemory:
    """Create a store for *db*, falling back to the configured path.

    The returned store is not yet open; use it as a context manager.
    """
    settings = get_settings()
    return TranslationMemory(db or settings.db_path, base_language=settings.base_language)


def shell(
    db: Path | None = typer.Option(None, "--db", help=DB_OPTION_HELP),
    no_clear: bool = typer.Option(False, "--no-clear", help="Do not clear the screen on start"),
) -> None:
    """Start the interactive menu.

    Example:
        transmem shell
        transmem shell --db ~/translations/app.sqlitedb
    """
    try:
        with open_memory(db) as tm:
            run_shell(Session(tm=tm, settings=get_settings()), clear=not no_clear)
        exit_code = 0
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠ Interrupted by user[/yellow]")
        exit_code = 130
    except EOFError:
        print_error("Input stream closed")
        exit_code = 1
    except Exception as e:
        print_error(escape(str(e)))
        exit_code = 1

    if exit_code:
        raise typer.Exit(code=exit_code)


def search(
    term: str = typer.Argument(..., help="Search term; include % to control wildcards"),
    translations: bool = typer.Option(
        False, "--translations", "-t", help="Show the translations of each match"
    ),
    db: Path | None = typer.Option(None, "--db", help=DB_OPTION_HELP),
) -> None:
    """Search source strings.

    Terms without % match anywhere in the source. Terms containing %
    are used as given, e.g. "Hello%" for prefix matches.

    Example:
        transmem search Hello
        transmem search "%World" --translations
    """
    term = term.strip()
    if not term:
        print_warning("Empty search term, nothing to do")
        return

    try:
        with open_memory(db) as tm:
            if translations:
                print_translation_results(tm.search_translations(term))
            else:
                print_source_results(tm.search_sources(term))
    except Exception as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1)


def add_source(
    text: str = typer.Argument(..., help="Base language (English) source string"),
    comments: list[str] | None = typer.Option(
        None, "--comment", "-c", help="Comment for translators (can be specified multiple times)"
    ),
    db: Path | None = typer.Option(None, "--db", help=DB_OPTION_HELP),
) -> None:
    """Add a source string and print its identifier.

    Adding a string that already exists attaches the comments to it.

    Example:
        transmem add-source "Hello World" -c "Start screen greeting"
    """
    try:
        with open_memory(db) as tm:
            guid = tm.add_source(text, comments or [])
    except Exception as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1)

    console.print(guid, markup=False, highlight=False)


def add_translation(
    source_id: str = typer.Argument(..., help="Source identifier"),
    language_code: str = typer.Argument(..., help="Language code (e.g., es)"),
    text: str = typer.Argument(..., help="Translated text"),
    db: Path | None = typer.Option(None, "--db", help=DB_OPTION_HELP),
) -> None:
    """Add or replace the translation of a source string.

    Example:
        transmem add-translation 1b4e28ba-2fa1-11d2-883f-0016d3cca427 es "Hola Mundo"
    """
    try:
        with open_memory(db) as tm:
            added = tm.add_translation(source_id, language_code, text)
    except Exception as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1)

    if not added:
        print_error(f"Source not found: {escape(source_id)}")
        raise typer.Exit(code=1)

    if not get_language_registry().is_language_supported(language_code):
        print_warning(f"'{escape(language_code)}' is not a supported language code")
    print_success(f"Saved {escape(language_code)} translation")


def comments(
    text: str = typer.Argument(..., help="Base language source string"),
    db: Path | None = typer.Option(None, "--db", help=DB_OPTION_HELP),
) -> None:
    """Show the comments of a source string.

    Example:
        transmem comments "Hello World"
    """
    try:
        with open_memory(db) as tm:
            found = tm.comments_for_source(text)
    except Exception as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1)

    print_comments(text, found)
    if found is None:
        raise typer.Exit(code=1)


def languages(
    existing: bool = typer.Option(
        False, "--existing", "-e", help="Only list language codes present in the memory"
    ),
    db: Path | None = typer.Option(None, "--db", help=DB_OPTION_HELP),
) -> None:
    """List supported languages.

    Example:
        transmem languages
        transmem languages --existing
    """
    try:
        with open_memory(db) as tm:
            codes = tm.existing_language_codes()
            supported = tm.supported_languages()
    except Exception as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1)

    if existing:
        for code in codes:
            console.print(code, markup=False, highlight=False)
        return

    print_languages(supported, codes)


def stats(
    db: Path | None = typer.Option(None, "--db", help=DB_OPTION_HELP),
) -> None:
    """Show record counts of the translation memory."""
    try:
        with open_memory(db) as tm:
            statistics = tm.get_statistics()
            db_path = tm.db_path
    except Exception as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1)

    print_store_statistics(db_path, statistics)
