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


"""Rich UI components for CLI output.

Rendering of banners, statistics, and search results shared by the
interactive shell and the sub-commands.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from transmem.memory import SourceMatch, TranslationMatch
from transmem.memory.tm import StoreStatistics, SupportedLanguage

# Import and re-export console utilities
from transmem.utils.console import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "print_banner",
    "print_store_statistics",
    "print_source_results",
    "print_translation_results",
    "print_comments",
    "print_languages",
]

# Style constants
STYLE_BANNER = "bold bright_blue"
STYLE_SOURCE = "bold"
SEARCH_RESULTS_TITLE = "Search Results:"


def print_banner(title: str) -> None:
    """Print the application banner.

    Args:
        title: Banner text
    """
    banner = Text(title.upper(), style=STYLE_BANNER, justify="center")
    console.print(Panel(banner, border_style="bright_blue", padding=(1, 4)))


def print_store_statistics(db_path: str | Path, stats: StoreStatistics) -> None:
    """Print where the store was loaded from and its record counts."""
    print_info(f"Loading translation memory from: {escape(str(db_path))}")
    print_info("Database Statistics:")
    print_info(f"\tNumber of sources: {stats.sources}")
    print_info(f"\tNumber of comments: {stats.comments}")
    print_info(f"\tNumber of translations: {stats.translations}")
    if stats.languages:
        print_info(f"\tLanguages: {escape(', '.join(stats.languages))}")


def print_source_results(matches: list[SourceMatch]) -> None:
    """Print matched source strings, one per line."""
    console.print(SEARCH_RESULTS_TITLE)
    for match in matches:
        console.print(match.source, markup=False, highlight=False)


def print_translation_results(matches: list[TranslationMatch]) -> None:
    """Print matched sources followed by their translations."""
    console.print(SEARCH_RESULTS_TITLE)
    for match in matches:
        console.print()
        console.print(Text(f"Source: {match.source}", style=STYLE_SOURCE))
        console.print("Translations:")
        for entry in match.translations:
            console.print(f"{entry.language_code}: {entry.text}", markup=False, highlight=False)


def print_comments(source: str, comments: list[str] | None) -> None:
    """Print the comments of a source string."""
    if comments is None:
        print_warning(f"Source string not found: {escape(source)}")
        return

    if not comments:
        console.print("[dim]No comments[/dim]")
        return

    for comment in comments:
        console.print(f"  • {comment}", markup=False, highlight=False)


def print_languages(languages: list[SupportedLanguage], existing: list[str]) -> None:
    """Print the supported language table, marking codes already translated.

    Args:
        languages: Supported languages
        existing: Language codes present in the store
    """
    table = Table(title="Supported Languages", show_lines=False)
    table.add_column("Language", style="cyan", no_wrap=True)
    table.add_column("Code", style="green")
    table.add_column("In memory", justify="center")

    for language in languages:
        marker = "[green]✓[/green]" if language.code in existing else ""
        table.add_row(language.display_name, language.code, marker)

    console.print(table)
