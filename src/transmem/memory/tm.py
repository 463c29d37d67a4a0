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


"""Translation Memory backed by a local SQLite file.

Stores three kinds of records:
- Sources: base language (English) strings, unique by text
- Comments: translator-facing notes attached to a source
- Translations: one rendering per source and language code

Search is plain substring matching with SQL ``LIKE`` patterns.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from collections.abc import Sequence
from pathlib import Path
from types import TracebackType
from typing import Any

from pydantic import BaseModel, Field

from transmem.memory.exceptions import InvalidArgumentError
from transmem.utils.languages import BASE_LANGUAGE, get_language_registry

logger = logging.getLogger(__name__)

# Error message constant
ERR_TM_NOT_OPEN = "Translation Memory not open"

# Marker that switches search terms from substring to verbatim patterns
WILDCARD = "%"

DEFAULT_DB_FILENAME = "appigo-translations.sqlitedb"


class SourceMatch(BaseModel):
    """Source string matched by a search."""

    id: str = Field(..., description="Source identifier")
    source: str = Field(..., description="Base language source text")


class TranslationEntry(BaseModel):
    """Translation of a source string into one language."""

    language_code: str = Field(..., description="Language code (e.g., 'es')")
    text: str = Field(..., description="Translated text")


class TranslationMatch(BaseModel):
    """Source string matched by a search, with all of its translations.

    A matched source without translations has an empty ``translations`` list.
    """

    id: str = Field(..., description="Source identifier")
    source: str = Field(..., description="Base language source text")
    translations: list[TranslationEntry] = Field(
        default_factory=list, description="Translations ordered by language code"
    )


class SupportedLanguage(BaseModel):
    """Entry of the supported language table."""

    display_name: str = Field(..., description="Human-readable language name")
    code: str = Field(..., description="Language code")


class StoreStatistics(BaseModel):
    """Record counts of a Translation Memory."""

    sources: int = Field(default=0, ge=0, description="Number of source strings")
    comments: int = Field(default=0, ge=0, description="Number of comments")
    translations: int = Field(default=0, ge=0, description="Number of translations")
    languages: list[str] = Field(
        default_factory=list, description="Language codes with at least one translation"
    )


def _require(operation: str, **arguments: Any) -> None:
    """Raise InvalidArgumentError naming every argument that is None."""
    missing = [name for name, value in arguments.items() if value is None]
    if missing:
        logger.error(f"TranslationMemory.{operation}() called with None {', '.join(missing)}")
        raise InvalidArgumentError(operation, *missing)


class TranslationMemory:
    """Translation Memory over a single SQLite file.

    Source identifiers are random UUID4 strings assigned once, when a
    source text is first added.

    Not-found outcomes are return values: lookups return None or an
    empty list, and add_comment/add_translation return False. Passing
    None for a required argument raises InvalidArgumentError (a
    ValueError) before the database is touched.
    Calling any operation on a store that is not open raises RuntimeError.

    Example:
        >>> with TranslationMemory("translations.sqlitedb") as tm:
        ...     guid = tm.add_source("Hello World", ["Greeting on the start screen"])
        ...     tm.add_translation(guid, "es", "Hola Mundo")
        ...     for match in tm.search_translations("Hello"):
        ...         print(match.source, [t.text for t in match.translations])
    """

    def __init__(
        self,
        db_path: str | Path = DEFAULT_DB_FILENAME,
        base_language: str = BASE_LANGUAGE,
    ):
        """Initialize Translation Memory.

        Args:
            db_path: Path to SQLite database file
            base_language: Language code reported when no translations exist
        """
        self.db_path = Path(db_path).expanduser()
        self.base_language = base_language
        self.db: sqlite3.Connection | None = None

    # ── Lifecycle ─────────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        """Whether the database connection is open."""
        return self.db is not None

    def open(self) -> None:
        """Open the database file, creating it and its tables if absent.

        Safe to call on every startup and on an already open store.

        Raises:
            RuntimeError: If the database cannot be opened
        """
        if self.db is not None:
            return

        logger.info(f"Loading translation memory from: {self.db_path}")
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self.db = sqlite3.connect(str(self.db_path))
            self.db.row_factory = sqlite3.Row
            self._create_schema()
        except (OSError, sqlite3.Error) as e:
            self.close()
            raise RuntimeError(f"Failed to open Translation Memory: {e}") from e

        stats = self.get_statistics()
        logger.info(
            f"Translation Memory opened: {stats.sources} sources, "
            f"{stats.comments} comments, {stats.translations} translations"
        )

    def close(self) -> None:
        """Close the database connection. No-op when not open."""
        if self.db is not None:
            self.db.close()
            self.db = None
            logger.info("Translation Memory closed")

    def __enter__(self) -> TranslationMemory:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        """Cleanup on object destruction."""
        if getattr(self, "db", None) is not None:
            self.db.close()  # type: ignore[union-attr]

    def _connection(self) -> sqlite3.Connection:
        if self.db is None:
            raise RuntimeError(f"{ERR_TM_NOT_OPEN}. Call open() first.")
        return self.db

    def _create_schema(self) -> None:
        """Create database schema."""
        db = self._connection()

        db.execute("CREATE TABLE IF NOT EXISTS sources (guid TEXT PRIMARY KEY, source TEXT)")
        db.execute(
            "CREATE TABLE IF NOT EXISTS comments (guid TEXT, source_guid TEXT, comment TEXT)"
        )
        db.execute(
            """
            CREATE TABLE IF NOT EXISTS translations (
                source_guid TEXT,
                lang TEXT,
                translation TEXT,
                PRIMARY KEY(source_guid, lang)
            )
        """
        )
        db.commit()

    # ── Sources ───────────────────────────────────────────────────────────

    def add_source(self, text: str, comments: Sequence[str]) -> str:
        """Add a base language source string.

        If the text already exists, the comments are attached to the
        existing source and its identifier is returned.

        Args:
            text: Base language (English) source string
            comments: Notes giving translators context about the string

        Returns:
            Identifier of the new or existing source

        Raises:
            InvalidArgumentError: If text or comments is None
        """
        _require("add_source", text=text, comments=comments)
        db = self._connection()

        existing_guid = self.guid_for_source(text)
        if existing_guid is not None:
            self.add_comments(existing_guid, comments)
            return existing_guid

        guid = str(uuid.uuid4())
        # Source and comments are committed separately
        db.execute("INSERT INTO sources (guid, source) VALUES (?, ?)", (guid, text))
        db.commit()
        logger.debug(f"Added source {guid}: {text[:50]}")

        self.add_comments(guid, comments)
        return guid

    def guid_for_source(self, text: str) -> str | None:
        """Get the identifier of a source string.

        Returns:
            Identifier, or None if the text is not in the store
        """
        _require("guid_for_source", text=text)
        row = (
            self._connection()
            .execute("SELECT guid FROM sources WHERE source = ?", (text,))
            .fetchone()
        )
        return row["guid"] if row else None

    def source_for_guid(self, source_id: str) -> str | None:
        """Get the source string for an identifier.

        Returns:
            Source text, or None if the identifier is unknown
        """
        _require("source_for_guid", source_id=source_id)
        row = (
            self._connection()
            .execute("SELECT source FROM sources WHERE guid = ?", (source_id,))
            .fetchone()
        )
        return row["source"] if row else None

    # ── Comments ──────────────────────────────────────────────────────────

    def comments_for_source(self, text: str) -> list[str] | None:
        """Get the comments of a source string.

        Returns:
            Comments in insertion order, or None if the text is unknown
        """
        _require("comments_for_source", text=text)

        guid = self.guid_for_source(text)
        if guid is None:
            logger.info(f"Source string not found: {text[:50]}")
            return None

        return self.comments_for_source_guid(guid)

    def comments_for_source_guid(self, source_id: str) -> list[str]:
        """Get the comments attached to a source identifier.

        Returns:
            Comments in insertion order; empty for unknown identifiers
        """
        _require("comments_for_source_guid", source_id=source_id)
        cursor = self._connection().execute(
            "SELECT comment FROM comments WHERE source_guid = ? ORDER BY rowid", (source_id,)
        )
        return [row["comment"] for row in cursor]

    def add_comments(self, source_id: str, comments: Sequence[str]) -> bool:
        """Add several comments to a source.

        Each comment is added on its own; a failure part way through
        leaves the earlier comments in place.

        Returns:
            True if every comment was added (or already present)
        """
        _require("add_comments", source_id=source_id, comments=comments)
        results = [self.add_comment(source_id, comment) for comment in comments]
        return all(results)

    def add_comment(self, source_id: str, text: str) -> bool:
        """Add a comment to a source.

        Adding a comment the source already has is a no-op (exact,
        case-sensitive match).

        Returns:
            True on success, False if the source identifier is unknown
        """
        _require("add_comment", source_id=source_id, text=text)
        db = self._connection()

        if self.source_for_guid(source_id) is None:
            logger.error(f"Could not find source for identifier: {source_id}")
            return False

        duplicate = db.execute(
            "SELECT 1 FROM comments WHERE source_guid = ? AND comment = ?", (source_id, text)
        ).fetchone()
        if duplicate:
            return True

        db.execute(
            "INSERT INTO comments (guid, source_guid, comment) VALUES (?, ?, ?)",
            (str(uuid.uuid4()), source_id, text),
        )
        db.commit()
        return True

    # ── Translations ──────────────────────────────────────────────────────

    def translation(self, source_id: str, language_code: str) -> str | None:
        """Get the translation of a source in one language.

        Returns:
            Translated text, or None if there is no translation
        """
        _require("translation", source_id=source_id, language_code=language_code)
        row = (
            self._connection()
            .execute(
                "SELECT translation FROM translations WHERE source_guid = ? AND lang = ?",
                (source_id, language_code),
            )
            .fetchone()
        )
        return row["translation"] if row else None

    def add_translation(self, source_id: str, language_code: str, text: str) -> bool:
        """Add or replace the translation of a source in one language.

        The language code is not checked against the supported languages.

        Returns:
            True on success, False if the source identifier is unknown
        """
        _require("add_translation", source_id=source_id, language_code=language_code, text=text)
        db = self._connection()

        if self.source_for_guid(source_id) is None:
            logger.error(f"Could not find source for identifier: {source_id}")
            return False

        existing = self.translation(source_id, language_code)
        if existing is not None:
            if existing != text:
                return self.update_translation(source_id, language_code, text)
            return True

        db.execute(
            "INSERT INTO translations (source_guid, lang, translation) VALUES (?, ?, ?)",
            (source_id, language_code, text),
        )
        db.commit()
        return True

    def update_translation(self, source_id: str, language_code: str, new_text: str) -> bool:
        """Overwrite the stored translation for (source_id, language_code)."""
        _require(
            "update_translation",
            source_id=source_id,
            language_code=language_code,
            new_text=new_text,
        )
        db = self._connection()
        db.execute(
            "UPDATE translations SET translation = ? WHERE source_guid = ? AND lang = ?",
            (new_text, source_id, language_code),
        )
        db.commit()
        return True

    # ── Search ────────────────────────────────────────────────────────────

    def search_sources(self, term: str) -> list[SourceMatch]:
        """Search source strings.

        A term without ``%`` matches anywhere in the source text. A term
        containing ``%`` is used as the LIKE pattern as given, so callers
        can match prefixes (``Hello%``) or suffixes (``%World``). A literal
        ``%`` cannot be searched for.

        Args:
            term: Search term

        Returns:
            Matching sources, in storage order
        """
        _require("search_sources", term=term)

        pattern = term if WILDCARD in term else f"{WILDCARD}{term}{WILDCARD}"
        cursor = self._connection().execute(
            "SELECT guid, source FROM sources WHERE source LIKE ?", (pattern,)
        )
        return [SourceMatch(id=row["guid"], source=row["source"]) for row in cursor]

    def search_translations(self, term: str) -> list[TranslationMatch]:
        """Search source strings and collect their translations.

        Uses the same matching rules as search_sources().
        """
        _require("search_translations", term=term)
        db = self._connection()

        results: list[TranslationMatch] = []
        for match in self.search_sources(term):
            cursor = db.execute(
                "SELECT lang, translation FROM translations WHERE source_guid = ? ORDER BY lang",
                (match.id,),
            )
            translations = [
                TranslationEntry(language_code=row["lang"], text=row["translation"])
                for row in cursor
            ]
            results.append(
                TranslationMatch(id=match.id, source=match.source, translations=translations)
            )

        return results

    # ── Languages ─────────────────────────────────────────────────────────

    def existing_language_codes(self) -> list[str]:
        """Get the language codes that have translations, sorted.

        Returns the base language alone when there are no translations.
        """
        cursor = self._connection().execute(
            "SELECT DISTINCT lang FROM translations ORDER BY lang"
        )
        codes = [row["lang"] for row in cursor]
        return codes or [self.base_language]

    def supported_languages(self) -> list[SupportedLanguage]:
        """Get the table of supported languages."""
        return [
            SupportedLanguage(display_name=name, code=code)
            for name, code in get_language_registry().get_all_languages()
        ]

    def get_statistics(self) -> StoreStatistics:
        """Get record counts of the store."""
        db = self._connection()

        def _count(table: str) -> int:
            return int(db.execute(f"SELECT COUNT(*) AS count FROM {table}").fetchone()["count"])

        languages = [
            row["lang"] for row in db.execute("SELECT DISTINCT lang FROM translations ORDER BY lang")
        ]
        return StoreStatistics(
            sources=_count("sources"),
            comments=_count("comments"),
            translations=_count("translations"),
            languages=languages,
        )
