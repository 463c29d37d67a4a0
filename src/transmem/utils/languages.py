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


"""Supported language registry.

Static table of the languages translations are usually collected for.
The table is informational: the store accepts any language code.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Base language of all source strings
BASE_LANGUAGE = "en"


class LanguageRegistry:
    """Registry of supported translation languages.

    Example:
        >>> registry = LanguageRegistry()
        >>> registry.get_display_name("es")
        'Spanish'
        >>> registry.is_language_supported("xx")
        False
    """

    # Ordered as shown to translators
    SUPPORTED_LANGUAGES: dict[str, str] = {
        "en": "English",
        "es": "Spanish",
        "de": "German",
        "fr": "French",
        "it": "Italian",
        "ja": "Japanese",
        "pt": "Portuguese",
        "ru": "Russian",
        "zh_CN": "Simplified Chinese",
        "zh_TW": "Traditional Chinese",
    }

    def is_language_supported(self, lang_code: str) -> bool:
        """Check if language code is in the table.

        Args:
            lang_code: Language code (e.g., 'es', 'zh_CN')

        Returns:
            True if language is in registry
        """
        return lang_code in self.SUPPORTED_LANGUAGES

    def get_display_name(self, lang_code: str) -> str | None:
        """Get human-readable name for a language code."""
        return self.SUPPORTED_LANGUAGES.get(lang_code)

    def get_all_languages(self) -> list[tuple[str, str]]:
        """Get all supported languages.

        Returns:
            List of (display_name, code) tuples in table order
        """
        return [(name, code) for code, name in self.SUPPORTED_LANGUAGES.items()]

    def get_language_codes(self) -> list[str]:
        """Get supported language codes in table order."""
        return list(self.SUPPORTED_LANGUAGES)


# Global registry instance
_registry: LanguageRegistry | None = None


def get_language_registry() -> LanguageRegistry:
    """Get global LanguageRegistry instance.

    Returns:
        Singleton LanguageRegistry instance
    """
    global _registry
    if _registry is None:
        _registry = LanguageRegistry()
    return _registry
