"""Unit tests for the supported language registry."""

import pytest

from transmem.utils.languages import BASE_LANGUAGE, LanguageRegistry, get_language_registry


@pytest.mark.unit
class TestLanguageRegistry:
    """Test LanguageRegistry lookups."""

    def test_base_language_is_supported(self) -> None:
        """Test the base language is the first table entry."""
        registry = LanguageRegistry()

        assert registry.get_language_codes()[0] == BASE_LANGUAGE
        assert registry.is_language_supported(BASE_LANGUAGE)

    def test_display_names(self) -> None:
        """Test display names of known and unknown codes."""
        registry = LanguageRegistry()

        assert registry.get_display_name("ja") == "Japanese"
        assert registry.get_display_name("zh_TW") == "Traditional Chinese"
        assert registry.get_display_name("xx") is None

    def test_all_languages_pairs(self) -> None:
        """Test get_all_languages() returns (display_name, code) tuples in order."""
        registry = LanguageRegistry()

        languages = registry.get_all_languages()

        assert languages[0] == ("English", "en")
        assert ("Simplified Chinese", "zh_CN") in languages
        assert len(languages) == 10

    def test_codes_are_unique(self) -> None:
        """Test no code appears twice in the table."""
        codes = LanguageRegistry().get_language_codes()

        assert len(codes) == len(set(codes))

    def test_global_registry_is_singleton(self) -> None:
        """Test get_language_registry() returns the same instance."""
        assert get_language_registry() is get_language_registry()
