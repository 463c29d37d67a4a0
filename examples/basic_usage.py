"""Basic usage example for transmem.

This example shows how to:
1. Open a translation memory file
2. Add source strings with translator comments
3. Add translations
4. Search sources and print their translations
"""

from transmem import TranslationMemory


def main() -> None:
    """Fill a small translation memory and search it."""
    # 1. Open (or create) the store
    with TranslationMemory("example-translations.sqlitedb") as tm:
        # 2. Add source strings
        hello = tm.add_source("Hello World", ["Greeting on the start screen"])
        save = tm.add_source("Save", ["Button label", "Keep it short"])

        # 3. Add translations
        tm.add_translation(hello, "es", "Hola Mundo")
        tm.add_translation(hello, "de", "Hallo Welt")
        tm.add_translation(save, "es", "Guardar")

        # 4. Search
        print("Sources matching 'o W':")
        for match in tm.search_sources("o W"):
            print(f"  {match.source}")

        print("\nTranslations of sources ending in 'World':")
        for result in tm.search_translations("%World"):
            print(f"Source: {result.source}")
            for entry in result.translations:
                print(f"  {entry.language_code}: {entry.text}")

        print(f"\nLanguages in memory: {', '.join(tm.existing_language_codes())}")
        print(f"Comments for 'Save': {tm.comments_for_source('Save')}")


if __name__ == "__main__":
    main()
