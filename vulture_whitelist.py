# Vulture whitelist - False positives for vulture dead code detection
#
# These are not dead code - they are:
# 1. Typer callback parameters (used by framework)
# 2. Pydantic settings and validators (used by pydantic)

# Typer callback parameters - used by Typer framework for CLI options
version  # main.py - Typer callback parameter

# Pydantic validator - called during Settings validation
_validate_log_level  # config.py - field_validator

# Context manager protocol
__exit__  # tm.py - TranslationMemory context manager
