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


"""Translation Memory storage.

Provides a SQLite-backed store for:
- Base language source strings
- Translator comments
- Per-language translations
"""

from .exceptions import InvalidArgumentError, TranslationMemoryError
from .tm import (
    SourceMatch,
    StoreStatistics,
    SupportedLanguage,
    TranslationEntry,
    TranslationMatch,
    TranslationMemory,
)

__all__ = [
    "InvalidArgumentError",
    "SourceMatch",
    "StoreStatistics",
    "SupportedLanguage",
    "TranslationEntry",
    "TranslationMatch",
    "TranslationMemory",
    "TranslationMemoryError",
]
