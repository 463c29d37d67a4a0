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


"""
transmem - Translation Memory for app strings

Keeps base language (English) source strings, translator comments, and
per-language translations in a single SQLite file, with an interactive
terminal menu for searching them.
"""

__version__ = "0.2.0"

from transmem.memory import (
    InvalidArgumentError,
    SourceMatch,
    TranslationMatch,
    TranslationMemory,
    TranslationMemoryError,
)

__all__ = [
    "InvalidArgumentError",
    "SourceMatch",
    "TranslationMatch",
    "TranslationMemory",
    "TranslationMemoryError",
    "__version__",
]
