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


"""Exception hierarchy for the translation memory store."""

from __future__ import annotations

__all__ = ["TranslationMemoryError", "InvalidArgumentError"]


class TranslationMemoryError(Exception):
    """Root exception for all transmem errors."""


class InvalidArgumentError(TranslationMemoryError, ValueError):
    """Raised when a required argument is missing (None).

    Raised at call entry, before any statement runs, so the store is
    never left partially modified.
    """

    def __init__(self, operation: str, *arguments: str) -> None:
        self.operation = operation
        self.arguments = arguments
        names = ", ".join(arguments)
        super().__init__(f"TranslationMemory.{operation}() called with None {names}")
