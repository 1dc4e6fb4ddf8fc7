"""
The leaf check protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .paths import Path
from .results import Results, key_missing_result, simple_result, valid_result
from .types import ValueValidator


@dataclass(frozen=True, slots=True)
class IsDef:
    """
    Immutable rule for one position in a schema.

    Generally only name and checker are set. optional and check_key_missing
    are needed for key presence checks; when check_key_missing is set,
    optional and checker are ignored. The checker only ever sees values whose
    key exists.
    """

    name: str = ""
    checker: ValueValidator | None = None
    optional: bool = False
    check_key_missing: bool = False

    def check(self, path: Path, value: Any, key_exists: bool) -> Results:
        """Run this rule against the value found (or not found) at path."""
        if self.check_key_missing:
            if not key_exists:
                return valid_result(path)
            return simple_result(path, False, "this key should not exist")

        if not key_exists:
            if self.optional:
                return valid_result(path)
            return key_missing_result(path)

        if self.checker is not None:
            return self.checker(path, value)

        return valid_result(path)
