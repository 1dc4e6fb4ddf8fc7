"""
Type definitions for lookslike.

Provides the ValueResult leaf outcome, its shared constants and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .paths import Path
    from .results import Results


@dataclass(frozen=True, slots=True)
class ValueResult:
    """Outcome of checking a single leaf value."""

    valid: bool
    message: str

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("ValueResult message must not be empty")


VALID_VR = ValueResult(True, "is valid")

# Emitted when a key was expected, but was not present.
KEY_MISSING_VR = ValueResult(False, "expected this key to be present")

# Emitted under strict validation when the actual value has a field the schema lacks.
STRICT_FAILURE_VR = ValueResult(
    False, "unexpected field encountered during strict validation"
)


# Type aliases
ValueValidator = Callable[["Path", Any], "Results"]
Segment = str | int
ValidationError = tuple[str, str]
