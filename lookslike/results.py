"""
Result aggregation for lookslike.

Results holds every (Path, ValueResult) pair produced while matching, in the
order they were recorded. Merging only ever appends, so no pair is lost and
the overall validity does not depend on evaluation order.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .paths import Path
from .types import (
    KEY_MISSING_VR,
    STRICT_FAILURE_VR,
    VALID_VR,
    ValidationError,
    ValueResult,
)

if TYPE_CHECKING:
    from .report import MatchReport


class Results:
    """Path-annotated report of a check or a whole comparison."""

    __slots__ = ("_pairs",)

    def __init__(self, pairs: list[tuple[Path, ValueResult]] | None = None):
        self._pairs: list[tuple[Path, ValueResult]] = list(pairs or [])

    @property
    def valid(self) -> bool:
        """True iff every contained result is valid."""
        return all(vr.valid for _, vr in self._pairs)

    def record(self, path: Path, vr: ValueResult) -> Results:
        self._pairs.append((path, vr))
        return self

    def merge(self, other: Results) -> Results:
        """Append every pair of other to this Results."""
        self._pairs.extend(other._pairs)
        return self

    def merge_under_prefix(self, prefix: Path, other: Results) -> Results:
        """Append every pair of other, re-rooted underneath prefix."""
        self._pairs.extend((prefix.concat(path), vr) for path, vr in other._pairs)
        return self

    def __add__(self, other: Results) -> Results:
        if not isinstance(other, Results):
            return NotImplemented
        return Results(self._pairs + other._pairs)

    def __iter__(self) -> Iterator[tuple[Path, ValueResult]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Results):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"Results(valid={self.valid}, pairs={self._pairs!r})"

    @property
    def fields(self) -> dict[str, list[ValueResult]]:
        """Results grouped by rendered path. Duplicate paths keep every entry."""
        grouped: dict[str, list[ValueResult]] = {}
        for path, vr in self._pairs:
            grouped.setdefault(str(path), []).append(vr)
        return grouped

    def detailed_errors(self) -> Results:
        """A new Results holding only the invalid pairs."""
        return Results([(path, vr) for path, vr in self._pairs if not vr.valid])

    def errors(self) -> list[ValidationError]:
        """(path, message) for every invalid pair."""
        return [(str(path), vr.message) for path, vr in self._pairs if not vr.valid]

    def to_report(self) -> MatchReport:
        from .report import MatchReport

        return MatchReport.from_results(self)


def new_results() -> Results:
    return Results()


def single_result(path: Path, vr: ValueResult) -> Results:
    """Wrap one (path, ValueResult) pair into a Results."""
    return Results([(path, vr)])


def simple_result(path: Path, valid: bool, message: str) -> Results:
    return single_result(path, ValueResult(valid, message))


def valid_result(path: Path) -> Results:
    return single_result(path, VALID_VR)


def key_missing_result(path: Path) -> Results:
    """Emitted when a key was expected, but was not present."""
    return single_result(path, KEY_MISSING_VR)


def strict_failure_result(path: Path) -> Results:
    """Emitted under strict validation when an unexpected field is found."""
    return single_result(path, STRICT_FAILURE_VR)
