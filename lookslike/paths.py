"""
Path type for lookslike results.

A Path locates a value inside a nested structure. Segments are either mapping
keys (str) or sequence indices (int).

Supports parsing of:
- Simple keys: "data.patient.id"
- Array indices: "items[0]"
- Leading indices: "[0].name"
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .types import Segment


@dataclass(frozen=True, slots=True)
class Path:
    """Immutable, hierarchical location inside a nested value."""

    segments: tuple[Segment, ...] = ()

    def extend(self, segment: Segment) -> Path:
        """Return a child path one segment deeper."""
        return Path((*self.segments, segment))

    def concat(self, other: Path) -> Path:
        """Return this path followed by every segment of other."""
        return Path((*self.segments, *other.segments))

    @property
    def parent(self) -> Path:
        return Path(self.segments[:-1])

    @property
    def last(self) -> Segment | None:
        return self.segments[-1] if self.segments else None

    @property
    def is_root(self) -> bool:
        return not self.segments

    def is_prefix_of(self, other: Path) -> bool:
        """True when other equals this path or lies underneath it."""
        n = len(self.segments)
        return other.segments[:n] == self.segments

    def get_from(self, value: Any) -> tuple[Any, bool]:
        """
        Look up this path inside value.

        Returns:
            (found_value, True) when every segment resolves
            (None, False) as soon as one does not
        """
        current = value
        for segment in self.segments:
            if isinstance(segment, str):
                if not isinstance(current, Mapping) or segment not in current:
                    return None, False
                current = current[segment]
            else:
                if not is_sequence(current):
                    return None, False
                if segment < 0 or segment >= len(current):
                    return None, False
                current = current[segment]
        return current, True

    def __str__(self) -> str:
        out = ""
        for segment in self.segments:
            if isinstance(segment, int):
                out += f"[{segment}]"
            elif out:
                out += f".{segment}"
            else:
                out = segment
        return out

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"


ROOT = Path()


def is_sequence(value: Any) -> bool:
    """Sequences that lookslike walks into; text and bytes are scalars."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


class PathParser:
    """Parser for dotted path strings."""

    KEY_PATTERN = re.compile(r"^[^.\[\]]+")
    INDEX_PATTERN = re.compile(r"^\[(\d+)\]")

    def parse(self, path_str: str) -> Path:
        """Parse a path string into a Path object. The empty string is the root."""
        segments: list[Segment] = []
        remaining = path_str

        while remaining:
            if match := self.INDEX_PATTERN.match(remaining):
                segments.append(int(match.group(1)))
            elif match := self.KEY_PATTERN.match(remaining):
                segments.append(match.group(0))
            else:
                raise ValueError(f"Invalid path syntax at: {remaining}")
            remaining = remaining[match.end() :]

            if remaining.startswith("."):
                remaining = remaining[1:]
                if not remaining or remaining[0] in ".[":
                    raise ValueError(f"Invalid path syntax: {path_str}")
            elif remaining and not remaining.startswith("["):
                # a key must be separated from a preceding index by "."
                raise ValueError(f"Invalid path syntax at: {remaining}")

        return Path(tuple(segments))


def parse_path(path_str: str) -> Path:
    """Convenience function to parse a path string."""
    parser = PathParser()
    return parser.parse(path_str)
