"""
Report models for lookslike results.

Turns a Results aggregate into Pydantic models for machine-readable output,
and into plain text for assertion messages.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .results import Results

ROOT_LABEL = "(root)"


class ResultEntry(BaseModel):
    """One (path, outcome) pair with the path already rendered."""

    model_config = ConfigDict(frozen=True)

    path: str
    valid: bool
    message: str


class MatchReport(BaseModel):
    """Every outcome of a match, in recorded order."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    entries: list[ResultEntry]

    @classmethod
    def from_results(cls, results: Results) -> MatchReport:
        entries = [
            ResultEntry(path=str(path), valid=vr.valid, message=vr.message)
            for path, vr in results
        ]
        return cls(valid=results.valid, entries=entries)

    def failures(self) -> list[ResultEntry]:
        return [e for e in self.entries if not e.valid]


def format_results(results: Results) -> str:
    """
    Render every failing pair as "path: message", one per line.

    Returns an empty string when results are valid.
    """
    lines = []
    for path, vr in results.detailed_errors():
        lines.append(f"{str(path) or ROOT_LABEL}: {vr.message}")
    return "\n".join(lines)
