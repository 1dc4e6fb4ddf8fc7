"""
Test framework integration for lookslike.

Usage:
    from lookslike.testing import assert_matches

    def test_user(client):
        assert_matches({"id": IsType(int), "name": "alice"}, client.get_user())
"""

from __future__ import annotations

from typing import Any

from .context import matching_context
from .core import compile_schema
from .report import format_results
from .results import Results


def assert_matches(schema: Any, actual: Any, *, strict: bool | None = None) -> Results:
    """
    Match actual against schema and fail the test on any mismatch.

    Args:
        schema: Schema or compiled Validator
        actual: Value under test
        strict: True enables strict mode for this match; False or None leave
            the validator and context settings as they are

    Returns:
        The Results of the match, when valid

    Raises:
        AssertionError: listing every failing path
    """
    validator = compile_schema(schema)

    if strict:
        with matching_context(strict=True):
            results = validator(actual)
    else:
        results = validator(actual)

    if not results.valid:
        errors = results.detailed_errors()
        raise AssertionError(
            f"value did not match schema ({len(errors)} failures):\n"
            f"{format_results(errors)}"
        )
    return results
