"""
Matching configuration.

Strict mode can be switched on for a block of code instead of per validator.
Only the outermost Validator call reads it.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_STRICT: ContextVar[bool] = ContextVar("lookslike_strict", default=False)


def is_strict() -> bool:
    return _STRICT.get()


@contextmanager
def matching_context(*, strict: bool = False) -> Iterator[None]:
    """
    Apply matching settings to every validator called inside the block.

    Usage:
        v = compile_schema({"a": 1})
        v({"a": 1, "b": 2}).valid          # True

        with matching_context(strict=True):
            v({"a": 1, "b": 2}).errors()   # [("b", "unexpected field ...")]
    """
    token = _STRICT.set(strict)
    try:
        yield
    finally:
        _STRICT.reset(token)
