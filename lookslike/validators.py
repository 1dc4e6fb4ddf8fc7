"""
Built-in validators for lookslike.

Provides factory functions that return IsDef instances.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, Callable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .isdef import IsDef
from .paths import Path, is_sequence
from .results import Results, new_results, simple_result, valid_result


def _predicate(
    name: str, fn: Callable[[Any], bool], message: str, with_value: bool = False
) -> IsDef:
    """IsDef emitting one result: valid when fn(value) holds, else message."""

    def check(path: Path, value: Any) -> Results:
        if fn(value):
            return valid_result(path)
        if with_value:
            return simple_result(path, False, f"{message}, got {_short(value)}")
        return simple_result(path, False, message)

    return IsDef(name=name, checker=check)


def _short(value: Any) -> str:
    return repr(value)[:50]


def _to_isdef(schema: Any) -> IsDef:
    if isinstance(schema, IsDef):
        return schema

    from .core import compile_schema, nested_isdef

    return nested_isdef(compile_schema(schema))


def KeyPresent() -> IsDef:
    """Key must exist; any value is accepted, including None."""
    return IsDef(name="check key present")


def KeyMissing() -> IsDef:
    """Key must not exist."""
    return IsDef(name="check key not present", check_key_missing=True)


def Optional(schema: Any) -> IsDef:
    """
    Allow the key to be absent, validate if present.

    Usage:
        Optional(IsString())
        Optional({"nested": 1})
    """
    return replace(_to_isdef(schema), optional=True)


def IsAny() -> IsDef:
    """Any value is accepted as long as the key exists."""
    return IsDef(name="any")


def IsEqual(expected: Any) -> IsDef:
    """
    Validate equality. bool never equals a number, even though True == 1.

    Usage:
        IsEqual("foo")
        IsEqual({})
    """

    def check(path: Path, value: Any) -> Results:
        if value == expected and isinstance(value, bool) == isinstance(expected, bool):
            return valid_result(path)
        return simple_result(
            path,
            False,
            f"objects not equal: actual({_short(value)}) != expected({_short(expected)})",
        )

    return IsDef(name=f"equals {_short(expected)}", checker=check)


def IsNil() -> IsDef:
    return _predicate(
        "is nil", lambda x: x is None, "Expected None", with_value=True
    )


def IsType(t: type | tuple[type, ...]) -> IsDef:
    """
    Validate that value is an instance of type.

    Usage:
        IsType(int)
        IsType((int, float))
    """
    names = (
        " or ".join(x.__name__ for x in t) if isinstance(t, tuple) else t.__name__
    )

    def check(path: Path, value: Any) -> Results:
        if isinstance(value, t):
            return valid_result(path)
        return simple_result(
            path, False, f"Expected {names}, got {type(value).__name__}"
        )

    return IsDef(name=f"is {names}", checker=check)


def IsString() -> IsDef:
    return IsType(str)


def IsNonEmptyString() -> IsDef:
    return _predicate(
        "is non-empty string",
        lambda x: isinstance(x, str) and len(x) > 0,
        "Expected non-empty string",
        with_value=True,
    )


def IsStringMatching(pattern: str | re.Pattern[str]) -> IsDef:
    """
    Validate string matches regex pattern anywhere in the value.

    Usage:
        IsStringMatching(r"^[a-z]+$")
        IsStringMatching(r"\\d{3}-\\d{4}")
    """
    compiled = re.compile(pattern)
    return _predicate(
        "is string matching",
        lambda x: isinstance(x, str) and compiled.search(x) is not None,
        f"Must match pattern: {compiled.pattern}",
    )


def IsStringContaining(needle: str) -> IsDef:
    return _predicate(
        "is string containing",
        lambda x: isinstance(x, str) and needle in x,
        f"Must contain {needle!r}",
    )


def IsIn(values: set | frozenset | list | tuple) -> IsDef:
    """
    Validate value is one of a fixed collection of allowed values.

    Usage:
        IsIn({"active", "inactive", "pending"})
        IsIn([1, 2, 3])
    """
    container = list(values)
    if isinstance(values, (set, frozenset)):
        # hash order varies between runs
        container.sort(key=repr)
    return _predicate(
        "is in",
        lambda x: x in container,
        f"Must be one of: {container}",
    )


def _compare(name: str, fn: Callable[[Any], bool], message: str) -> IsDef:
    def safe(x: Any) -> bool:
        if isinstance(x, bool):
            return False
        try:
            return fn(x)
        except TypeError:
            return False

    return _predicate(name, safe, message, with_value=True)


def Gt(bound: Any) -> IsDef:
    """Validate greater than."""
    return _compare(f"> {bound}", lambda x: x > bound, f"Must be > {bound}")


def Gte(bound: Any) -> IsDef:
    """Validate greater than or equal."""
    return _compare(f">= {bound}", lambda x: x >= bound, f"Must be >= {bound}")


def Lt(bound: Any) -> IsDef:
    """Validate less than."""
    return _compare(f"< {bound}", lambda x: x < bound, f"Must be < {bound}")


def Lte(bound: Any) -> IsDef:
    """Validate less than or equal."""
    return _compare(f"<= {bound}", lambda x: x <= bound, f"Must be <= {bound}")


def Between(lower: Any, upper: Any, inclusive: bool = True) -> IsDef:
    """Validate value is between bounds."""
    if lower > upper:
        raise ValueError(f"Lower bound {lower} is greater than upper bound {upper}")

    if inclusive:
        return _compare(
            f"between {lower} and {upper}",
            lambda x: lower <= x <= upper,
            f"Must be between {lower} and {upper}",
        )

    return _compare(
        f"between {lower} and {upper} (exclusive)",
        lambda x: lower < x < upper,
        f"Must be between {lower} and {upper} (exclusive)",
    )


def Predicate(fn: Callable[[Any], bool], message: str | None = None) -> IsDef:
    """
    Create validator from arbitrary predicate function.

    Exceptions raised by fn are reported as a failed result.

    Usage:
        Predicate(lambda x: x > 0, "Must be positive")
        Predicate(str.isalpha, "Must be alphabetic")
    """

    def check(path: Path, value: Any) -> Results:
        try:
            passed = fn(value)
        except Exception as e:
            return simple_result(path, False, f"Validation error: {e}")
        if passed:
            return valid_result(path)
        return simple_result(
            path, False, message or f"Validation failed for value: {_short(value)}"
        )

    return IsDef(name=getattr(fn, "__name__", "predicate"), checker=check)


def IsArrayOf(schema: Any) -> IsDef:
    """
    Validate every item of a list against the same schema.

    Usage:
        IsArrayOf(IsString())
        IsArrayOf({"id": IsType(int)})
    """
    item_def = _to_isdef(schema)

    def check(path: Path, value: Any) -> Results:
        if not is_sequence(value):
            return simple_result(
                path, False, f"Expected list, got {type(value).__name__}"
            )
        if len(value) == 0:
            return valid_result(path)

        results = new_results()
        for i, item in enumerate(value):
            results.merge(item_def.check(path.extend(i), item, True))
        return results

    return IsDef(name="is array of", checker=check)


def IsModel(model: type[BaseModel]) -> IsDef:
    """
    Validate value against a Pydantic model.

    Each Pydantic error is reported at its own nested path.

    Usage:
        class User(BaseModel):
            name: str

        IsModel(User)
    """
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise TypeError(f"IsModel() requires a BaseModel subclass, got {model!r}")

    def check(path: Path, value: Any) -> Results:
        try:
            model.model_validate(value)
        except PydanticValidationError as e:
            results = new_results()
            for err in e.errors():
                loc = Path(tuple(err["loc"]))
                results.merge(simple_result(path.concat(loc), False, err["msg"]))
            return results
        return valid_result(path)

    return IsDef(name=f"is {model.__name__}", checker=check)


def AllOf(*schemas: Any) -> IsDef:
    """
    Value must satisfy every validator; all of their results are kept.

    Usage:
        AllOf(IsString(), IsStringContaining("@"))
    """
    if not schemas:
        raise ValueError("AllOf() requires at least one validator")
    defs = [_to_isdef(s) for s in schemas]

    def check(path: Path, value: Any) -> Results:
        results = new_results()
        for d in defs:
            results.merge(d.check(path, value, True))
        return results

    return IsDef(name="all of", checker=check)


def AnyOf(*schemas: Any) -> IsDef:
    """
    Value must satisfy at least one validator.

    The first passing validator's results are returned.

    Usage:
        AnyOf(IsString(), IsNil())
    """
    if not schemas:
        raise ValueError("AnyOf() requires at least one validator")
    defs = [_to_isdef(s) for s in schemas]
    names = ", ".join(d.name or "<unnamed>" for d in defs)

    def check(path: Path, value: Any) -> Results:
        for d in defs:
            results = d.check(path, value, True)
            if results.valid:
                return results
        return simple_result(
            path, False, f"value {_short(value)} matched none of: {names}"
        )

    return IsDef(name="any of", checker=check)
