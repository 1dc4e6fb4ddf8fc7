"""
Schema compilation and matching for lookslike.

A schema is a nested dict/list whose leaves are literals or IsDef nodes.
compile_schema() flattens it into (Path, IsDef) pairs; the resulting Validator
looks each path up in the actual value and runs the IsDef there.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any

from .context import is_strict
from .isdef import IsDef
from .paths import ROOT, Path, is_sequence
from .results import Results, new_results, strict_failure_result
from .validators import IsEqual

logger = logging.getLogger(__name__)

SchemaPairs = tuple[tuple[Path, IsDef], ...]


@dataclass(frozen=True, slots=True)
class Validator:
    """
    Compiled schema.

    Calling it with an actual value returns the Results of every check. When
    strict (or inside matching_context(strict=True)) every node of the actual
    value that no result touches is reported as a failure too. Strictness is
    decided by the outermost call and applies to the whole tree; validators
    nested inside it only add their own explicit strict flag.
    """

    pairs: SchemaPairs
    strict: bool = False
    parts: tuple[Validator, ...] = ()

    def __call__(self, actual: Any) -> Results:
        return self.match(actual, strict=self.strict or is_strict())

    def match(self, actual: Any, *, strict: bool) -> Results:
        """Run the checks, with strictness chosen by the caller."""
        results = new_results()
        for path, isdef in self.pairs:
            value, exists = path.get_from(actual)
            results.merge(isdef.check(path, value, exists))
        for part in self.parts:
            results.merge(part.match(actual, strict=part.strict))

        if strict:
            results.merge(_strict_failures(actual, results))

        return results

    @property
    def paths(self) -> list[Path]:
        own = [path for path, _ in self.pairs]
        return own + [path for part in self.parts for path in part.paths]


def _strict_failures(actual: Any, results: Results) -> Results:
    """
    Failures for nodes of actual untouched by results.

    A node is touched when a result sits at it, above it, or beneath it.
    """
    touched = {path for path, _ in results}
    failures = new_results()
    for path in walk_paths(actual):
        if not any(t.is_prefix_of(path) or path.is_prefix_of(t) for t in touched):
            failures.merge(strict_failure_result(path))
    if len(failures):
        logger.debug("strict validation found %d unexpected fields", len(failures))
    return failures


def compile_schema(schema: Any) -> Validator:
    """
    Compile a schema into a Validator.

    Conversion rules:
        Validator -> pass through
        IsDef -> checked at its position
        non-empty dict -> one position per key
        non-empty list/tuple -> one position per index
        anything else (including {} and []) -> IsEqual(value)

    Raises:
        TypeError: if a dict in the schema has a non-string key
    """
    if isinstance(schema, Validator):
        return schema

    pairs = tuple(_flatten(schema, ROOT))
    logger.debug("compiled schema into %d checks", len(pairs))
    return Validator(pairs=pairs)


def Strict(schema: Any) -> Validator:
    """
    Validator that also fails on fields the schema does not mention.

    Usage:
        Strict({"a": 1})({"a": 1, "b": 2})   # fails at "b"
    """
    return replace(compile_schema(schema), strict=True)


def Compose(*schemas: Any) -> Validator:
    """
    Combine validators; results are merged in argument order.

    Each validator keeps its own strict flag. Wrap the composition in
    Strict() to reject fields that none of them mention.

    Usage:
        Compose({"a": 1}, {"b": IsString()})
    """
    return Validator(pairs=(), parts=tuple(compile_schema(s) for s in schemas))


def nested_isdef(validator: Validator) -> IsDef:
    """Wrap a Validator so it can sit at a leaf of another schema."""

    def check(path: Path, value: Any) -> Results:
        nested = validator.match(value, strict=validator.strict)
        return new_results().merge_under_prefix(path, nested)

    return IsDef(name="compiled", checker=check)


def walk_paths(value: Any, path: Path = ROOT) -> Iterator[Path]:
    """
    Yield the path of every node beneath value, depth first.

    Mapping keys are visited in sorted order so diagnostics are reproducible.
    """
    if isinstance(value, Mapping):
        for key in sorted(value, key=str):
            child = path.extend(str(key))
            yield child
            yield from walk_paths(value[key], child)
    elif is_sequence(value):
        for i, item in enumerate(value):
            child = path.extend(i)
            yield child
            yield from walk_paths(item, child)


def _flatten(schema: Any, path: Path) -> Iterator[tuple[Path, IsDef]]:
    if isinstance(schema, IsDef):
        yield path, schema
    elif isinstance(schema, Validator):
        yield path, nested_isdef(schema)
    elif isinstance(schema, Mapping) and schema:
        for key, sub in schema.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"Schema keys must be str, got {type(key).__name__} at '{path}'"
                )
            yield from _flatten(sub, path.extend(key))
    elif isinstance(schema, (list, tuple)) and schema:
        for i, sub in enumerate(schema):
            yield from _flatten(sub, path.extend(i))
    else:
        yield path, IsEqual(schema)
