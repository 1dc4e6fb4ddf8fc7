"""
lookslike - declarative structural matching for nested data.

Usage:
    from lookslike import IsString, Optional, compile_schema

    schema = {
        "name": IsString(),
        "email": Optional(IsString()),
        "tags": ["a", "b"],
    }

    results = compile_schema(schema)(data)
    results.valid
    results.errors()
"""

from .context import is_strict, matching_context
from .core import Compose, Strict, Validator, compile_schema, walk_paths
from .isdef import IsDef
from .paths import ROOT, Path, parse_path
from .report import MatchReport, ResultEntry, format_results
from .results import (
    Results,
    key_missing_result,
    new_results,
    simple_result,
    single_result,
    strict_failure_result,
    valid_result,
)
from .types import KEY_MISSING_VR, STRICT_FAILURE_VR, VALID_VR, ValueResult
from .validators import (
    AllOf,
    AnyOf,
    Between,
    Gt,
    Gte,
    IsAny,
    IsArrayOf,
    IsEqual,
    IsIn,
    IsModel,
    IsNil,
    IsNonEmptyString,
    IsString,
    IsStringContaining,
    IsStringMatching,
    IsType,
    KeyMissing,
    KeyPresent,
    Lt,
    Lte,
    Optional,
    Predicate,
)

__all__ = [
    # Result types
    "ValueResult",
    "Results",
    "VALID_VR",
    "KEY_MISSING_VR",
    "STRICT_FAILURE_VR",
    "new_results",
    "simple_result",
    "single_result",
    "valid_result",
    "key_missing_result",
    "strict_failure_result",
    # Core
    "IsDef",
    "Path",
    "ROOT",
    "parse_path",
    "Validator",
    "compile_schema",
    "Strict",
    "Compose",
    "walk_paths",
    "matching_context",
    "is_strict",
    # Validators
    "KeyPresent",
    "KeyMissing",
    "Optional",
    "IsAny",
    "IsEqual",
    "IsNil",
    "IsType",
    "IsString",
    "IsNonEmptyString",
    "IsStringMatching",
    "IsStringContaining",
    "IsIn",
    "Gt",
    "Gte",
    "Lt",
    "Lte",
    "Between",
    "Predicate",
    "IsArrayOf",
    "IsModel",
    "AllOf",
    "AnyOf",
    # Reporting
    "MatchReport",
    "ResultEntry",
    "format_results",
]
