from typing import Any

import pytest

from lookslike import Path, ValueResult
from lookslike.results import Results, single_result


@pytest.fixture(scope="function")
def user_doc() -> dict[str, Any]:
    return {
        "id": 42,
        "name": "alice",
        "email": "alice@example.com",
        "active": True,
        "tags": ["admin", "ops"],
        "address": {"city": "Lisbon", "zip": "1000-001"},
    }


@pytest.fixture
def path() -> Path:
    return Path(("a", "b", 0))


def is_str_checker(path: Path, value: Any) -> Results:
    """A hand-written checker, as a user would write one."""
    if isinstance(value, str):
        return single_result(path, ValueResult(True, "is a string"))
    return single_result(path, ValueResult(False, "not a string"))


@pytest.fixture
def str_checker():
    return is_str_checker
