"""
Tests for lookslike.paths.
"""

import pytest

from lookslike import ROOT, Path, parse_path


class TestPath:
    def test_render(self):
        assert str(Path(("a", "b", 0, "c"))) == "a.b[0].c"
        assert str(Path((0, "name"))) == "[0].name"
        assert str(ROOT) == ""

    def test_equality_by_segments(self):
        assert Path(("a", 1)) == Path(("a", 1))
        assert Path(("a", 1)) != Path(("a", "1"))
        assert hash(Path(("a",))) == hash(Path(("a",)))

    def test_extend_and_concat(self):
        p = ROOT.extend("a").extend(0)
        assert p == Path(("a", 0))
        assert p.concat(Path(("b",))) == Path(("a", 0, "b"))
        assert p.parent == Path(("a",))
        assert p.last == 0
        assert ROOT.is_root

    def test_is_prefix_of(self):
        assert Path(("a",)).is_prefix_of(Path(("a", "b")))
        assert Path(("a",)).is_prefix_of(Path(("a",)))
        assert not Path(("a", "b")).is_prefix_of(Path(("a",)))
        assert ROOT.is_prefix_of(Path(("z",)))


class TestGetFrom:
    def test_nested_lookup(self):
        data = {"a": {"b": [10, {"c": "x"}]}}
        assert Path(("a", "b", 1, "c")).get_from(data) == ("x", True)

    def test_present_none_value(self):
        assert Path(("a",)).get_from({"a": None}) == (None, True)

    def test_missing_key(self):
        assert Path(("a", "b")).get_from({"a": {}}) == (None, False)

    def test_index_out_of_range(self):
        assert Path(("a", 2)).get_from({"a": [1, 2]}) == (None, False)

    def test_wrong_container_type(self):
        assert Path(("a", "b")).get_from({"a": "text"}) == (None, False)
        assert Path(("a", 0)).get_from({"a": "text"}) == (None, False)
        assert Path(("a", 0)).get_from({"a": {"0": 1}}) == (None, False)

    def test_root_returns_value(self):
        assert ROOT.get_from(5) == (5, True)


class TestParsePath:
    def test_simple_keys(self):
        assert parse_path("data.patient.id") == Path(("data", "patient", "id"))

    def test_indices(self):
        assert parse_path("items[0].name") == Path(("items", 0, "name"))
        assert parse_path("[1][2]") == Path((1, 2))

    def test_round_trip_render(self):
        assert str(parse_path("a.b[3].c-d")) == "a.b[3].c-d"

    def test_empty_is_root(self):
        assert parse_path("") == ROOT

    @pytest.mark.parametrize(
        "bad", ["a..b", "a.", ".a", "a[x]", "a[-1]", "a[0]b", "[1]x.y"]
    )
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            parse_path(bad)
