"""Tests for optional-path traversal."""

from types import SimpleNamespace

import pytest

from molmeta.core.paths import MISSING, first_not_none, get_path, resolve


class TestGetPath:
    def test_nested_dicts(self):
        root = {"a": {"b": {"c": 1}}}
        assert get_path(root, "a.b.c") == 1

    def test_list_index(self):
        root = {"models": [{"id": "m0"}, {"id": "m1"}]}
        assert get_path(root, "models.0.id") == "m0"
        assert get_path(root, "models.1.id") == "m1"

    def test_attributes(self):
        root = SimpleNamespace(cell=SimpleNamespace(obj={"data": 5}))
        assert get_path(root, "cell.obj.data") == 5

    def test_tuple_path(self):
        root = {"a": {"b.c": 3}}
        assert get_path(root, ("a", "b.c")) == 3

    def test_missing_intermediate(self):
        assert get_path({"a": None}, "a.b.c") is None
        assert get_path({}, "a.b") is None
        assert get_path(None, "a") is None

    def test_index_out_of_range(self):
        assert get_path({"models": []}, "models.0") is None

    def test_non_numeric_index(self):
        assert get_path([1, 2], "first") is None

    def test_string_is_a_leaf(self):
        assert get_path({"a": "text"}, "a.upper") is None

    def test_empty_path_returns_root(self):
        root = {"x": 1}
        assert get_path(root, "") is root


class TestResolve:
    def test_first_non_null_wins(self):
        root = {"a": None, "b": 0, "c": 1}
        assert resolve(root, ("a", "b", "c")) == 0

    def test_falls_through_missing(self):
        root = {"data": {"entities": ["e"]}}
        assert resolve(root, ("entities", "sourceData.data.entities", "data.entities")) == ["e"]

    def test_all_missing(self):
        assert resolve({}, ("a", "b.c")) is None

    def test_callable_candidate(self):
        root = {"x": 2}
        assert resolve(root, (lambda r: None, lambda r: r["x"] * 10)) == 20

    def test_lazy_evaluation(self):
        calls = []

        def accessor(r):
            calls.append(r)
            return "late"

        assert resolve({"a": "early"}, ("a", accessor)) == "early"
        assert calls == []

    @pytest.mark.parametrize("root", [None, 42, "str", [], {}])
    def test_never_raises(self, root):
        assert resolve(root, ("a.b.c", "0.x")) is None


def test_first_not_none():
    assert first_not_none(None, MISSING, "", "x") == ""
    assert first_not_none(None, None) is None


def test_missing_is_falsy():
    assert not MISSING
    assert repr(MISSING) == "MISSING"


def test_first_not_none_keeps_empty_string():
    assert first_not_none("", "fallback") == ""
