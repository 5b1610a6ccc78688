"""Unit tests for the dot-notation mapping helpers."""

from __future__ import annotations

import pytest

from utils import arrays

SENTINEL = object()


@pytest.fixture
def config():
    return {
        "app": {"name": "demo", "debug": False},
        "database": {"connections": {"default": {"driver": "sqlite"}}},
        "flat.key": "verbatim",
        "nothing": None,
    }


def test_get_nested_value(config):
    assert arrays.get(config, "database.connections.default.driver") == "sqlite"
    assert arrays.get(config, "app.debug") is False


def test_get_returns_default_on_missing_step(config):
    assert arrays.get(config, "database.connections.replica.driver", "none") == "none"
    assert arrays.get(config, "app.name.first", "none") == "none"
    assert arrays.get(config, "missing") is None


def test_get_prefers_verbatim_key(config):
    assert arrays.get(config, "flat.key") == "verbatim"


def test_get_with_none_key_returns_whole_mapping(config):
    assert arrays.get(config, None) is config


def test_get_returns_stored_none(config):
    assert arrays.get(config, "nothing", "default") is None


def test_set_creates_intermediate_mappings():
    data = {}
    assert arrays.set(data, "a.b.c", 1) is data
    assert data == {"a": {"b": {"c": 1}}}


def test_set_overwrites_non_mapping_step():
    data = {"a": "scalar"}
    arrays.set(data, "a.b", 2)
    assert data == {"a": {"b": 2}}


@pytest.mark.parametrize(
    "start",
    [{}, {"a": 1}, {"a": {"b": "x"}}, {"a": {"b": {"c": 0, "d": 1}}}, {"a.b.c": "flat"}],
)
def test_set_then_get_law(start):
    arrays.set(start, "a.b.c", "v")
    assert arrays.get(start, "a.b.c") == "v"


@pytest.mark.parametrize(
    "key",
    [None, "app", "app.name", "app.debug", "app.missing", "database.connections.default", "flat.key", "nothing", "x.y"],
)
def test_has_agrees_with_get(config, key):
    assert arrays.has(config, key) == (arrays.get(config, key, SENTINEL) is not SENTINEL)


def test_forget_single_and_many(config):
    arrays.forget(config, "app.debug")
    assert config["app"] == {"name": "demo"}

    arrays.forget(config, ["flat.key", "database.connections.default", "unknown.path"])
    assert "flat.key" not in config
    assert config["database"] == {"connections": {}}


def test_forget_ignores_non_mapping_steps(config):
    arrays.forget(config, "app.name.first")
    assert config["app"]["name"] == "demo"


def test_flatten_unbounded():
    assert arrays.flatten([1, [2, [3, [4]]], (5,)]) == [1, 2, 3, 4, 5]


def test_flatten_with_depth():
    assert arrays.flatten([1, [2, [3, [4]]]], depth=1) == [1, 2, [3, [4]]]
    assert arrays.flatten([1, [2, [3, [4]]]], depth=2) == [1, 2, 3, [4]]


def test_flatten_mapping_values():
    assert arrays.flatten({"a": 1, "b": {"c": 2, "d": [3]}}) == [1, 2, 3]


def test_flatten_keeps_strings_whole():
    assert arrays.flatten(["ab", ["cd"]]) == ["ab", "cd"]


def test_only_and_except(config):
    assert arrays.only(config, ["app", "missing"]) == {"app": config["app"]}
    remaining = arrays.except_(config, ["app", "database"])
    assert set(remaining) == {"flat.key", "nothing"}


def test_first():
    assert arrays.first([]) is None
    assert arrays.first([], default="d") == "d"
    assert arrays.first([3, 4, 5]) == 3
    assert arrays.first([3, 4, 5], lambda value, key: value > 3) == 4
    assert arrays.first({"a": 1, "b": 2}, lambda value, key: key == "b") == 2
    assert arrays.first([1], lambda value, key: False, "none") == "none"


def test_wrap():
    assert arrays.wrap(None) == []
    assert arrays.wrap("a") == ["a"]
    items = [1, 2]
    assert arrays.wrap(items) is items
