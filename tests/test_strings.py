"""Unit tests for the string helpers."""

from __future__ import annotations

import pytest

from utils import strings


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello_world", "HelloWorld"),
        ("hello-world", "HelloWorld"),
        ("hello world", "HelloWorld"),
        ("helloWorld", "HelloWorld"),
    ],
)
def test_studly(value, expected):
    assert strings.studly(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello_world", "helloWorld"),
        ("HelloWorld", "helloWorld"),
        ("hello-big-world", "helloBigWorld"),
        ("", ""),
    ],
)
def test_camel(value, expected):
    assert strings.camel(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("HelloWorld", "hello_world"),
        ("helloWorld", "hello_world"),
        ("hello-world", "hello_world"),
        ("HTTPServer", "http_server"),
        ("already_snake", "already_snake"),
        ("version2Name", "version_2_name"),
    ],
)
def test_snake(value, expected):
    assert strings.snake(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("CrèmeBrûlée", "crème_brûlée"),
        ("user.name", "user.name"),
        ("orderId#2", "order_id#2"),
    ],
)
def test_snake_keeps_non_separator_characters(value, expected):
    assert strings.snake(value) == expected


def test_case_converters_keep_accented_letters():
    assert strings.studly("naïve_value") == "NaïveValue"
    assert strings.camel("crème-brûlée") == "crèmeBrûlée"
    assert strings.kebab("CrèmeBrûlée") == "crème-brûlée"


def test_kebab():
    assert strings.kebab("HelloWorld") == "hello-world"
    assert strings.kebab("hello_world") == "hello-world"


@pytest.mark.parametrize(
    "value",
    ["HelloWorld", "hello_world", "XMLHttpRequest", "some-mixed_Case value", "v2Api", "__private__", "CrèmeBrûlée"],
)
def test_camel_of_snake_matches_camel(value):
    assert strings.camel(strings.snake(value)) == strings.camel(value)


def test_needle_predicates_accept_single_or_many():
    assert strings.starts_with("Hello World", "Hello")
    assert strings.ends_with("Hello World", "World")
    assert strings.contains("Hello World", "lo W")
    assert strings.contains("Hello World", ["Universe", "World"])
    assert not strings.contains("Hello World", "Universe")
    assert not strings.starts_with("Hello World", ("World", "Earth"))


def test_empty_needles_never_match():
    assert not strings.starts_with("Hello", "")
    assert not strings.ends_with("Hello", [""])
    assert not strings.contains("Hello", ["", ""])


def test_limit():
    assert strings.limit("short", 10) == "short"
    assert strings.limit("a long sentence", 6) == "a long..."
    assert strings.limit("a long sentence", 6, end="~") == "a long~"


def test_random_is_alphanumeric_with_requested_length():
    value = strings.random(32)
    assert len(value) == 32
    assert value.isalnum()
    assert strings.random(32) != value


def test_slug():
    assert strings.slug("Hello World") == "hello-world"
    assert strings.slug("  Crème brûlée -- recipe! ") == "creme-brulee-recipe"
    assert strings.slug("Hello World", separator="_") == "hello_world"


def test_replace_first():
    assert strings.replace_first("a", "b", "banana") == "bbnana"
    assert strings.replace_first("", "b", "banana") == "banana"
    assert strings.replace_first("x", "b", "banana") == "banana"


def test_before_and_after():
    assert strings.before("user@example.com", "@") == "user"
    assert strings.after("user@example.com", "@") == "example.com"
    assert strings.before("no-marker", "@") == "no-marker"
    assert strings.after("no-marker", "@") == "no-marker"
    assert strings.after("value", "") == "value"
