"""Unit tests for the default service container."""

from __future__ import annotations

import pytest

from kernel import Container, ContainerContract


class Clock:
    pass


def test_container_satisfies_contract():
    assert isinstance(Container(), ContainerContract)


def test_bind_creates_new_instance_each_time():
    container = Container()
    container.bind("thing", lambda c: object())
    assert container.get("thing") is not container.get("thing")


def test_singleton_is_cached():
    container = Container()
    container.singleton("thing", lambda c: object())
    assert container.get("thing") is container.get("thing")


def test_factory_receives_container():
    container = Container()
    container.singleton("name", lambda c: "kernel")
    container.bind("greeting", lambda c: f"hello {c.get('name')}")
    assert container.get("greeting") == "hello kernel"


def test_class_identifier_without_factory_is_constructed():
    container = Container()
    container.singleton(Clock)
    assert isinstance(container.get(Clock), Clock)
    assert container.get(Clock) is container.get(Clock)


def test_string_identifier_requires_factory():
    with pytest.raises(TypeError):
        Container().bind("thing")


def test_rebinding_replaces_cached_instance():
    container = Container()
    container.singleton("value", lambda c: "first")
    assert container.get("value") == "first"
    container.singleton("value", lambda c: "second")
    assert container.get("value") == "second"


def test_unknown_identifier_raises_key_error():
    container = Container()
    assert container.has("missing") is False
    with pytest.raises(KeyError, match="missing"):
        container.get("missing")
