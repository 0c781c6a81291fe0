from __future__ import annotations

from typing import Any

import pytest

from fieldreflect.core.setters import (
    describe_method,
    find_setter,
    get_setter_type,
    get_setters,
    is_setter,
    setter_name,
)
from fieldreflect.runtime.errors import ConfigError, NotASetterError


class Bean:
    def setFooBar(self, value: int) -> None:
        self.foo_bar = value

    def setName(self, name: str):
        self.name = name

    def setLabel(self, label) -> None:
        self.label = label

    def setTwo(self, first, second) -> None:
        pass

    def setCount(self, count: int) -> int:
        return count

    def setMany(self, *values) -> None:
        pass

    def setOption(self, *, option) -> None:
        pass

    def set_snake_case(self, value) -> None:
        pass

    def reset(self) -> None:
        pass

    def getFooBar(self) -> int:
        return 0

    def _setHidden(self, value) -> None:
        pass

    @staticmethod
    def setStatic(value) -> None:
        pass

    @staticmethod
    def setPair(first, second) -> None:
        pass

    @classmethod
    def setFactory(cls, value) -> None:
        pass


class ChildBean(Bean):
    def setExtra(self, extra: str) -> None:
        pass


def test_setter_name_styles():
    assert setter_name("fooBar") == "setFooBar"
    assert setter_name("x") == "setX"
    assert setter_name("foo_bar", "snake") == "set_foo_bar"


def test_setter_name_rejects_unknown_style():
    with pytest.raises(ConfigError):
        setter_name("fooBar", "camel")


def test_is_setter_accepts_single_parameter_void_instance_methods():
    assert is_setter(Bean.setFooBar)
    assert is_setter(Bean.setName)
    assert is_setter(Bean.setLabel)
    assert is_setter(Bean().setFooBar)


@pytest.mark.parametrize(
    "member",
    ["setTwo", "setCount", "setMany", "setOption", "reset", "getFooBar", "setStatic", "setFactory"],
)
def test_is_setter_rejects_other_shapes(member):
    assert not is_setter(vars(Bean)[member])


def test_find_setter_matches_name_and_shape():
    method = find_setter("fooBar", Bean)
    assert method is not None
    assert method.name == "setFooBar"
    assert method.owner is Bean


def test_find_setter_searches_inherited_methods():
    method = find_setter("fooBar", ChildBean)
    assert method is not None
    assert method.owner is Bean
    assert find_setter("extra", ChildBean).owner is ChildBean


def test_find_setter_ignores_wrong_arity_and_missing():
    assert find_setter("two", Bean) is None
    assert find_setter("nothing", Bean) is None
    assert find_setter("hidden", Bean) is None


def test_find_setter_snake_style():
    assert find_setter("snake_case", Bean, style="snake").name == "set_snake_case"
    assert find_setter("fooBar", Bean, style="snake") is None


def test_find_setter_uses_configured_style(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FIELDREFLECT_SETTER_STYLE", "snake")
    assert find_setter("snake_case", Bean).name == "set_snake_case"


def test_get_setters_lists_all_setters_once():
    names = sorted(m.name for m in get_setters(ChildBean))
    assert names == ["setExtra", "setFooBar", "setLabel", "setName", "set_snake_case"]


def test_get_setter_type():
    assert get_setter_type(find_setter("fooBar", Bean)) is int
    assert get_setter_type(Bean.setName) is str
    assert get_setter_type(Bean.setLabel) is Any


@pytest.mark.parametrize("member", ["reset", "setStatic", "setTwo"])
def test_get_setter_type_rejects_non_setters(member):
    with pytest.raises(NotASetterError, match="is not a setter"):
        get_setter_type(describe_method(vars(Bean)[member], owner=Bean))


def test_not_a_setter_is_a_value_error():
    with pytest.raises(ValueError):
        get_setter_type(Bean.getFooBar)


def test_describe_method_marks_static_members():
    info = describe_method(vars(Bean)["setStatic"], owner=Bean)
    assert info.is_static
    assert info.qualified_name.endswith("Bean.setStatic")
    assert [p.name for p in info.parameters()] == ["value"]


@pytest.mark.parametrize("member", ["setStatic", "setPair", "setFactory"])
def test_static_members_accessed_through_the_class_are_not_setters(member):
    assert not is_setter(getattr(Bean, member))
    assert not is_setter(getattr(Bean(), member))
    with pytest.raises(NotASetterError):
        get_setter_type(getattr(Bean, member))


def test_describe_method_resolves_owner_of_class_attributes():
    factory = describe_method(Bean.setFactory)
    assert factory.is_static
    assert factory.owner is Bean

    pair = describe_method(Bean.setPair)
    assert pair.is_static
    assert pair.owner is Bean

    setter = describe_method(Bean.setFooBar)
    assert not setter.is_static
    assert setter.owner is Bean
