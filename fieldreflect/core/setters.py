from __future__ import annotations

import inspect
import logging
import sys
import typing
from typing import Any, Callable, Iterator, Union

from fieldreflect.core.descriptors import MethodInfo
from fieldreflect.runtime.config import SETTER_STYLES, get_default_config
from fieldreflect.runtime.errors import ConfigError, NotASetterError
from fieldreflect.utils.naming import capitalize_first_letter

logger = logging.getLogger(__name__)

MethodLike = Union[MethodInfo, Callable[..., Any], staticmethod, classmethod]

_POSITIONAL = {inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD}


def setter_name(field_name: str, style: str = "bean") -> str:
    """Expected setter name: `fooBar` -> `setFooBar` (bean), `foo_bar` -> `set_foo_bar` (snake)."""
    if style == "bean":
        return "set" + capitalize_first_letter(field_name)
    if style == "snake":
        return "set_" + field_name
    raise ConfigError(f"Unknown setter style: {style!r}. Allowed: {sorted(SETTER_STYLES)}")


def _declaring_class(function: Callable[..., Any]) -> type | None:
    """Class a function was defined in, found through its `__qualname__`; None for locals."""
    parts = getattr(function, "__qualname__", "").split(".")
    if len(parts) < 2 or "<locals>" in parts:
        return None
    target: Any = sys.modules.get(getattr(function, "__module__", None) or "")
    for part in parts[:-1]:
        target = getattr(target, part, None)
        if target is None:
            return None
    return target if isinstance(target, type) else None


def describe_method(obj: MethodLike, owner: type | None = None, name: str | None = None) -> MethodInfo:
    """Normalise a function, staticmethod or classmethod into a MethodInfo."""
    if isinstance(obj, MethodInfo):
        return obj

    is_static = isinstance(obj, (staticmethod, classmethod))
    function = obj.__func__ if is_static else obj
    if inspect.ismethod(function):
        # `Cls.some_classmethod` arrives bound to the class itself.
        receiver = function.__self__
        if isinstance(receiver, type):
            is_static = True
            owner = owner or receiver
        else:
            owner = owner or type(receiver)
        # Bound methods already hide their receiver; keep it in the signature.
        function = function.__func__
    if not callable(function):
        raise NotASetterError(f"Expected a function or method, got {type(obj).__name__}")

    name = name or function.__name__
    if not is_static:
        owner = owner or _declaring_class(function)
        # `Cls.some_staticmethod` arrives as a plain function.
        if owner is not None:
            member = inspect.getattr_static(owner, name, None)
            is_static = isinstance(member, (staticmethod, classmethod)) and member.__func__ is function

    return MethodInfo(
        name=name,
        owner=owner,
        function=function,
        signature=inspect.signature(function),
        is_static=is_static,
    )


def _public_methods(cls: type) -> Iterator[MethodInfo]:
    seen: set[str] = set()
    for klass in cls.__mro__:
        for name, member in vars(klass).items():
            if name.startswith("_") or name in seen:
                continue
            if not (inspect.isfunction(member) or isinstance(member, (staticmethod, classmethod))):
                continue
            seen.add(name)
            yield describe_method(member, owner=klass, name=name)


def _return_hint(method: MethodInfo) -> Any:
    annotation = method.signature.return_annotation
    if annotation is inspect.Signature.empty:
        return None
    if isinstance(annotation, str):
        try:
            return typing.get_type_hints(method.function).get("return", None)
        except Exception as exc:
            logger.debug("Could not resolve return annotation of %s (%s)", method.qualified_name, exc)
            return annotation
    return annotation


def is_setter(method: MethodLike) -> bool:
    """
    A setter returns nothing, is an instance method and takes exactly one
    positional parameter besides the receiver. Unannotated returns count as
    returning nothing.
    """
    method = describe_method(method)
    if method.is_static:
        return False

    returns = _return_hint(method)
    if returns not in (None, type(None), "None"):
        return False

    params = method.parameters()
    return len(params) == 1 and params[0].kind in _POSITIONAL


def find_setter(name: str, cls: type, *, style: str | None = None) -> MethodInfo | None:
    """
    Find the setter for field `name` among the public methods of `cls`,
    inherited ones included. Returns None when there is none.
    """
    expected = setter_name(name, style or get_default_config().setter_style)
    for method in _public_methods(cls):
        if method.name == expected and is_setter(method):
            return method
    return None


def get_setters(cls: type) -> list[MethodInfo]:
    """Every public setter of `cls`, inherited ones included."""
    return [method for method in _public_methods(cls) if is_setter(method)]


def get_setter_type(method: MethodLike) -> Any:
    """Declared type of the setter's parameter, `typing.Any` when unannotated."""
    method = describe_method(method)
    if not is_setter(method):
        raise NotASetterError(f"The method {method.qualified_name} is not a setter.")

    param = method.parameters()[0]
    if param.annotation is inspect.Parameter.empty:
        return Any
    if isinstance(param.annotation, str):
        try:
            return typing.get_type_hints(method.function).get(param.name, param.annotation)
        except Exception as exc:
            logger.debug("Could not resolve annotation of %s (%s)", method.qualified_name, exc)
    return param.annotation
