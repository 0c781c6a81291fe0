from __future__ import annotations

import logging
import typing
from typing import Any

from pydantic import PydanticUndefinedAnnotation, PydanticUserError, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from fieldreflect.core.descriptors import FieldInfo
from fieldreflect.core.fields import ancestors, declared_fields, find_field
from fieldreflect.runtime.config import ReflectionConfig, get_default_config
from fieldreflect.runtime.errors import FieldAccessError, FieldNotFoundError, FieldTypeError
from fieldreflect.runtime.registry import FieldAccessor, FieldRegistry

logger = logging.getLogger(__name__)

_WRAPPERS = (typing.ClassVar, typing.Final, typing.Annotated)


def _unwrap(annotation: Any) -> Any:
    while typing.get_origin(annotation) in _WRAPPERS:
        args = typing.get_args(annotation)
        if not args:
            return Any
        annotation = args[0]
    if annotation in (typing.ClassVar, typing.Final):
        return Any
    return annotation


def _check_type(field: FieldInfo, value: Any) -> None:
    expected = _unwrap(field.type)
    if expected is Any or isinstance(expected, str):
        return

    try:
        adapter = TypeAdapter(expected)
    except (PydanticUserError, PydanticUndefinedAnnotation) as exc:
        if isinstance(expected, type):
            if not isinstance(value, expected):
                raise FieldTypeError(
                    f"Cannot set {field.owner.__name__}.{field.name} "
                    f"({expected.__name__}) to {type(value).__name__}"
                ) from None
            return
        logger.debug("No type check for %s.%s: %s", field.owner.__name__, field.name, exc)
        return

    try:
        adapter.validate_python(value, strict=True)
    except PydanticValidationError as exc:
        raise FieldTypeError(
            f"Cannot set {field.owner.__name__}.{field.name} to {type(value).__name__}: "
            f"{exc.errors()[0].get('msg', 'invalid value')}"
        ) from exc


def _instance_field(obj: Any, name: str) -> FieldInfo | None:
    namespace = getattr(obj, "__dict__", None)
    if isinstance(namespace, dict) and name in namespace:
        return FieldInfo(name=name, attribute=name, owner=type(obj), type=Any, kind="instance")
    return None


def _resolve(obj: Any, name: str, registry: FieldRegistry | None) -> FieldAccessor | FieldInfo:
    if registry is not None:
        accessor = registry.get(type(obj), name)
        if accessor is not None:
            return accessor

    field = find_field(name, type(obj)) or _instance_field(obj, name)
    if field is None:
        raise FieldNotFoundError(f"{type(obj).__name__} has no field {name!r}")
    return field


def _read(obj: Any, field: FieldInfo) -> Any:
    if field.is_class_field:
        return getattr(field.owner, field.attribute)
    namespace = getattr(obj, "__dict__", None)
    if isinstance(namespace, dict) and field.attribute in namespace:
        return namespace[field.attribute]
    return object.__getattribute__(obj, field.attribute)


def _write(obj: Any, field: FieldInfo, value: Any) -> None:
    if field.is_class_field:
        setattr(field.owner, field.attribute, value)
    else:
        object.__setattr__(obj, field.attribute, value)


def _call_accessor(accessor: FieldAccessor, obj: Any, *args: Any) -> Any:
    fn = accessor.getter if not args else accessor.setter
    try:
        return fn(obj, *args)
    except TypeError as exc:
        raise FieldTypeError(f"Accessor for {type(obj).__name__}.{accessor.name} failed: {exc}") from exc
    except Exception as exc:
        raise FieldAccessError(f"Accessor for {type(obj).__name__}.{accessor.name} failed: {exc}") from exc


def set_field_value(
    obj: Any,
    name: str,
    value: Any,
    *,
    registry: FieldRegistry | None = None,
    config: ReflectionConfig | None = None,
) -> None:
    """
    Write `value` to field `name` of `obj`, bypassing the class's own
    `__setattr__` and name mangling.

    Raises FieldNotFoundError if no class declares the field,
    FieldTypeError if the value does not match the declared type and
    FieldAccessError if the write itself fails.
    """
    config = config or get_default_config()
    config.validate()
    target = _resolve(obj, name, registry)

    if isinstance(target, FieldAccessor):
        if target.read_only:
            raise FieldAccessError(f"Field {type(obj).__name__}.{name} is read-only")
        _call_accessor(target, obj, value)
        return

    if config.check_types:
        _check_type(target, value)

    try:
        _write(obj, target, value)
    except (AttributeError, TypeError) as exc:
        raise FieldAccessError(f"Cannot write {type(obj).__name__}.{name}: {exc}") from exc


def get_field_value(
    obj: Any,
    name: str,
    *,
    registry: FieldRegistry | None = None,
    config: ReflectionConfig | None = None,
) -> Any:
    """
    Read field `name` of `obj`; see `set_field_value` for resolution and errors.

    An invalid configuration raises ConfigError, as in the other value
    operations.
    """
    config = config or get_default_config()
    config.validate()
    target = _resolve(obj, name, registry)
    if isinstance(target, FieldAccessor):
        return _call_accessor(target, obj)

    try:
        return _read(obj, target)
    except AttributeError as exc:
        raise FieldAccessError(f"Field {type(obj).__name__}.{name} has no value") from exc


def snapshot_fields(
    obj: Any,
    *,
    registry: FieldRegistry | None = None,
    config: ReflectionConfig | None = None,
) -> dict[str, Any]:
    """
    Map every field name of `obj` to its current value.

    Levels are gathered most-derived first and stop before `object` (and any
    class in `config.stop_at`). A name already gathered is never overwritten,
    so the most-derived declaration wins. Declared fields that currently hold
    no value are left out. Instance attributes no class declares come last.
    """
    config = config or get_default_config()
    config.validate()
    values: dict[str, Any] = {}
    covered: set[str] = set()

    if registry is not None:
        for name in registry.names(type(obj)):
            values[name] = get_field_value(obj, name, registry=registry, config=config)

    gathered = ancestors(type(obj), stop=(object, *config.stop_at))
    for level in ancestors(type(obj)):
        for field in declared_fields(level):
            covered.add(field.attribute)
            if level not in gathered or field.name in values:
                continue
            try:
                values[field.name] = _read(obj, field)
            except AttributeError:
                logger.debug("Skipping unset field %s.%s", level.__name__, field.name)

    namespace = getattr(obj, "__dict__", None)
    if isinstance(namespace, dict):
        for attribute, value in namespace.items():
            if attribute not in covered and attribute not in values:
                values[attribute] = value

    return values
