from __future__ import annotations

import inspect
import logging
import typing
from typing import Any

from fieldreflect.core.descriptors import FieldInfo
from fieldreflect.utils.naming import demangle, mangle

logger = logging.getLogger(__name__)

_SLOT_INTERNALS = {"__dict__", "__weakref__"}


def ancestors(cls: type, *, stop: type | tuple[type, ...] | None = None) -> tuple[type, ...]:
    """
    Hierarchy levels of `cls` in lookup order, `cls` first.

    The walk follows the MRO and ends just before the first class listed in
    `stop`; with no `stop` every level down to `object` is returned.
    """
    if stop is None:
        stops: tuple[type, ...] = ()
    elif isinstance(stop, type):
        stops = (stop,)
    else:
        stops = tuple(stop)

    levels: list[type] = []
    for klass in cls.__mro__:
        if klass in stops:
            break
        levels.append(klass)
    return tuple(levels)


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(cls, eval_str=True))
    except Exception as exc:
        logger.debug("Could not evaluate annotations of %s (%s); using raw values", cls.__qualname__, exc)
        return dict(inspect.get_annotations(cls))


def _own_slots(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [slot for slot in slots if slot not in _SLOT_INTERNALS]


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def declared_fields(cls: type) -> list[FieldInfo]:
    """Fields declared by `cls` itself: annotations in declaration order, then unannotated slots."""
    slot_attributes = {mangle(slot, cls) for slot in _own_slots(cls)}
    fields: list[FieldInfo] = []
    seen: set[str] = set()

    for attribute, annotation in _own_annotations(cls).items():
        if _is_class_var(annotation):
            kind = "class"
        elif attribute in slot_attributes:
            kind = "slot"
        else:
            kind = "instance"
        fields.append(
            FieldInfo(
                name=demangle(attribute, cls),
                attribute=attribute,
                owner=cls,
                type=annotation,
                kind=kind,
            )
        )
        seen.add(attribute)

    for slot in _own_slots(cls):
        attribute = mangle(slot, cls)
        if attribute in seen:
            continue
        fields.append(FieldInfo(name=slot, attribute=attribute, owner=cls, type=Any, kind="slot"))
        seen.add(attribute)

    return fields


def find_field(name: str, cls: type) -> FieldInfo | None:
    """
    Find the field `name` on `cls` or the closest ancestor declaring it.

    `name` may be the declared name (`__secret`) or the mangled storage name
    (`_Account__secret`). Returns None when no level declares it.
    """
    for level in ancestors(cls):
        for field in declared_fields(level):
            if field.name == name or field.attribute == name:
                return field
    return None


def get_all_fields(cls: type, *, stop: type | tuple[type, ...] | None = None) -> list[FieldInfo]:
    """
    Every field declared along the hierarchy of `cls`, most-derived level first.

    Names declared on several levels are reported once per level.
    """
    fields: list[FieldInfo] = []
    for level in ancestors(cls, stop=stop):
        fields.extend(declared_fields(level))
    return fields
