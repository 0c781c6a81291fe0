from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


@dataclass(frozen=True)
class FieldAccessor:
    name: str
    getter: Getter
    setter: Setter | None = None

    @property
    def read_only(self) -> bool:
        return self.setter is None


class FieldRegistry:
    """
    Explicit per-class field accessors, consulted before reflective lookup.

    Accessors registered on a base class also apply to its subclasses; the
    most-derived registration for a name wins.
    """

    def __init__(self) -> None:
        self._fields: dict[type, dict[str, FieldAccessor]] = {}

    def register(self, cls: type, name: str, getter: Getter, setter: Setter | None = None) -> None:
        self._fields.setdefault(cls, {})[name] = FieldAccessor(name=name, getter=getter, setter=setter)

    def get(self, cls: type, name: str) -> FieldAccessor | None:
        for klass in cls.__mro__:
            accessor = self._fields.get(klass, {}).get(name)
            if accessor is not None:
                logger.debug("Registry accessor for %s.%s found on %s", cls.__name__, name, klass.__name__)
                return accessor
        return None

    def names(self, cls: type) -> list[str]:
        """Registered names visible from `cls`, most-derived registrations first."""
        seen: list[str] = []
        for klass in cls.__mro__:
            for name in self._fields.get(klass, {}):
                if name not in seen:
                    seen.append(name)
        return seen
