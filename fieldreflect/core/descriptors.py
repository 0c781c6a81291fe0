from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Literal

FieldKind = Literal["instance", "slot", "class"]


# -----------------------------
# Fields
# -----------------------------


@dataclass(frozen=True)
class FieldInfo:
    """
    A field declared by one class.

    `name` is the name as written in the class body; `attribute` is where the
    value is stored once private-name mangling is applied. `type` holds the
    evaluated annotation, the raw string when it could not be evaluated, or
    `typing.Any` for an unannotated slot.
    """

    name: str
    attribute: str
    owner: type
    type: Any
    kind: FieldKind = "instance"

    @property
    def is_class_field(self) -> bool:
        return self.kind == "class"


# -----------------------------
# Methods
# -----------------------------


@dataclass(frozen=True)
class MethodInfo:
    name: str
    owner: type | None
    function: Callable[..., Any]
    signature: inspect.Signature
    is_static: bool = False

    @property
    def qualified_name(self) -> str:
        if self.owner is None:
            return self.name
        return f"{self.owner.__module__}.{self.owner.__qualname__}.{self.name}"

    def parameters(self) -> list[inspect.Parameter]:
        """Declared parameters, without the receiver of an instance method."""
        params = list(self.signature.parameters.values())
        if not self.is_static and params:
            params = params[1:]
        return params
