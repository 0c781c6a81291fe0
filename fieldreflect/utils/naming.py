from __future__ import annotations


def capitalize_first_letter(data: str) -> str:
    """Upper-case the first character only: `fooBar` -> `FooBar`."""
    if not data:
        return data
    return data[0].upper() + data[1:]


def is_private_name(name: str) -> bool:
    """True for names Python mangles inside a class body (`__x`, but not `__x__`)."""
    return name.startswith("__") and not name.endswith("__")


def mangle(name: str, cls: type) -> str:
    """
    Storage name of `name` when declared in the body of `cls`.

    Mirrors the compiler: `__secret` in `class _Account` becomes
    `_Account__secret`. Class names made only of underscores are not mangled.
    """
    if not is_private_name(name):
        return name
    owner = cls.__name__.lstrip("_")
    if not owner:
        return name
    return f"_{owner}{name}"


def demangle(attribute: str, cls: type) -> str:
    """Inverse of `mangle` for attributes declared on `cls`; other names are returned unchanged."""
    owner = cls.__name__.lstrip("_")
    prefix = f"_{owner}__"
    if owner and attribute.startswith(prefix) and not attribute.endswith("__"):
        return attribute[len(prefix) - 2 :]
    return attribute
