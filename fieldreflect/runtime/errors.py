from __future__ import annotations


class ReflectionError(Exception):
    """Base error for reflective field and setter access."""


class ConfigError(ReflectionError):
    """Raised when the reflection configuration is invalid."""


class FieldNotFoundError(ReflectionError, AttributeError):
    """Raised when a value is read or written through a field no class declares."""


class NotASetterError(ReflectionError, ValueError):
    """Raised when a setter-only operation receives a method that is not a setter."""


class FieldAccessError(ReflectionError, AttributeError):
    """Raised when a field cannot be read or written even with access checks bypassed."""


class FieldTypeError(ReflectionError, TypeError):
    """Raised when a value does not match the declared type of the field it is written to."""
