"""
fieldreflect: find, read and write fields and bean-style setters by name.
"""

from fieldreflect.core.descriptors import FieldInfo, MethodInfo
from fieldreflect.core.fields import ancestors, declared_fields, find_field, get_all_fields
from fieldreflect.core.setters import (
    describe_method,
    find_setter,
    get_setter_type,
    get_setters,
    is_setter,
    setter_name,
)
from fieldreflect.core.values import get_field_value, set_field_value, snapshot_fields
from fieldreflect.runtime.config import ReflectionConfig, get_default_config, reset_default_config
from fieldreflect.runtime.errors import (
    ConfigError,
    FieldAccessError,
    FieldNotFoundError,
    FieldTypeError,
    NotASetterError,
    ReflectionError,
)
from fieldreflect.runtime.registry import FieldAccessor, FieldRegistry

__all__ = [
    "FieldInfo",
    "MethodInfo",
    "ancestors",
    "declared_fields",
    "find_field",
    "get_all_fields",
    "describe_method",
    "find_setter",
    "get_setter_type",
    "get_setters",
    "is_setter",
    "setter_name",
    "get_field_value",
    "set_field_value",
    "snapshot_fields",
    "ReflectionConfig",
    "get_default_config",
    "reset_default_config",
    "ConfigError",
    "FieldAccessError",
    "FieldNotFoundError",
    "FieldTypeError",
    "NotASetterError",
    "ReflectionError",
    "FieldAccessor",
    "FieldRegistry",
]
