from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fieldreflect.runtime.errors import ConfigError

logger = logging.getLogger(__name__)

SETTER_STYLES = {"bean", "snake"}

_TRUE_VALUES = {"1", "true", "True", "yes", "YES"}
_FALSE_VALUES = {"0", "false", "False", "no", "NO"}

_default_config: "ReflectionConfig | None" = None


@dataclass(frozen=True)
class ReflectionConfig:
    """
    Settings shared by the value-access and setter helpers.

    Notes
    - `check_types` validates every write against the field's declared type.
      Fields without a usable annotation are never checked.
    - `stop_at` lists classes at which `snapshot_fields` stops walking the
      hierarchy, on top of `object` which is always excluded.
    """

    check_types: bool = True
    setter_style: str = "bean"
    stop_at: tuple[type, ...] = ()

    @classmethod
    def from_env(cls) -> "ReflectionConfig":
        check_types = True
        raw_check = os.getenv("FIELDREFLECT_CHECK_TYPES", "").strip()
        if raw_check in _FALSE_VALUES:
            check_types = False
        elif raw_check and raw_check not in _TRUE_VALUES:
            raise ConfigError(
                f"Invalid `FIELDREFLECT_CHECK_TYPES` value: {raw_check!r}. "
                "Use 1/true/yes or 0/false/no."
            )

        setter_style = os.getenv("FIELDREFLECT_SETTER_STYLE", "").strip().lower() or "bean"

        config = cls(check_types=check_types, setter_style=setter_style)
        config.validate()
        return config

    def validate(self) -> None:
        if self.setter_style not in SETTER_STYLES:
            raise ConfigError(
                f"Unknown setter style: {self.setter_style!r}. Allowed: {sorted(SETTER_STYLES)}"
            )
        for stop in self.stop_at:
            if not isinstance(stop, type):
                raise ConfigError(f"stop_at entries must be classes, got {stop!r}")


def get_default_config() -> ReflectionConfig:
    """Return the process-wide configuration, loading it from the environment on first use."""
    global _default_config
    if _default_config is None:
        _default_config = ReflectionConfig.from_env()
        logger.debug("Loaded reflection config from environment: %s", _default_config)
    return _default_config


def reset_default_config() -> None:
    global _default_config
    _default_config = None
