from __future__ import annotations

"""Engine exception classes.

Only programming and configuration mistakes raise. Routine conditions such
as unknown keys, duplicate keys or missing text never raise; the engine
stays query-able so a render cycle cannot crash on them.
"""

from typing import Any, Optional


class TreeviewError(Exception):
    """Base exception for all treeview engine errors."""

    def __init__(self, message: str, key: Optional[Any] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.key = key
        self.cause = cause

    def __str__(self) -> str:
        if self.key is not None:
            return f"[Key: {self.key!r}] {super().__str__()}"
        return super().__str__()


class AccessorError(TreeviewError):
    """Raised when a required item accessor is missing or not callable."""

    def __init__(self, accessor_name: str, message: Optional[str] = None) -> None:
        self.accessor_name = accessor_name
        super().__init__(message or f"Accessor '{accessor_name}' must be callable")


class ConfigurationError(TreeviewError):
    """Raised when a configuration value cannot be interpreted.

    This covers values coming from YAML files as well as constructor
    arguments of the controller.
    """

    def __init__(self, option: str, value: Any, allowed: Optional[list[str]] = None) -> None:
        self.option = option
        self.value = value
        self.allowed = allowed or []
        if self.allowed:
            message = f"Invalid value {value!r} for '{option}'. Allowed: {', '.join(self.allowed)}"
        else:
            message = f"Invalid value {value!r} for '{option}'"
        super().__init__(message)
