"""Unified exception hierarchy for accesscore.

The resolution engine itself never raises for documented inputs. Errors
surface only at the edges: configuration loading, navigation-config
integrity checks, parsing externally supplied policies, and decoding
persisted session snapshots.

Usage:
    from accesscore.exceptions import (
        AccessCoreError,
        ConfigurationError,
        NavigationConfigError,
    )

Callers may define thin subclasses for their own errors:
    @register_error("LANDING_ERROR")
    class LandingError(AccessCoreError):
        code = "LANDING_ERROR"
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, cast

__all__ = [
    # Base hierarchy
    "AccessCoreError",
    "ConfigurationError",
    "NavigationConfigError",
    "PolicyValidationError",
    "SnapshotError",
    # Registry
    "ErrorRegistry",
    "error_registry",
    "register_error",
]


# ---- Exception Hierarchy ----------------------------------------------------


class AccessCoreError(Exception):
    """Base exception for accesscore.

    Attributes:
        code: Stable error code string (e.g. "NAVIGATION_CONFIG_ERROR").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(AccessCoreError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"


class NavigationConfigError(ConfigurationError):
    """Route tree and menu tree disagree (dangling or duplicated keys)."""

    code: str = "NAVIGATION_CONFIG_ERROR"


class PolicyValidationError(AccessCoreError):
    """External data is not a valid user menu policy."""

    code: str = "POLICY_VALIDATION_ERROR"


class SnapshotError(AccessCoreError):
    """Persisted session snapshot could not be decoded."""

    code: str = "SNAPSHOT_ERROR"


# ---- Error Registry ---------------------------------------------------------

_E = TypeVar("_E", bound=type[AccessCoreError])


class ErrorRegistry:
    """Registry mapping stable error codes to exception classes."""

    def __init__(self) -> None:
        self._errors: dict[str, type[AccessCoreError]] = {}

    def register(self, code: str, error_cls: type[AccessCoreError]) -> None:
        self._errors[code] = error_cls

    def get(self, code: str) -> type[AccessCoreError] | None:
        return self._errors.get(code)

    def all(self) -> dict[str, type[AccessCoreError]]:
        return dict(self._errors)


error_registry = ErrorRegistry()


def register_error(code: str) -> Callable[[_E], _E]:
    """Decorator to register a custom error type.

    Usage:
        @register_error("MY_CUSTOM_ERROR")
        class MyCustomError(AccessCoreError):
            code = "MY_CUSTOM_ERROR"
    """

    def decorator(cls: _E) -> _E:
        error_registry.register(code, cls)
        return cls

    return cast(Callable[[_E], _E], decorator)


# Register base errors
error_registry.register("INTERNAL_ERROR", AccessCoreError)
error_registry.register("CONFIGURATION_ERROR", ConfigurationError)
error_registry.register("NAVIGATION_CONFIG_ERROR", NavigationConfigError)
error_registry.register("POLICY_VALIDATION_ERROR", PolicyValidationError)
error_registry.register("SNAPSHOT_ERROR", SnapshotError)
