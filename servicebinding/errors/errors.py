"""
Exceptions raised by the service binding client.

Exception hierarchy:
- ServiceBindingError (base)
  - MissingTypeError: a binding has no `type` entry
  - ConfigurationError: invalid discovery configuration

Absent entries are never errors; lookups return None for those. Filesystem
faults other than "not found" propagate as the original OSError.
"""

from __future__ import annotations

from typing import Any, Optional


class ServiceBindingError(Exception):
    """Base exception for all service binding errors."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return super().__str__()
        return f"{super().__str__()} [details={self.details}]"


class MissingTypeError(ServiceBindingError, ValueError):
    """Raised when a binding does not contain the required `type` entry."""

    def __init__(self, binding_name: Optional[str] = None) -> None:
        self.binding_name = binding_name
        super().__init__("binding does not contain a type")


class ConfigurationError(ServiceBindingError):
    """Raised when discovery configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.field = field
        self.value = value
        details = details or {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details=details)
