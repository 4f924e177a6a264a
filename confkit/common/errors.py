"""Canonical errors for confkit helpers.

Standardized envelope structure:
{
  "error": {
    "code": "string",
    "message": "string",
    "resource_kind": "canvas | layout_catalog | media_constraints | null",
    "details": {}
  }
}
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


ResourceKind = Literal["canvas", "layout_catalog", "media_constraints", "conference_state", None]


class ErrorDetail(BaseModel):
    """Canonical error detail structure."""
    code: str
    message: str
    resource_kind: Optional[ResourceKind] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    """Top-level error envelope handed to upstream session/UI code."""
    error: ErrorDetail


class ConfkitError(Exception):
    """Base error carrying a machine-readable code."""

    code = "confkit.error"
    resource_kind: Optional[ResourceKind] = None

    def __init__(self, message: str, *, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.details = details or {}

    def to_envelope(self) -> ErrorEnvelope:
        return build_error_envelope(
            code=self.code,
            message=self.message,
            resource_kind=self.resource_kind,
            details=self.details,
        )


class InvalidArgument(ConfkitError, ValueError):
    """Raised when geometry input cannot be normalised (bad scale, non-finite values)."""

    code = "canvas.invalid_argument"
    resource_kind = "canvas"


class DeviceResolutionFailure(ConfkitError):
    """A preferred device id could not be resolved.

    Only used for logging; the constraint resolver always recovers from it.
    """

    code = "media_constraints.device_unresolved"
    resource_kind = "media_constraints"


def build_error_envelope(
    code: str,
    message: str,
    resource_kind: Optional[ResourceKind] = None,
    details: Optional[Dict[str, Any]] = None,
) -> ErrorEnvelope:
    """Construct an ErrorEnvelope (without raising).

    Args:
        code: Machine-readable error code (e.g., "canvas.invalid_argument")
        message: Human-readable error message
        resource_kind: The helper family that failed
        details: Additional context dict
    """
    return ErrorEnvelope(
        error=ErrorDetail(
            code=code,
            message=message,
            resource_kind=resource_kind,
            details=details or {},
        )
    )


def invalid_scale_error(scale: Any) -> InvalidArgument:
    """Canvas scale is zero, negative or non-finite."""
    return InvalidArgument(
        f"Canvas scale must be a finite positive number, got {scale!r}",
        code="canvas.invalid_scale",
        details={"scale": repr(scale)},
    )


def non_finite_percentage_error(field: str, index: int, value: Any) -> InvalidArgument:
    """A participant layout value produced NaN/Infinity when scaled."""
    return InvalidArgument(
        f"Layout {index} field {field!r} produced a non-finite percentage",
        code="canvas.non_finite_value",
        details={"field": field, "index": index, "value": repr(value)},
    )
