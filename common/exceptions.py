"""Shared exception classes for passgen."""

from __future__ import annotations


class PyUtilsError(Exception):
    """Base exception for all passgen errors."""

    pass


class ValidationError(PyUtilsError):
    """Input validation error."""

    pass


class InvalidRequest(ValidationError, ValueError):
    """A generation request that no password can satisfy."""

    pass


class ClipboardError(PyUtilsError):
    """Raised when clipboard operations fail or backend is unavailable."""

    pass
