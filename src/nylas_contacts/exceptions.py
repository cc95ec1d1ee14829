"""Exceptions raised by the contacts client."""
from typing import Optional, Sequence


class NylasError(Exception):
    """Base class for every error raised by this package."""


class InvalidParams(NylasError):
    """
    Raised before any network call when an operation's parameters fail validation.

    Attributes:
        violations: every field violation found by the validation engine
        fields: names of the offending fields, in schema order
    """

    def __init__(self, violations: Sequence = ()):
        self.violations = tuple(violations)
        self.fields = tuple(v.field for v in self.violations)
        message = "invalid params"
        if self.violations:
            message += ": " + "; ".join(str(v) for v in self.violations)
        super().__init__(message)


class TransportError(NylasError):
    """Network failure, non-2xx response or undecodable payload from the Nylas API."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
