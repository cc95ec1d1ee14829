"""Schema-validated client for the Nylas contacts API."""

from .contacts import Contact
from .exceptions import InvalidParams, NylasError, TransportError
from .options import Options

__all__ = ["Contact", "InvalidParams", "NylasError", "Options", "TransportError"]
