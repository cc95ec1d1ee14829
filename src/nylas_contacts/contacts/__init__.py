"""Contacts resource of the Nylas API."""

from .contact import Contact

__all__ = ["Contact"]
