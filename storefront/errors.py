"""Error types surfaced to the user by the storefront core."""

from __future__ import annotations


class StorefrontError(Exception):
    """Base class. `str(exc)` is a message fit for display."""


class ValidationError(StorefrontError):
    """A local precondition failed before any remote call was made."""


class ReadError(StorefrontError):
    """A catalog query failed or returned an unusable document."""


class SubmissionError(StorefrontError):
    """The order write failed. The cart is left as it was."""
