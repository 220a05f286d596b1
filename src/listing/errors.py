"""Exceptions raised by the listing pipeline."""

from __future__ import annotations

import re

_CODE_RE = re.compile(r"^invalid_[a-zA-Z0-9_]+$")


class ListingValidationError(ValueError):
    """A brief failed validation.

    ``code`` is a stable machine-readable string of the form
    ``invalid_<fieldName>`` (for example ``invalid_primaryKeyword``) that the
    API returns verbatim to clients.
    """

    def __init__(self, field: str, message: str = ""):
        self.field = field
        self.code = f"invalid_{field}"
        super().__init__(message or self.code)


def error_code(exc: BaseException, default: str = "invalid_request") -> str:
    """Return the client-safe code for ``exc``, or ``default``."""
    code = getattr(exc, "code", None)
    if isinstance(code, str) and _CODE_RE.match(code):
        return code
    return default
