"""printf-style formatting helpers and error-code descriptions."""

from __future__ import annotations

import os


def ssprintf(format: str, *args: object) -> str:
    """Format *args* with the printf-style *format* and return the text."""
    return format % args


def swsprintf(format: str, *args: object) -> str:
    """Wide-string variant of :func:`ssprintf`; text is already Unicode."""
    return format % args


def sstrerror(errnum: int) -> str:
    """Return the system's description of the error code *errnum*."""
    try:
        return os.strerror(errnum)
    except (ValueError, OverflowError):
        return ssprintf("Invalid error code %d", errnum)