#!/usr/bin/env python3
"""
Exception hierarchy for xliffkit.

Every error carries the path or content description that triggered it.
Underlying causes are chained with ``raise ... from``.
"""

from typing import Optional


class XliffError(Exception):
    """
    Base class for all xliffkit errors.

    Attributes:
        message: Error description
        source: File path or content description the error relates to
    """

    def __init__(self, message: str, source: Optional[str] = None):
        self.message = message
        self.source = str(source) if source is not None else None

        if self.source:
            super().__init__(f"{message} [{self.source}]")
        else:
            super().__init__(message)


class NotFoundError(XliffError):
    """A referenced file does not exist."""


class FormatError(XliffError):
    """Input does not match the expected XLIFF structure or arguments are missing."""


class TypeMismatchError(XliffError):
    """A document of the wrong generation (or not a document at all) was passed."""


class ConversionError(XliffError):
    """A .resx resource file could not be read or written."""
