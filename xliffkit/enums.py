#!/usr/bin/env python3
"""
Enumerations shared by both XLIFF generations.

TranslationState values are the XLIFF 1.2 wire strings. XLIFF 2.0 uses its
own, smaller vocabulary; see format_handlers.xliff20 for that mapping.
"""

from enum import Enum


class TranslationState(Enum):
    """Workflow status of a translation unit or segment."""
    NEW = "new"
    NEEDS_TRANSLATION = "needs-translation"
    NEEDS_REVIEW_TRANSLATION = "needs-review-translation"
    TRANSLATED = "translated"
    FINAL = "final"
    NEEDS_ADAPTATION = "needs-adaptation"
    NEEDS_L10N = "needs-l10n"
    NEEDS_REVIEW_ADAPTATION = "needs-review-adaptation"
    NEEDS_REVIEW_L10N = "needs-review-l10n"
    SIGNED_OFF = "signed-off"


class ApprovalState(Enum):
    """Approval flag of an XLIFF 2.0 unit."""
    UNAPPROVED = "unapproved"
    APPROVED = "approved"


class XliffVersion(Enum):
    """Supported XLIFF schema generations."""
    V1_2 = "1.2"
    V2_0 = "2.0"

    @classmethod
    def from_string(cls, value: str) -> "XliffVersion":
        """Look up a version by its tag ("1.2" / "2.0")."""
        for version in cls:
            if version.value == value:
                return version
        available = ', '.join(v.value for v in cls)
        raise ValueError(f"Unknown XLIFF version: {value}. Available: {available}")
