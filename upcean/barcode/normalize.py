"""
Input normalization shared by every barcode operation.
"""

import re

# Compiled once, read-only afterwards.
DIGITS_ONLY = re.compile(r"\d+", re.ASCII)


def normalize(code: str | None) -> str:
    """
    Canonicalize raw input.

    Trims outer whitespace and removes embedded spaces. Nothing else is
    touched: dashes, letters and other punctuation are kept so that they
    fail the digit check downstream.

    Args:
        code: Raw barcode text, possibly None

    Returns:
        Normalized string ("" for None or empty input)
    """
    if not code:
        return ""
    return code.strip().replace(" ", "")


def is_digits(code: str) -> bool:
    """Check that a normalized string is non-empty and ASCII digits only."""
    return DIGITS_ONLY.fullmatch(code) is not None
