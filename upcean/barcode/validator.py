"""
Check digit validation and completion for UPC/EAN codes.
"""

import structlog

from upcean.barcode.checkdigit import compute_check_digit
from upcean.barcode.classifier import classify
from upcean.barcode.normalize import is_digits, normalize
from upcean.barcode.zero_suppression import expand_upce
from upcean.models.barcode import BarcodeType

logger = structlog.get_logger(__name__)


class UPCEExpansionError(ValueError):
    """Raised when a UPC-E core cannot be expanded to compute its check digit."""


def validate(code: str | None) -> bool:
    """
    Validate a barcode's check digit.

    UPC-E has no checksum of its own: it is expanded to UPC-A (number
    system 0 for a bare core) and the expansion is validated instead.

    Args:
        code: Barcode string

    Returns:
        True if the code is recognized and its check digit is correct
    """
    s = normalize(code)
    barcode_type = classify(s)
    if barcode_type == BarcodeType.UNKNOWN or not is_digits(s) or len(s) < 2:
        return False

    if barcode_type == BarcodeType.UPC_E:
        success, upca = expand_upce(s, assumed_number_system=0)
        if not success:
            return False
        return validate(upca)

    return compute_check_digit(s[:-1]) == int(s[-1])


def _append_upce_check_digit(core: str, number_system: int = 0) -> str:
    """Complete a 6-digit UPC-E core as number system + core + check digit."""
    success, upca = expand_upce(core, assumed_number_system=number_system)
    if not success:
        logger.warning("Cannot expand UPC-E core", core=core, number_system=number_system)
        raise UPCEExpansionError(f"Invalid UPC-E core for check digit calculation: {core}")
    return f"{number_system}{core}{upca[-1]}"


def add_check_digit(code: str | None) -> str:
    """
    Append the check digit a code body is missing.

    Resolution is by length only:
    - 6 digits: UPC-E core, completed to 8 digits with number system 0
    - 7 digits: EAN-8 body
    - 11 digits: UPC-A body
    - 12 digits: returned as-is if already a valid UPC-A, otherwise
      treated as an EAN-13 body
    - anything else: returned as-is

    Args:
        code: Barcode body

    Returns:
        Normalized code with its check digit

    Raises:
        UPCEExpansionError: If a 6-digit core cannot be expanded
    """
    s = normalize(code)
    if not is_digits(s):
        return s

    length = len(s)

    if length == 6:
        return _append_upce_check_digit(s, number_system=0)
    elif length in (7, 11):
        return f"{s}{compute_check_digit(s)}"
    elif length == 12:
        if validate(s):
            return s
        return f"{s}{compute_check_digit(s)}"
    else:
        return s
