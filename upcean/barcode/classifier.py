"""
Symbology detection from digit count.
"""

from upcean.barcode.checkdigit import is_valid_ean8
from upcean.barcode.normalize import is_digits, normalize
from upcean.barcode.zero_suppression import UPCE_NUMBER_SYSTEMS, expand_upce
from upcean.models.barcode import BarcodeType, EightDigitPolicy

# Length of a code once its check digit is present
COMPLETE_LENGTHS: dict[BarcodeType, int] = {
    BarcodeType.UPC_A: 12,
    BarcodeType.EAN_13: 13,
    BarcodeType.EAN_8: 8,
    BarcodeType.UPC_E: 8,
}


def _is_upce(code: str) -> bool:
    """Check if an 8-digit code expands as UPC-E under its own number system."""
    number_system = int(code[0])
    if number_system not in UPCE_NUMBER_SYSTEMS:
        return False
    success, _ = expand_upce(code, assumed_number_system=number_system)
    return success


def _classify_eight_digits(code: str, policy: EightDigitPolicy) -> BarcodeType:
    """
    Resolve the EAN-8 / UPC-E ambiguity.

    Both policies fall back to EAN-8, even when the EAN-8 checksum is wrong.
    """
    if policy == EightDigitPolicy.PREFER_EAN8:
        if is_valid_ean8(code):
            return BarcodeType.EAN_8
        if _is_upce(code):
            return BarcodeType.UPC_E
        return BarcodeType.EAN_8

    if _is_upce(code):
        return BarcodeType.UPC_E
    return BarcodeType.EAN_8


def classify(
    code: str | None,
    policy: EightDigitPolicy = EightDigitPolicy.PREFER_UPCE,
) -> BarcodeType:
    """
    Detect barcode symbology from code.

    - 6 digits: UPC-E core
    - 7 digits: EAN-8 body
    - 8 digits: UPC-E or EAN-8, depending on ``policy``
    - 11 digits: UPC-A body
    - 12 digits: UPC-A (or an EAN-13 body; see ``add_check_digit``)
    - 13 digits: EAN-13

    Args:
        code: Barcode string
        policy: Tie-break order for 8-digit codes

    Returns:
        Detected symbology, UNKNOWN for non-digit input or other lengths

    Raises:
        ValueError: If policy is not an EightDigitPolicy value
    """
    policy = EightDigitPolicy(policy)
    s = normalize(code)
    if not is_digits(s):
        return BarcodeType.UNKNOWN

    length = len(s)

    if length == 6:
        return BarcodeType.UPC_E
    elif length == 7:
        return BarcodeType.EAN_8
    elif length == 8:
        return _classify_eight_digits(s, policy)
    elif length in (11, 12):
        return BarcodeType.UPC_A
    elif length == 13:
        return BarcodeType.EAN_13
    else:
        return BarcodeType.UNKNOWN


def complete_length(barcode_type: BarcodeType) -> int | None:
    """Get the length of a complete code (check digit included) for a type."""
    return COMPLETE_LENGTHS.get(barcode_type)


def has_check_digit(code: str | None) -> bool:
    """
    Check whether a code already carries its check digit.

    6-digit UPC-E cores and 11-digit UPC-A bodies are recognized but
    reported as incomplete.
    """
    s = normalize(code)
    return complete_length(classify(s)) == len(s)
