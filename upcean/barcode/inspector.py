"""
One-call barcode summary built from the individual operations.
"""

from upcean.barcode.checkdigit import is_valid_ean8
from upcean.barcode.classifier import classify, complete_length
from upcean.barcode.converter import compress_upca_to_upce
from upcean.barcode.normalize import normalize
from upcean.barcode.validator import validate
from upcean.barcode.zero_suppression import expand_upce
from upcean.models.barcode import BarcodeInfo, BarcodeType, EightDigitPolicy


def describe(
    code: str | None,
    policy: EightDigitPolicy = EightDigitPolicy.PREFER_UPCE,
) -> BarcodeInfo:
    """
    Summarize a barcode.

    Every field follows the type chosen under ``policy``: an 8-digit code
    read as EAN-8 is checked as EAN-8 and gets no UPC-A counterpart.

    Args:
        code: Raw barcode string
        policy: Tie-break order for 8-digit codes

    Returns:
        BarcodeInfo with type, completeness, checksum and UPC-A/UPC-E counterpart
    """
    s = normalize(code)
    barcode_type = classify(s, policy)

    if barcode_type == BarcodeType.EAN_8 and len(s) == 8:
        checksum_valid = is_valid_ean8(s)
    else:
        checksum_valid = validate(s)

    converted: str | None = None
    converted_type: BarcodeType | None = None
    if barcode_type == BarcodeType.UPC_A:
        success, result = compress_upca_to_upce(s)
        if success:
            converted, converted_type = result, BarcodeType.UPC_E
    elif barcode_type == BarcodeType.UPC_E:
        success, result = expand_upce(s, assumed_number_system=0)
        if success:
            converted, converted_type = result, BarcodeType.UPC_A

    return BarcodeInfo(
        code=code or "",
        normalized=s,
        barcode_type=barcode_type,
        has_check_digit=complete_length(barcode_type) == len(s),
        checksum_valid=checksum_valid,
        converted=converted,
        converted_type=converted_type,
    )
