"""
UPC-A to UPC-E zero suppression and conversion between the two forms.
"""

import structlog

from upcean.barcode.classifier import classify
from upcean.barcode.normalize import normalize
from upcean.barcode.validator import validate
from upcean.barcode.zero_suppression import UPCE_NUMBER_SYSTEMS, expand_upce
from upcean.models.barcode import BarcodeType

logger = structlog.get_logger(__name__)


def _suppress_zeros(manufacturer: str, product: str) -> str | None:
    """
    Pick the 6-digit UPC-E core for a manufacturer/product pair.

    Patterns are tried in a fixed order and the first match wins. The
    second pattern also matches everything the third one does, so a
    manufacturer code ending in "00" is packed with selector 4.
    """
    m1, m2, m3, m4, m5 = manufacturer
    p1, p2, p3, p4, p5 = product

    if p1 == p2 == p3 == p4 == "0" and p5 in "56789":
        return f"{m1}{m2}{m3}{m4}{m5}{p5}"
    if m4 == "0" and p1 == p2 == p3 == "0":
        return f"{m1}{m2}{m3}{m5}{p5}4"
    if m4 == "0" and m5 == "0" and p1 == p2 == p3 == "0":
        return f"{m1}{m2}{m3}{p4}{p5}3"
    if m5 == "0" and p1 == p2 == p3 == "0" and m4 in "012":
        return f"{m1}{m2}{m3}{p4}{p5}{m4}"
    return None


def compress_upca_to_upce(code: str | None) -> tuple[bool, str]:
    """
    Compress a UPC-A code to 8-digit UPC-E.

    The input must be a complete, valid UPC-A with number system 0 or 1
    whose digits fit one of the zero-suppression patterns.

    Args:
        code: 12-digit UPC-A

    Returns:
        Tuple of (success, upce); upce is number system + core + check
        digit, or "" on failure
    """
    s = normalize(code)
    if classify(s) != BarcodeType.UPC_A or not validate(s):
        return False, ""

    number_system = int(s[0])
    if number_system not in UPCE_NUMBER_SYSTEMS:
        logger.debug("UPC-A number system not compressible", code=s, number_system=number_system)
        return False, ""

    core = _suppress_zeros(s[1:6], s[6:11])
    if core is None:
        logger.debug("UPC-A not zero-compressible", code=s)
        return False, ""

    # Check digit comes from re-expanding the chosen core
    success, upca = expand_upce(core, assumed_number_system=number_system)
    if not success:
        return False, ""

    return True, f"{number_system}{core}{upca[-1]}"


def convert(code: str | None) -> tuple[bool, str]:
    """
    Convert UPC-A to UPC-E or UPC-E to UPC-A.

    Args:
        code: Barcode string

    Returns:
        Tuple of (success, converted); "" on failure or for other symbologies
    """
    s = normalize(code)
    barcode_type = classify(s)

    if barcode_type == BarcodeType.UPC_A:
        return compress_upca_to_upce(s)
    if barcode_type == BarcodeType.UPC_E:
        return expand_upce(s, assumed_number_system=0)
    return False, ""
