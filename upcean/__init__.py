"""
Retail barcode toolkit: UPC-A, UPC-E, EAN-13 and EAN-8 classification,
check digits and zero-suppression conversion.
"""

from upcean.barcode import (
    UPCEExpansionError,
    add_check_digit,
    classify,
    complete_length,
    compress_upca_to_upce,
    compute_check_digit,
    convert,
    describe,
    expand_upce,
    has_check_digit,
    is_valid_ean8,
    normalize,
    validate,
)
from upcean.models import BarcodeInfo, BarcodeType, EightDigitPolicy

__all__ = [
    # Types
    "BarcodeType",
    "EightDigitPolicy",
    "BarcodeInfo",
    "UPCEExpansionError",
    # Operations
    "normalize",
    "classify",
    "complete_length",
    "has_check_digit",
    "compute_check_digit",
    "is_valid_ean8",
    "validate",
    "add_check_digit",
    "expand_upce",
    "compress_upca_to_upce",
    "convert",
    "describe",
]
