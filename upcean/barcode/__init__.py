"""
Barcode classification, validation and UPC-A/UPC-E conversion.
"""

from upcean.barcode.checkdigit import compute_check_digit, is_valid_ean8
from upcean.barcode.classifier import classify, complete_length, has_check_digit
from upcean.barcode.converter import compress_upca_to_upce, convert
from upcean.barcode.inspector import describe
from upcean.barcode.normalize import normalize
from upcean.barcode.validator import UPCEExpansionError, add_check_digit, validate
from upcean.barcode.zero_suppression import expand_upce

__all__ = [
    "normalize",
    "classify",
    "complete_length",
    "has_check_digit",
    "compute_check_digit",
    "is_valid_ean8",
    "validate",
    "add_check_digit",
    "UPCEExpansionError",
    "expand_upce",
    "compress_upca_to_upce",
    "convert",
    "describe",
]
