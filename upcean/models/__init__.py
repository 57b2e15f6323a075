"""
Enumerations and pydantic models shared across the barcode modules.
"""

from upcean.models.barcode import BarcodeInfo, BarcodeType, EightDigitPolicy

__all__ = [
    "BarcodeType",
    "EightDigitPolicy",
    "BarcodeInfo",
]
