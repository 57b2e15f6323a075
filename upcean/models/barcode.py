"""
Barcode type tags and the inspection result model.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BarcodeType(str, Enum):
    """Supported barcode symbologies."""

    UNKNOWN = "UNKNOWN"
    UPC_A = "UPC-A"
    UPC_E = "UPC-E"
    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"


class EightDigitPolicy(str, Enum):
    """Tie-break order for 8-digit codes, which may be EAN-8 or UPC-E."""

    PREFER_UPCE = "prefer_upce"
    PREFER_EAN8 = "prefer_ean8"


class BarcodeInfo(BaseModel):
    """Summary of everything the toolkit can tell about one input string."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Raw input as given")
    normalized: str = Field(..., description="Input with whitespace removed")
    barcode_type: BarcodeType = Field(default=BarcodeType.UNKNOWN)
    has_check_digit: bool = Field(False, description="Whether the code is complete")
    checksum_valid: bool = Field(False, description="Whether check digit validation passed")

    # Conversion between UPC-A and UPC-E, when one exists
    converted: str | None = Field(None, description="UPC-E for UPC-A input and vice versa")
    converted_type: BarcodeType | None = None

    @property
    def is_convertible(self) -> bool:
        """Check if a UPC-A/UPC-E counterpart was found."""
        return self.converted is not None
