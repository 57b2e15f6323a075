"""
Mod-10 check digit shared by UPC-A, UPC-E, EAN-13 and EAN-8.
"""

from upcean.barcode.normalize import is_digits


def compute_check_digit(body: str) -> int:
    """
    Calculate the check digit for a code body.

    Algorithm:
    1. Walk the digits right to left
    2. Weight the rightmost digit by 3, the next by 1, alternating
    3. Sum all results
    4. Checksum = (10 - (sum mod 10)) mod 10

    Weighting from the right makes one routine serve every symbology,
    whatever the body length.

    Args:
        body: All digits of the code except the check digit

    Returns:
        Check digit 0-9
    """
    total = 0
    for i, digit in enumerate(reversed(body)):
        if digit not in "0123456789":
            raise ValueError(f"Invalid character in code: {digit}")
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def is_valid_ean8(code: str) -> bool:
    """
    Validate EAN-8 checksum.

    Args:
        code: 8-digit EAN code

    Returns:
        True if checksum is valid
    """
    if len(code) != 8 or not is_digits(code):
        return False

    return compute_check_digit(code[:7]) == int(code[7])
