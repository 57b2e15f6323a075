"""
UPC-E expansion: rebuilds the 12-digit UPC-A a zero-suppressed code stands for.

A UPC-E core is six digits d1..d6. The last digit selects how the
manufacturer and product digits of the UPC-A body were packed:

    d6 in 5..9  manufacturer d1 d2 d3 d4 d5   product 0 0 0 0 d6
    d6 == 4     manufacturer d1 d2 d3 0 d4    product 0 0 0 0 d5
    d6 == 3     manufacturer d1 d2 d3 0 0     product 0 0 0 d4 d5
    d6 in 0..2  manufacturer d1 d2 d3 d6 0    product 0 0 0 d4 d5
"""

import structlog

from upcean.barcode.checkdigit import compute_check_digit
from upcean.barcode.normalize import is_digits, normalize

logger = structlog.get_logger(__name__)

# Number systems for which zero suppression is defined
UPCE_NUMBER_SYSTEMS = (0, 1)


def _expand_core(core: str) -> tuple[str, str]:
    """Split a 6-digit core into (manufacturer, product) digit runs."""
    d1, d2, d3, d4, d5, d6 = core

    if d6 in "56789":
        return f"{d1}{d2}{d3}{d4}{d5}", f"0000{d6}"
    elif d6 == "4":
        return f"{d1}{d2}{d3}0{d4}", f"0000{d5}"
    elif d6 == "3":
        return f"{d1}{d2}{d3}00", f"000{d4}{d5}"
    else:
        return f"{d1}{d2}{d3}{d6}0", f"000{d4}{d5}"


def expand_upce(code: str, assumed_number_system: int = 0) -> tuple[bool, str]:
    """
    Expand a UPC-E code to UPC-A.

    Accepted forms:
    - 6 digits: bare core, number system taken from ``assumed_number_system``
      (anything other than 0 or 1 falls back to 0)
    - 7 digits: number system + core
    - 8 digits: number system + core + check digit; the check digit must
      match the one computed for the expansion

    Args:
        code: UPC-E string
        assumed_number_system: Number system used for a bare 6-digit core

    Returns:
        Tuple of (success, upca); upca is "" on failure
    """
    s = normalize(code)
    if not is_digits(s):
        return False, ""

    given_check: int | None = None

    if len(s) == 6:
        core = s
        number_system = (
            assumed_number_system if assumed_number_system in UPCE_NUMBER_SYSTEMS else 0
        )
    elif len(s) in (7, 8):
        number_system = int(s[0])
        if number_system not in UPCE_NUMBER_SYSTEMS:
            logger.debug("UPC-E number system not supported", code=s, number_system=number_system)
            return False, ""
        core = s[1:7]
        if len(s) == 8:
            given_check = int(s[7])
    else:
        return False, ""

    manufacturer, product = _expand_core(core)
    body = f"{number_system}{manufacturer}{product}"
    check = compute_check_digit(body)

    if given_check is not None and given_check != check:
        logger.debug("UPC-E check digit mismatch", code=s, expected=check, given=given_check)
        return False, ""

    return True, f"{body}{check}"
