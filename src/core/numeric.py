"""Numeric helpers shared by the calculators.

Rounding here is half-up on the exact binary value of the float, with
negative halves going toward positive infinity. That is the rounding the
bills and averages have always been quoted in, and differs from Python's
built-in ``round`` (half-to-even) only on exact ties.
"""

import math
from decimal import Decimal, ROUND_HALF_DOWN, ROUND_HALF_UP
from typing import Any, Union

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """True for ints and floats that are not bools and not NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_finite_number(value: Any) -> bool:
    """True for numbers that are also finite."""
    return is_number(value) and math.isfinite(value)


def round_half_up(value: Number, places: int = 0) -> Number:
    """Round to ``places`` decimals, ties toward positive infinity.

    Args:
        value: Finite number to round
        places: Number of decimal places (0 returns an int)

    Returns:
        Rounded value; an int when places is 0, otherwise a float

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(0.125, 2)
        0.13
    """
    exponent = Decimal(1).scaleb(-places)
    exact = Decimal(value)
    if exact >= 0:
        rounded = exact.quantize(exponent, rounding=ROUND_HALF_UP)
    else:
        rounded = -((-exact).quantize(exponent, rounding=ROUND_HALF_DOWN))

    if places == 0:
        return int(rounded)
    return float(rounded)
