"""
Numeric helpers shared by the complex-number type.
"""

import math


def double_compare(a: float, b: float) -> int:
    """
    Total-order comparison of two floats.

    Returns a negative number, zero or a positive number as ``a`` is less
    than, equal to or greater than ``b``. Signed zeros compare equal, NaN is
    equal to NaN and greater than every other value, ``+inf`` included.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    # at least one side is NaN
    return int(math.isnan(a)) - int(math.isnan(b))
