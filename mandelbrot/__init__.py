"""
Immutable complex-number arithmetic for the Mandelbrot renderer.
"""

from .complex import I, ONE, ZERO, Complex
from .helpers import double_compare

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I",
    "double_compare",
]
