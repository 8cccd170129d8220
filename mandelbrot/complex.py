import math
import numbers
from dataclasses import dataclass

import numpy as np

from .helpers import double_compare


@dataclass(frozen=True, eq=False)
class Complex:
    """
    An immutable complex number ``real + imaginary·i``.

    Constructors
    ------------
    Complex(a, b)                 -> a + b i
    Complex.from_real(x)          -> x + 0 i
    Complex.rotation(theta)       -> e^{iθ}          (unit circle)
    Complex.from_polar(r, theta)  -> r·e^{iθ}
    Complex.coerce(value)         -> from a number, pair or numpy value

    Every operation returns a new value. Equality is exact and componentwise
    (see ``helpers.double_compare``); use ``is_close`` for tolerant checks.
    """

    real: float
    imaginary: float

    def __post_init__(self) -> None:
        for name in ("real", "imaginary"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real):
                raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imaginary", float(self.imaginary))

    # ---------- convenience makers ----------
    @classmethod
    def from_real(cls, real: float) -> "Complex":
        """The complex ``real + 0 i``."""
        return cls(real, 0.0)

    @classmethod
    def rotation(cls, radians: float) -> "Complex":
        """Unit-modulus complex at angle ``radians``."""
        return cls(math.cos(radians), math.sin(radians))

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def coerce(cls, value) -> "Complex":
        """
        Build a Complex from a Complex, a real number, a builtin or numpy
        complex scalar, or a ``(real, imaginary)`` list/tuple/array.
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, numbers.Real):
            return cls.from_real(value)
        if isinstance(value, numbers.Complex):
            return cls(value.real, value.imag)
        if isinstance(value, (list, tuple, np.ndarray)):
            if np.iscomplexobj(value):
                values = np.asarray(value).ravel()
                if values.size != 1:
                    raise TypeError(f"Complex-valued array must hold one element, got {values.size}")
                return cls(values[0].real, values[0].imag)
            pair = np.asarray(value, dtype=np.float64).ravel()
            if pair.size != 2:
                raise ValueError(f"Expected (real, imaginary) pair, got {pair.size} values")
            return cls(pair[0], pair[1])
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")

    # ---------- basic properties ----------
    def squared_modulus(self) -> float:
        return (self.real * self.real) + (self.imaginary * self.imaginary)

    def modulus(self) -> float:
        return math.sqrt(self.squared_modulus())

    def argument(self) -> float:
        return math.atan2(self.imaginary, self.real)

    # ---------- arithmetic ----------
    def add(self, addend: "Complex") -> "Complex":
        return Complex(self.real + addend.real, self.imaginary + addend.imaginary)

    def subtract(self, subtrahend: "Complex") -> "Complex":
        return Complex(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def negate(self) -> "Complex":
        """A complex ``c`` such that ``self + c == 0``."""
        return Complex(-self.real, -self.imaginary)

    def conjugate(self) -> "Complex":
        """A complex ``c`` such that ``self * c == |self|**2``."""
        return Complex(self.real, -self.imaginary)

    def multiply(self, factor: "Complex") -> "Complex":
        return Complex(self.real * factor.real - self.imaginary * factor.imaginary,
                       self.real * factor.imaginary + self.imaginary * factor.real)

    def scale(self, lam: float) -> "Complex":
        """Scalar multiplication ``lam * self``."""
        return Complex(lam * self.real, lam * self.imaginary)

    def reciprocal(self) -> "Complex":
        """
        A complex ``c`` such that ``self * c == 1``.

        Raises
        ------
        ZeroDivisionError
            If ``self`` is zero.
        """
        if self == ZERO:
            raise ZeroDivisionError("divide by zero")
        m = self.squared_modulus()
        if m == 0:
            raise ZeroDivisionError("divide by zero")
        return Complex(self.real / m, -self.imaginary / m)

    def divide(self, divisor: "Complex") -> "Complex":
        """
        The complex ``self / divisor``.

        Raises
        ------
        ZeroDivisionError
            If ``divisor`` is zero.
        """
        if divisor == ZERO:
            raise ZeroDivisionError("divide by zero")
        m = divisor.squared_modulus()
        if m == 0:
            raise ZeroDivisionError("divide by zero")
        return Complex((self.real * divisor.real + self.imaginary * divisor.imaginary) / m,
                       (self.imaginary * divisor.real - self.real * divisor.imaginary) / m)

    def power(self, p: int) -> "Complex":
        """
        ``self ** p`` by repeated squaring, for integer ``p >= 0``.

        ``0 ** 0`` is ``ONE``. Booleans are not exponents.
        """
        if isinstance(p, bool) or not isinstance(p, numbers.Integral):
            raise TypeError(f"Exponent must be an integer, got {type(p).__name__}")
        p = int(p)
        if p < 0:
            raise ValueError(f"Exponent must be non-negative, got {p}")
        result, base = ONE, self
        while p:
            if p & 1:
                result = result.multiply(base)
            base = base.multiply(base)
            p >>= 1
        return result

    # ---------- comparison ----------
    def is_close(self, other: "Complex", *, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        return (math.isclose(self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.imaginary, other.imaginary, rel_tol=rel_tol, abs_tol=abs_tol))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Complex):
            return NotImplemented
        return (double_compare(self.real, other.real) == 0
                and double_compare(self.imaginary, other.imaginary) == 0)

    def __hash__(self):
        return hash((_hash_key(self.real), _hash_key(self.imaginary)))

    # ---------- conversions ----------
    def to_array(self) -> np.ndarray:
        """``[real, imaginary]`` as a float64 array."""
        return np.array([self.real, self.imaginary], dtype=np.float64)

    def __complex__(self):
        return complex(self.real, self.imaginary)

    # ---------- dunder sugar ----------
    def __add__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = _promote(other)
        return NotImplemented if other is None else other.divide(self)

    __pow__ = power
    __neg__ = negate
    __abs__ = modulus

    # debug output, not meant to be parsed back
    def __str__(self):
        return f"Complex{{real={self.real!r}, imaginary={self.imaginary!r}}}"


def _promote(value):
    """Complex operand for the operators, or None when unsupported."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex.from_real(value)
    return None


def _hash_key(x: float):
    # NaN hashes by identity and -0.0 == 0.0, so fold both to a fixed key
    if math.isnan(x):
        return "nan"
    return 0.0 if x == 0 else x


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)

Complex.ZERO = ZERO
Complex.ONE = ONE
Complex.I = I


if __name__ == "__main__":
    z1 = Complex(3, 4)                         # 3 + 4i
    z2 = Complex.rotation(math.pi / 4)         # e^{iπ/4}
    print(z1.modulus())                        # 5.0
    print(z1.add(z2))
    print(z1 * z2)                             # operator sugar for multiply
    print(z1.reciprocal())
    print(Complex(1, 2).power(10))
    print(I.power(2))                          # -1 + 0i
