"""

Class for rational numbers.

A rational number is the ratio of two integers. Examples of rational numbers
include...

- 3/2
- -1/2
- 4/6 (stored as 2/3)

Rational numbers are always normalized: the numerator and denominator have no
common factor and the denominator is positive.

"""

import logging
import operator

logger = logging.getLogger(__name__)


class RationalError(ArithmeticError):
    """Base class for the errors raised by `Rational`"""


class ZeroDenominatorError(RationalError, ZeroDivisionError):
    """A rational was constructed with a zero denominator"""


class DivisionByZeroValueError(RationalError, ZeroDivisionError):
    """A rational was divided by the rational zero"""


def gcd(x, y):
    """Return the greatest common divisor of `x` and `y`

    Euclid's algorithm. Both arguments are expected to be non-negative.

    >>> x = 4
    >>> y = 6

    """
    while y != 0:
        x, y = y, x % y
    return x


class Rational:
    """A ratio of two integers kept in lowest terms"""

    __slots__ = ('_n', '_d')

    def __init__(self, numerator, denominator=1):
        """Constructor

        Args:
            numerator (int): the numerator
            denominator (int): the denominator, must not be zero

        Raises:
            ZeroDenominatorError: if `denominator` is zero

        >>> self = Rational.__new__(Rational)
        >>> numerator = 4
        >>> denominator = -6

        """
        n = operator.index(numerator)
        d = operator.index(denominator)
        if d == 0:
            logger.debug(f'Refusing to build {n}/{d}')
            raise ZeroDenominatorError('Denominator is zero!')

        negative = (n < 0) != (d < 0)
        g = gcd(abs(n), abs(d))
        n, d = abs(n) // g, abs(d) // g
        if negative:
            n = -n
        self._n = n
        self._d = d

    @classmethod
    def from_integer(cls, n):
        return cls(n, 1)

    @classmethod
    def _coerce(cls, other):
        """Return `other` as a `Rational` or None if it can't be one"""
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return cls.from_integer(other)
        return None

    @property
    def numerator(self):
        return self._n

    @property
    def denominator(self):
        return self._d

    def is_negative(self):
        return self._n < 0

    def is_positive(self):
        """Zero counts as positive"""
        return not self.is_negative()

    def __str__(self):
        if self._d == 1:
            return f'{self._n}'
        return f'{self._n}/{self._d}'

    def __repr__(self):
        return f'{self.__class__.__name__}({self._n}, {self._d})'

    def __hash__(self):
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    # Comparison

    def _cross(self, other):
        """Return the cross products used to compare `self` with `other`

        Both denominators are positive so the products compare the same way
        the rationals do.

        >>> self = Rational(1, 3)
        >>> other = Rational(1, 2)

        """
        return self._n * other._d, other._n * self._d

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._n == other._n and self._d == other._d

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b = self._cross(other)
        return a < b

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b = self._cross(other)
        return a <= b

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b = self._cross(other)
        return a > b

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        a, b = self._cross(other)
        return a >= b

    # Arithmetic

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._n * other._d + self._d * other._n, self._d * other._d)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._n * other._d - self._d * other._n, self._d * other._d)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._n * other._n, self._d * other._d)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide `self` by `other`

        Raises:
            DivisionByZeroValueError: if `other` is zero

        >>> self = Rational(1, 2)
        >>> other = Rational(0, 4)

        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._n == 0:
            logger.debug(f'Refusing to divide {self} by zero')
            raise DivisionByZeroValueError('RHS numerator is zero!')
        return Rational(self._n * other._d, other._n * self._d)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __iadd__(self, other):
        return self + other

    def __isub__(self, other):
        return self - other

    def negate(self):
        """Return the additive inverse"""
        if self.is_positive():
            return Rational(-self._n, self._d)
        return Rational(abs(self._n), abs(self._d))

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational(abs(self._n), self._d)

    def __bool__(self):
        return self._n != 0

    def __float__(self):
        return self._n / self._d

    def __int__(self):
        # truncate toward zero
        q = abs(self._n) // self._d
        return -q if self._n < 0 else q
