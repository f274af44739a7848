from enum import IntEnum

from .utils import gcd, trunc_divmod


class Ordering(IntEnum):
    LT = -1
    EQ = 0
    GT = 1


class SimpleFraction:
    """
    Simple fraction n/d with integer numerator and denominator.

    Immutable and hashable.
    The constructor is the only way to get a fraction: it moves the sign to the numerator
    and reduces to lowest terms, so d >= 0 and gcd(n, d) == 1 for every instance.

    Zero denominator is not an error: n/0 becomes the signed "infinity" 1/0 or -1/0,
    and 0/0 is kept as a separate sentinel.
    """

    def __init__(self, n, d):
        if d < 0:
            n = -n
            d = -d
        g = gcd(n, d)
        if g == 0:
            # 0/0: nothing to reduce
            self.n = 0
            self.d = 0
        else:
            self.n = n // g
            self.d = d // g

    @classmethod
    def convert(cls, x):
        res = _as_fraction(x)
        if res is None:
            raise TypeError("Can't convert {!r} to {}".format(x, cls.__name__))
        return res

    @property
    def numerator(self):
        return self.n

    @property
    def denominator(self):
        return self.d

    def reciprocal(self):
        return SimpleFraction(self.d, self.n)

    def is_integer(self):
        return self.d == 1

    def __gt__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return compare(self, other) is Ordering.GT

    def __ge__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return compare(self, other) is not Ordering.LT

    def __lt__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return compare(self, other) is Ordering.LT

    def __le__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return compare(self, other) is not Ordering.GT

    def __eq__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return (self.n, self.d) == (other.n, other.d)

    def __hash__(self):
        # integers must hash as the equal int does
        if self.d == 1:
            return hash(self.n)
        return hash((self.n, self.d))

    def __neg__(self):
        return SimpleFraction(-self.n, self.d)

    def __pos__(self):
        return self

    def __abs__(self):
        return SimpleFraction(abs(self.n), self.d)

    def __add__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        other = _as_fraction(other)
        if other is None:
            return NotImplemented
        return divide(other, self)

    def __pow__(self, power):
        if not isinstance(power, int):
            return NotImplemented
        if power < 0:
            return SimpleFraction(self.d**-power, self.n**-power)
        return SimpleFraction(self.n**power, self.d**power)

    def __float__(self):
        return to_float(self)

    def __int__(self):
        whole, _ = to_mixed_numbers(self)
        return whole

    def __bool__(self):
        return self.n != 0

    def __repr__(self):
        return 'SimpleFraction({}, {})'.format(self.n, self.d)


def _as_fraction(x):
    """SimpleFraction for a fraction or an int, None for anything else."""
    if isinstance(x, SimpleFraction):
        return x
    elif isinstance(x, int) and not isinstance(x, bool):
        return from_int(x)
    return None


def from_int(n):
    return SimpleFraction(n, 1)


def numerator(fraction):
    return fraction.n


def denominator(fraction):
    return fraction.d


def to_float(fraction):
    """Float value; 0.0 for all zero-denominator sentinels."""
    if fraction.d == 0:
        return 0.0
    return fraction.n / fraction.d


def to_mixed_numbers(fraction):
    """
    Split fraction into whole part and proper fraction.

    Division is truncated toward zero, so both parts have the sign of the fraction:
    -7/2 -> (-3, -1/2). The sentinels have no whole part: n/0 -> (0, n/0).
    Returning the sentinel itself, not 0/0, keeps whole + part equal to the fraction.
    """
    if fraction.d == 0:
        return 0, fraction
    whole, rest = trunc_divmod(fraction.n, fraction.d)
    return whole, SimpleFraction(rest, fraction.d)


def multiply(one, other):
    return SimpleFraction(one.n * other.n, one.d * other.d)


def divide(one, other):
    return SimpleFraction(one.n * other.d, one.d * other.n)


def _scaled_denominators(one, other):
    # g divides both denominators, so the products below are exact but smaller
    g = gcd(one.d, other.d) or 1
    return one.d // g, other.d // g


def add(one, other):
    one_d, other_d = _scaled_denominators(one, other)
    return SimpleFraction(one.n * other_d + other.n * one_d, one_d * other.d)


def subtract(one, other):
    one_d, other_d = _scaled_denominators(one, other)
    return SimpleFraction(one.n * other_d - other.n * one_d, one_d * other.d)


def compare(one, other):
    """
    Compare values of two fractions, returns Ordering.

    Signs are checked first; for numerators of the same sign we compare
    cross products, divided by the gcd of numerators.
    Infinities 1/0 and -1/0 are greater/less than all other fractions;
    0/0 compares EQ to zero and to all positive fractions.
    """
    if (one.n, one.d) == (other.n, other.d):
        return Ordering.EQ
    if one.n >= 0 and other.n < 0:
        return Ordering.GT
    if other.n >= 0 and one.n < 0:
        return Ordering.LT

    # both numerators are zero only for 0/1 vs 0/0
    g = gcd(one.n, other.n) or 1
    lhs = other.d * (one.n // g)
    rhs = one.d * (other.n // g)
    if lhs < rhs:
        return Ordering.LT
    elif lhs > rhs:
        return Ordering.GT
    return Ordering.EQ
