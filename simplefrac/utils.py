# coding: utf-8

# gcd(a, 0) = |a|, gcd(0, 0) = 0: the result is never negative
from math import gcd


def trunc_divmod(a, b):
    """
    Division with quotient truncated toward zero.

    Returns q, r with a == q * b + r, r has the sign of a (or is zero).
    Unlike divmod, which floors; b == 0 raises ZeroDivisionError as divmod does.
    """
    q, r = divmod(abs(a), abs(b))
    if (a < 0) != (b < 0):
        q = -q
    if a < 0:
        r = -r
    return q, r
