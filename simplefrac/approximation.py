"""
Approximation of floats by simple fractions.

We expand the value into continued fraction and take the last convergent
whose denominator fits the limit. The expansion is done on integers:
the float is scaled by `scale` and rounded, hence only log10(scale) decimal
digits of the value are taken into account.
"""

import logging
import math

from .simple_fractions import SimpleFraction

PRECISION_SCALE = 10**5


def _check_scale(scale):
    if isinstance(scale, bool) or not isinstance(scale, int) or scale <= 0:
        raise ValueError("Scale must be a positive integer, got {!r}".format(scale))


def gen_partial_quotients(value, scale=PRECISION_SCALE):
    """
    Generate terms a0, a1, ... of the continued fraction of abs(value).

    Let x0 = round(|value| * scale); then
      a_k = x_k // scale,  x_{k+1} = scale**2 // (x_k - a_k * scale)
    We stop when the residual x_k - a_k * scale vanishes.
    Residuals are bounded by scale, so they may cycle: the generator is infinite then.
    """
    _check_scale(scale)
    if not math.isfinite(value):
        raise ValueError("Can't expand non-finite value {!r}".format(value))

    # split off the integer part, so that huge values are not scaled as floats
    whole = int(abs(value))
    # round half away from zero
    x = whole * scale + int((abs(value) - whole) * scale + 0.5)
    while True:
        a = x // scale
        yield a
        residual = x - a * scale
        if residual == 0:
            return
        # 0 < residual < scale, so the next term is at least 1
        x = scale * scale // residual


def gen_convergents(value, scale=PRECISION_SCALE):
    """
    Generate convergents of the continued fraction of value.

    Convergents p_k/q_k are already in lowest terms and q_k strictly increase for k >= 1.
    Negative value gives negated convergents of abs(value).
    """
    sign = -1 if value < 0 else 1
    # (p_{k-1}, q_{k-1}), (p_{k-2}, q_{k-2})
    n1, d1 = 1, 0
    n2, d2 = 0, 1
    for a in gen_partial_quotients(value, scale):
        n1, d1, n2, d2 = a * n1 + n2, a * d1 + d2, n1, d1
        yield SimpleFraction(sign * n1, d1)


def approximate(value, max_denominator, scale=PRECISION_SCALE):
    """
    Best simple fraction for float value with denominator <= max_denominator.

    Returns the last convergent that fits the limit, e.g.,
    approximate(3.1415926, 10) == 22/7, approximate(3.1415926, 150) == 355/113.
    The limit is at least 1, i.e., the integer part is always acceptable.
    Infinities give 1/0 and -1/0, nan gives 0/0.
    """
    _check_scale(scale)
    if math.isnan(value):
        return SimpleFraction(0, 0)
    if math.isinf(value):
        return SimpleFraction(1 if value > 0 else -1, 0)
    max_denominator = max(max_denominator, 1)

    best = None
    for step, conv in enumerate(gen_convergents(value, scale)):
        if conv.d > max_denominator:
            logging.debug('approximate: step %d, denominator %d exceeds %d', step, conv.d, max_denominator)
            break
        best = conv
        logging.debug('approximate: step %d, convergent %d/%d', step, conv.n, conv.d)
    else:
        logging.debug('approximate: expansion of %r terminated', value)
    return best
