#!/usr/bin/env python3
"""
Benchmark: SimpleFraction arithmetic and approximation vs fractions.Fraction.

Sums of products for random fractions, then continued-fraction approximation
of random floats with limit_denominator as reference.
Prints timings of both implementations and resident memory.
"""

import argparse
import logging
import os
import random
import sys
import time
from fractions import Fraction

import psutil

sys.path.append('.')

from simplefrac.simple_fractions import SimpleFraction
from simplefrac.approximation import approximate

logging.basicConfig(level=logging.INFO, stream=sys.stdout, format='[%(process)d] %(asctime)s %(message)s')


def gen_pairs(rng, count, bound):
    for _ in range(count):
        yield (
            (rng.randint(-bound, bound), rng.randint(1, bound)),
            (rng.randint(-bound, bound), rng.randint(1, bound)),
        )


def run_arithmetic(cls, pairs):
    total = cls(0, 1)
    for (n1, d1), (n2, d2) in pairs:
        x = cls(n1, d1)
        y = cls(n2, d2)
        total = total + x * y - x
        if total > cls(10**6, 1):
            total = cls(0, 1)
    return total


def run_approximation(values, limit):
    return [approximate(value, limit) for value in values]


def run_limit_denominator(values, limit):
    return [Fraction(value).limit_denominator(limit) for value in values]


def timed(name, func, *args):
    start = time.time()
    res = func(*args)
    logging.info('%s: %.3fs', name, time.time() - start)
    return res


def main():
    argparser = argparse.ArgumentParser(description=__doc__)
    argparser.add_argument('--count', type=int, default=100000)
    argparser.add_argument('--bound', type=int, default=1000)
    argparser.add_argument('--limit', type=int, default=1000)
    argparser.add_argument('--seed', type=int, default=1)
    args = argparser.parse_args()

    rng = random.Random(args.seed)
    pairs = list(gen_pairs(rng, args.count, args.bound))
    values = [rng.uniform(-args.bound, args.bound) for _ in range(args.count)]

    ours = timed('SimpleFraction arithmetic', run_arithmetic, SimpleFraction, pairs)
    ref = timed('Fraction arithmetic', run_arithmetic, Fraction, pairs)
    assert (ours.n, ours.d) == (ref.numerator, ref.denominator)

    timed('approximate', run_approximation, values, args.limit)
    timed('limit_denominator', run_limit_denominator, values, args.limit)

    process = psutil.Process(os.getpid())
    print('RSS:', process.memory_info().rss)  # in bytes


if __name__ == "__main__":
    main()
