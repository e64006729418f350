#!/usr/bin/env python3
"""
Smooth numbers in ascending order, within the unsigned 64-bit range.

A k-smooth number is a positive integer whose prime factors are all <= k.
The sequences are built by merging the multiples of the generators over the
terms already produced (Dijkstra's construction of the Hamming numbers), so no
integer is ever factored or tested for primality.

Three entry points:
  pratt(n)               first n numbers 2^i * 3^j (OEIS A003586)
  smooth(k, n)           first n k-smooth numbers
  with_primes(primes, n) first n numbers whose factors are among 'primes'

Examples:
  # Every 3-smooth number below 2^64
  python smooth.py --pratt --all --plain

  # The first 20 5-smooth numbers, with a summary
  python smooth.py -k 5 -n 20 --stats

  # Numbers of the form 2^i * 5^j
  python smooth.py --primes 2 5 -n 10
"""

import argparse
import sys
from itertools import islice
from typing import Iterable, Iterator, Sequence

import numpy as np

from prime_numpy import primes_upto

U64_MAX = int(np.iinfo(np.uint64).max)


class SmoothOverflowError(OverflowError):
    """A candidate term does not fit in an unsigned 64-bit integer."""

    def __init__(self, factor: int, base: int, produced: int):
        self.factor = factor
        self.base = base
        self.produced = produced
        super().__init__(
            f"{factor} * {base} exceeds the uint64 range after {produced} terms"
        )

    def __reduce__(self):
        # rebuilt from the fields, not the message, when sent back from a worker process
        return type(self), (self.factor, self.base, self.produced)


def _checked_mul(factor: int, base: int, produced: int) -> int:
    value = factor * base
    if value > U64_MAX:
        raise SmoothOverflowError(factor, base, produced)
    return value


def _pratt_terms() -> Iterator[int]:
    v = [1]
    yield 1

    two = 0
    three = 0
    while True:
        times_two = _checked_mul(2, v[two], len(v))
        times_three = _checked_mul(3, v[three], len(v))
        if times_two < times_three:
            new = times_two
            two += 1
        elif times_two == times_three:
            new = times_two
            two += 1
            three += 1
        else:
            new = times_three
            three += 1
        v.append(new)
        yield new


def _power_terms(factor: int) -> Iterator[int]:
    x = 1
    produced = 1
    yield x
    while True:
        x = _checked_mul(factor, x, produced)
        produced += 1
        yield x


def _merge_terms(generators: Sequence[int]) -> Iterator[int]:
    """
    Merge the multiples g * v[cursor[g]] of every generator over the output v.

    Each step emits the smallest candidate and advances every cursor whose
    candidate equals it; advancing only one would emit the same value twice.
    All candidates are checked against the uint64 range, not just the minimum.
    """
    v = [1]
    yield 1

    cursors = [0] * len(generators)
    while True:
        produced = len(v)
        candidates = [
            _checked_mul(g, v[c], produced) for g, c in zip(generators, cursors)
        ]
        new = min(candidates)
        v.append(new)
        for j, candidate in enumerate(candidates):
            if candidate == new:
                cursors[j] += 1
        yield new


def _terms(generators: Sequence[int]) -> Iterator[int]:
    if not generators:
        return iter((1,))
    if len(generators) == 1:
        return _power_terms(generators[0])
    return _merge_terms(generators)


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must be non-negative, got {n}")


def _generators(primes: Iterable[int]) -> list[int]:
    generators = [int(p) for p in primes]
    for g in generators:
        if g < 0:
            raise ValueError(f"generators must be non-negative, got {g}")
    return generators


def _take(terms: Iterator[int], n: int) -> np.ndarray:
    return np.array(list(islice(terms, n)), dtype=np.uint64)


def _empty() -> np.ndarray:
    return np.array([], dtype=np.uint64)


def pratt(n: int) -> np.ndarray:
    """
    First 'n' numbers of Pratt's sequence, 2^i * 3^j in ascending order.

    These are the 3-smooth numbers, the best-known Shellsort gap sequence for
    worst-case time. Same result as smooth(3, n), without the sieve and the
    per-generator bookkeeping.
    """
    _check_count(n)
    if n == 0:
        return _empty()
    return _take(_pratt_terms(), n)


def smooth(k: int, n: int) -> np.ndarray:
    """
    First 'n' k-smooth numbers: every prime factor is <= k.

    With k < 2 no prime is allowed and the only such number is 1, so the
    result is [1] whatever n >= 1 is. With k == 2 these are the powers of 2.
    """
    _check_count(n)
    if n == 0:
        return _empty()
    if k < 0:
        raise ValueError(f"smoothness bound must be non-negative, got {k}")
    if k < 2:
        return np.array([1], dtype=np.uint64)
    if k == 2:
        return _take(_power_terms(2), n)
    return _take(_merge_terms(primes_upto(k)), n)


def with_primes(primes: Iterable[int], n: int) -> np.ndarray:
    """
    First 'n' numbers whose prime factors are all among 'primes'.

    'primes' is used as given: it is not checked for primality and duplicates
    are allowed. An empty list yields [1]; a single generator yields its powers.
    """
    _check_count(n)
    if n == 0:
        return _empty()
    return _take(_terms(_generators(primes)), n)


def max_count(primes: Iterable[int]) -> int:
    """
    Largest n for which with_primes(primes, n) does not overflow.

    with_primes(primes, max_count(primes) + 1) raises SmoothOverflowError.
    Every generator must be >= 2, otherwise the sequence stops growing and
    would never reach the limit. The terms are held in memory while counting,
    so this is only practical for small generator sets.
    """
    generators = _generators(primes)
    for g in generators:
        if g < 2:
            raise ValueError(f"generators must be >= 2 to reach the uint64 limit, got {g}")

    count = 0
    terms = _terms(generators)
    while True:
        try:
            next(terms)
        except (StopIteration, SmoothOverflowError):
            return count
        count += 1


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Print smooth numbers in ascending order (uint64 range).")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--pratt", action="store_true", help="Numbers 2^i * 3^j (default).")
    src.add_argument("-k", type=int, help="Numbers whose prime factors are all <= K.")
    src.add_argument("--primes", type=int, nargs="+", metavar="P",
                     help="Numbers whose prime factors are all among P.")
    cnt = ap.add_mutually_exclusive_group(required=True)
    cnt.add_argument("--count", "-n", type=int, help="Print the first N numbers.")
    cnt.add_argument("--all", action="store_true",
                     help="Print every number reachable without leaving the uint64 range.")
    ap.add_argument("--plain", action="store_true", help="Print bare values, one per line.")
    ap.add_argument("--stats", action="store_true", help="Print a summary at the end.")
    return ap


def _generator_set(args) -> list[int]:
    if args.primes is not None:
        return list(args.primes)
    if args.k is not None:
        return [] if args.k < 2 else primes_upto(args.k)
    return [2, 3]


def main(argv=None):
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    if args.count is not None and args.count < 0:
        ap.error("--count must be non-negative")
    if args.k is not None and args.k < 0:
        ap.error("-k must be non-negative")

    try:
        generators = _generator_set(args)
        n = max_count(generators) if args.all else args.count
        if args.primes is not None:
            seq = with_primes(generators, n)
        elif args.k is not None:
            seq = smooth(args.k, n)
        else:
            seq = pratt(n)
    except ValueError as e:
        ap.error(str(e))
    except SmoothOverflowError as e:
        sys.exit(f"error: {e}")

    width = len(str(len(seq)))
    for i, x in enumerate(seq.tolist(), start=1):
        if args.plain:
            print(x)
        else:
            print(f"{i:{width}}: {x}")

    if args.stats:
        print("--- stats ---")
        print(f"generators : {generators}")
        print(f"count      : {len(seq)}")
        if len(seq):
            print(f"first      : {int(seq[0])}")
            print(f"last       : {int(seq[-1])}")


if __name__ == "__main__":
    main()
