#!/usr/bin/env python3
"""Prime sieve used to derive the generator set of k-smooth numbers."""
import argparse

import numpy as np


def simple_sieve(limit: int) -> np.ndarray:
    """Classic sieve up to 'limit' (inclusive), returns primes as int64 numpy array."""
    if limit < 2:
        return np.array([], dtype=np.int64)
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False
    r = int(limit ** 0.5)
    for p in range(2, r + 1):
        if is_prime[p]:
            is_prime[p * p : limit + 1 : p] = False
    return np.flatnonzero(is_prime).astype(np.int64)


def primes_upto(limit: int) -> list[int]:
    """Primes in [2, limit], ascending, as Python ints.

    The merge multiplies these values, so they must not stay numpy scalars:
    int64 arithmetic would wrap instead of growing.
    """
    return simple_sieve(limit).tolist()


def main(argv=None):
    ap = argparse.ArgumentParser(description="List the primes usable as smooth-number generators.")
    ap.add_argument("--limit", type=int, required=True, help="Generate all primes <= LIMIT.")
    args = ap.parse_args(argv)

    primes = primes_upto(args.limit)
    print(f"Found {len(primes)} prime numbers <= {args.limit:,}.")
    print(", ".join(map(str, primes)))


if __name__ == "__main__":
    main()
