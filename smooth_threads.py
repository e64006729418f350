#!/usr/bin/env python3
import argparse
import sys
from concurrent.futures import ProcessPoolExecutor, as_completed

import numpy as np

from smooth import SmoothOverflowError, smooth


def smooth_worker(idx: int, k: int, n: int):
    """
    Worker: compute smooth(k, n) for one request.
    Returns (idx, sequence) so the parent can restore submission order.
    """
    return idx, smooth(k, n)


def summarize(seq: np.ndarray, keep: int = 10) -> dict:
    """
    Compact view of a sequence:
      {
        "count": number of terms,
        "first": up to the first 'keep' terms,
        "last": up to the last 'keep' terms,
      }
    """
    count = int(seq.size)
    k = keep if count >= keep else count
    if k == 0:
        return {"count": 0, "first": [], "last": []}
    return {"count": count, "first": seq[:k].tolist(), "last": seq[-k:].tolist()}


def batch_smooth(ks, n: int, workers=None) -> list:
    """
    Run smooth(k, n) for every k in 'ks' across worker processes.
    Results come back in the order of 'ks'. An overflow in any request is
    re-raised here.
    """
    ks = list(ks)
    if not ks:
        return []

    futures = []
    with ProcessPoolExecutor(max_workers=workers) as ex:
        for idx, k in enumerate(ks):
            futures.append(ex.submit(smooth_worker, idx, k, n))

        # Collect results; store by idx to restore order
        by_idx = {}
        for fut in as_completed(futures):
            idx, seq = fut.result()
            by_idx[idx] = seq

    return [by_idx[idx] for idx in range(len(ks))]


def main(argv=None):
    ap = argparse.ArgumentParser(description="Multiprocess k-smooth generation, one request per worker.")
    ap.add_argument("--k", type=int, nargs="+", required=True, help="Smoothness bounds to compute.")
    ap.add_argument("--count", "-n", type=int, required=True, help="Terms per bound.")
    ap.add_argument("--workers", type=int, default=0,
                    help="Number of worker processes (default: os.cpu_count()).")
    ap.add_argument("--keep", type=int, default=10, help="Terms shown at each end (default: 10).")
    args = ap.parse_args(argv)

    workers = args.workers if args.workers and args.workers > 0 else None  # None -> use cpu_count()

    try:
        results = batch_smooth(args.k, args.count, workers)
    except ValueError as e:
        ap.error(str(e))
    except SmoothOverflowError as e:
        sys.exit(f"error: {e}")

    print(f"Mode: {args.count:,} terms per bound | Workers: {workers or 'auto'} | Bounds: {args.k}")
    for k, seq in zip(args.k, results):
        res = summarize(seq, args.keep)
        print(f"\n{k}-smooth: {res['count']:,} terms")
        print("First:", ", ".join(map(str, res["first"])))
        print("Last: ", ", ".join(map(str, res["last"])))


if __name__ == "__main__":
    main()
