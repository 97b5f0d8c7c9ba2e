"""Benchmark StaticPool insert/get/release on the local machine.

Fills a pool of the given capacity, then times N cycles of
release + insert + get against a slot in the middle of the table (the
insert scan has to walk past the occupied slots in front of it). Slots are
reset whenever the cycled slot's generation saturates.

Usage (with the package installed, e.g. `pip install -e .`):
  python scripts/benchmark_pool.py --capacity 4096 --runs 10000
  python scripts/benchmark_pool.py --config path/to/config_dir
"""

import argparse
import os
import time

import numpy as np

from static_pool import MAX_GENERATION, NoAvailableSlots, PoolConfig, StaticPool
from static_pool.logger import configure_logging, get_logger

log = get_logger("benchmark")


def run_bench(capacity: int, runs: int = 10_000, warn_threshold: int = 0) -> dict:
    """Time *runs* release/insert/get cycles; return stats in milliseconds."""
    pool = StaticPool(capacity, warn_threshold)
    handles = [pool.insert(i) for i in range(capacity)]
    target = capacity // 2
    handle = handles[target]

    # Warmup
    for _ in range(3):
        pool.get(handle)

    times = np.zeros(runs, dtype=np.float64)
    resets = 0
    for i in range(runs):
        t0 = time.perf_counter()
        pool.release(handle)
        try:
            handle = pool.insert(i)
        except NoAvailableSlots:
            # cycled slot saturated; reclaim it and carry on
            pool.reset(slot=target)
            resets += 1
            handle = pool.insert(i)
        pool.get(handle)
        times[i] = time.perf_counter() - t0

    return {
        "capacity": capacity,
        "runs": runs,
        "resets": resets,
        "mean_ms": float(times.mean() * 1000),
        "median_ms": float(np.median(times) * 1000),
        "p95_ms": float(np.percentile(times, 95) * 1000),
    }


def main():
    p = argparse.ArgumentParser(description="StaticPool insert/get/release benchmark")
    p.add_argument("--capacity", type=int, default=None, help="slot count (default: from config)")
    p.add_argument("--runs", type=int, default=10_000)
    p.add_argument("--config", default=None, help="directory holding static_pool.json")
    args = p.parse_args()
    if args.config is not None and not os.path.isdir(args.config):
        print("Config directory not found:", args.config)
        return

    config = PoolConfig(args.config)
    configure_logging(config.get_log_dir(), config.get_log_level())
    capacity = args.capacity if args.capacity is not None else config.get_capacity()

    stats = run_bench(capacity, args.runs, config.get_reusable_warn_threshold())
    log.info("Capacity: %d, runs: %d, resets: %d (every %d cycles)",
             stats["capacity"], stats["runs"], stats["resets"], MAX_GENERATION)
    log.info("Mean: %.4f ms, Median: %.4f ms, 95th: %.4f ms",
             stats["mean_ms"], stats["median_ms"], stats["p95_ms"])


if __name__ == "__main__":
    main()
