#!/usr/bin/env python3
"""
Memory usage report for the rolling time window.

Feeds increasing numbers of random observations into a fresh window and
prints the peak traced memory for each run. Nothing is asserted.
"""

import argparse
import gc
import logging
import random
import tracemalloc

from rollingtime.window import RollingWindow

logger = logging.getLogger("rollingtime.memory_report")

DEFAULT_SIZES = [1, 1_000, 1_000_000]


def generate(window: RollingWindow, n: int, rng: random.Random) -> None:
    """
    Put ``n`` random observations into ``window``.

    Each timestamp is the previous one plus a random integer in [1, tau),
    each value a random float in [0, 1).
    """
    previous = 0
    upper = max(2, int(window.tau))
    for _ in range(n):
        timestamp = previous + rng.randrange(1, upper)
        window.put(timestamp, rng.random())
        previous = timestamp


def measure(n: int, tau: float, seed: int) -> float:
    """Return peak traced memory in MB for a run of ``n`` observations."""
    gc.collect()
    tracemalloc.start()
    try:
        window = RollingWindow(tau)
        generate(window, n, random.Random(seed))
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return peak / 1024 / 1024


def main(argv=None):
    parser = argparse.ArgumentParser(description="Report rolling window memory usage")
    parser.add_argument("--tau", type=float, default=60, help="Window duration (default: 60)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=DEFAULT_SIZES,
        help="Observation counts to measure (default: 1 1000 1000000)"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    for n in args.sizes:
        used = measure(n, args.tau, args.seed)
        logger.info("%s observation(s) used approx. %.2f MB", f"{n:,}", used)


if __name__ == "__main__":
    main()
