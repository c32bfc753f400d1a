#!/usr/bin/env python3
"""Profile the three multiplication strategies on random polynomials.

Run with: python profile_multiply.py [--length N] [--rounds R] [--seed S]
"""

import argparse
import time
from functools import wraps
from typing import Dict, List

import numpy as np

from polynomials import (
    multiply_fft,
    multiply_karatsuba,
    multiply_naive,
    normalize_product,
    random_polynomial,
)

# Global timing storage
TIMINGS: Dict[str, List[float]] = {}


def timed(name: str):
    """Decorator to time function execution."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            TIMINGS.setdefault(name, []).append(elapsed)
            return result
        return wrapper
    return decorator


STRATEGIES = {
    "naive": timed("multiply_naive")(multiply_naive),
    "karatsuba": timed("multiply_karatsuba")(multiply_karatsuba),
    "fft": timed("multiply_fft")(multiply_fft),
}


def warmup(rng: np.random.Generator, rounds: int = 10, length: int = 16) -> None:
    """Run every strategy a few times on small inputs, then forget the timings."""
    for _ in range(rounds):
        p1 = random_polynomial(rng, length)
        p2 = random_polynomial(rng, length)
        for multiply in STRATEGIES.values():
            multiply(p1, p2)
    TIMINGS.clear()


def benchmark(rng: np.random.Generator, rounds: int, length: int) -> bool:
    """Time each strategy on the same operands and check that they agree."""
    agreed = True
    for _ in range(rounds):
        p1 = random_polynomial(rng, length)
        p2 = random_polynomial(rng, length)

        naive = STRATEGIES["naive"](p1, p2)
        karatsuba = STRATEGIES["karatsuba"](p1, p2)
        fft = normalize_product(STRATEGIES["fft"](p1, p2))

        agreed &= naive == karatsuba and naive.approximate_equals(fft, "0.01")
    return agreed


def print_timings() -> None:
    """Print timing results."""
    print("\n" + "=" * 70)
    print("PERFORMANCE PROFILE")
    print("=" * 70)

    print(f"\n{'Function':<25} {'Total (s)':<12} {'Count':<8} {'Mean (s)':<12} {'Std (s)':<12}")
    print("-" * 70)

    for name, times in sorted(TIMINGS.items(), key=lambda kv: -sum(kv[1])):
        samples = np.asarray(times)
        print(f"{name:<25} {samples.sum():<12.3f} {len(samples):<8} "
              f"{samples.mean():<12.4f} {samples.std():<12.4f}")

    print("=" * 70)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--length", type=int, default=256, help="coefficients per operand")
    parser.add_argument("--rounds", type=int, default=5, help="timed products per strategy")
    parser.add_argument("--seed", type=int, default=13, help="random seed")
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    print("Warming up...")
    warmup(rng)

    print(f"Benchmarking {args.rounds} products of length {args.length}...")
    agreed = benchmark(rng, args.rounds, args.length)
    print_timings()
    print(f"Strategies agree: {agreed}")


if __name__ == "__main__":
    main()
