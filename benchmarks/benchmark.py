"""
Benchmarks comparing deiter adapters with the standard library.

Run this with:
    uv run python benchmarks/benchmark.py

The standard library equivalents are written in C, so these numbers show
the overhead paid for double-ended traversal rather than a speedup.
"""

import itertools
import time
from collections.abc import Callable
from typing import Any

from deiter import de_range, flatten

# ---------------------------------------------------------------------------
# Shared data
# ---------------------------------------------------------------------------

WIDE = [list(range(10)) for _ in range(100_000)]
NARROW = [[x] for x in range(1_000_000)]
SPARSE = [[] if x % 4 else [x] for x in range(1_000_000)]


def _square(x: int) -> int:
    return x * x


def _is_even(x: int) -> bool:
    return x % 2 == 0


# ---------------------------------------------------------------------------
# Benchmark harness
# ---------------------------------------------------------------------------


def benchmark(
    name: str,
    deiter_fn: Callable[[], Any],
    stdlib_fn: Callable[[], Any],
    iterations: int = 3,
):
    """
    Benchmark a deiter function against its standard library equivalent.

    Args:
        name: Name of the benchmark
        deiter_fn: Function using deiter adapters
        stdlib_fn: Function using builtins and itertools
        iterations: Number of times to run each function

    Returns:
        The ratio of deiter time to standard library time
    """
    print(f"\n{'=' * 60}")
    print(f"Benchmark: {name}")
    print(f"{'=' * 60}")

    # Warm-up, and check both sides agree
    if deiter_fn() != stdlib_fn():
        raise RuntimeError(f"Results differ for benchmark: {name}")

    deiter_times = []
    for _ in range(iterations):
        start = time.perf_counter()
        deiter_fn()
        end = time.perf_counter()
        deiter_times.append(end - start)

    stdlib_times = []
    for _ in range(iterations):
        start = time.perf_counter()
        stdlib_fn()
        end = time.perf_counter()
        stdlib_times.append(end - start)

    avg_deiter = sum(deiter_times) / len(deiter_times)
    avg_stdlib = sum(stdlib_times) / len(stdlib_times)
    overhead = avg_deiter / avg_stdlib

    print(f"deiter (avg): {avg_deiter:.4f} seconds")
    print(f"stdlib (avg): {avg_stdlib:.4f} seconds")
    print(f"Overhead:     {overhead:.2f}x")

    return overhead


# ---------------------------------------------------------------------------
# Individual benchmarks
# ---------------------------------------------------------------------------


def bench_flatten_wide():
    """Benchmark: Flatten many ten-element inners from the front."""

    def deiter():
        return flatten(WIDE).count()

    def stdlib():
        return sum(1 for _ in itertools.chain.from_iterable(WIDE))

    return benchmark("Flatten Wide Inners", deiter, stdlib)


def bench_flatten_narrow():
    """Benchmark: Flatten single-element inners from the front."""

    def deiter():
        return flatten(NARROW).sum()

    def stdlib():
        return sum(itertools.chain.from_iterable(NARROW))

    return benchmark("Flatten Narrow Inners", deiter, stdlib)


def bench_flatten_sparse():
    """Benchmark: Flatten mostly empty inners."""

    def deiter():
        return flatten(SPARSE).collect()

    def stdlib():
        return list(itertools.chain.from_iterable(SPARSE))

    return benchmark("Flatten Sparse Inners", deiter, stdlib)


def bench_flatten_reversed():
    """Benchmark: Flatten from the back."""

    def deiter():
        return flatten(WIDE).rev().collect()

    def stdlib():
        return list(itertools.chain.from_iterable(map(reversed, reversed(WIDE))))

    return benchmark("Flatten Reversed", deiter, stdlib)


def bench_both_ends():
    """Benchmark: Alternate draws from both ends."""

    def deiter():
        it = flatten(WIDE)
        front, back = [], []
        try:
            while True:
                front.append(next(it))
                back.append(it.next_back())
        except StopIteration:
            pass
        return front + back[::-1]

    def stdlib():
        return list(itertools.chain.from_iterable(WIDE))

    return benchmark("Alternating Ends", deiter, stdlib)


def bench_pipeline():
    """Benchmark: Map and filter drawn from the back."""
    N = 1_000_000

    def deiter():
        return de_range(0, N).map(_square).filter(_is_even).rev().collect()

    def stdlib():
        return [x * x for x in reversed(range(N)) if (x * x) % 2 == 0]

    return benchmark("Reversed Pipeline", deiter, stdlib)


def main():
    """Run all benchmarks."""
    print("deiter Benchmarks")
    print("=" * 60)
    print("These benchmarks compare deiter with itertools and builtins.")
    print("=" * 60)

    overheads = []
    overheads.append(bench_flatten_wide())
    overheads.append(bench_flatten_narrow())
    overheads.append(bench_flatten_sparse())
    overheads.append(bench_flatten_reversed())
    overheads.append(bench_both_ends())
    overheads.append(bench_pipeline())

    # Summary
    print(f"\n{'=' * 60}")
    print("Summary")
    print(f"{'=' * 60}")
    avg_overhead = sum(overheads) / len(overheads)
    print(f"Average overhead: {avg_overhead:.2f}x")
    print(f"Best overhead:    {min(overheads):.2f}x")
    print(f"Worst overhead:   {max(overheads):.2f}x")


if __name__ == "__main__":
    main()
