"""
Basic usage examples for deiter.

This demonstrates the core functionality of the double-ended iterators.
"""

import itertools

from deiter import de_range, flatten, into_iter


def example_flatten():
    """Example: Flattening nested sequences."""
    print("=== Flatten Example ===")

    nested = [[1, 2, 3], [], [4, 5], [6]]
    print(f"Forward: {flatten(nested).collect()}")
    print(f"Backward: {list(reversed(flatten(nested)))}")

    # Inner iterables can be of any sequence type
    words = flatten(["ab", ("c", "d"), range(3)]).collect()
    print(f"Mixed inners: {words}")


def example_both_ends():
    """Example: Drawing from both ends of the same adapter."""
    print("\n=== Both Ends Example ===")

    it = flatten([[1, 2, 3], [4, 5, 6]])
    print(f"Front: {next(it)}")
    print(f"Back: {it.next_back()}")
    print(f"Front: {next(it)}")
    print(f"Remaining: {it.collect()}")


def example_pipeline():
    """Example: Combinators drawn from the back."""
    print("\n=== Pipeline Example ===")

    # The three largest even squares below 100, largest first
    result = (
        de_range(0, 100)
        .map(lambda x: x * x)
        .filter(lambda x: x % 2 == 0 and x < 100)
        .rev()
    )
    print(f"Largest even squares: {list(itertools.islice(result, 3))}")

    total = into_iter([[1, 2], [3]]).flatten().rfold(0, lambda a, b: a * 10 + b)
    print(f"Digits folded from the back: {total}")


def example_lazy():
    """Example: Flattening an infinite outer iterator from the front."""
    print("\n=== Lazy Example ===")

    triangle = flatten(range(n) for n in itertools.count(1))
    print(f"First ten: {list(itertools.islice(triangle, 10))}")


def main():
    """Run all examples."""
    print("deiter - Double-Ended Lazy Iterators for Python\n")

    example_flatten()
    example_both_ends()
    example_pipeline()
    example_lazy()

    print("\n=== All Examples Complete ===")


if __name__ == "__main__":
    main()
