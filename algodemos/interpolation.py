"""Interpolation search over a sorted list of random integers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence


def interpolation_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high and values[low] <= key <= values[high]:
        if values[low] == values[high]:
            return low if values[low] == key else None
        pos = low + int(
            (high - low) / (values[high] - values[low]) * (key - values[low])
        )
        if values[pos] == key:
            return pos
        if values[pos] < key:
            low = pos + 1
        else:
            high = pos - 1
    return None


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            continue


def main(argv: Sequence[str] | None = None) -> int:
    """Generate numbers, sort them and search for one the user enters."""
    argparse.ArgumentParser(description="Interpolation search demonstration.").parse_args(argv)
    try:
        count = _read_int("Enter the number of random integers: ")
        if count < 0:
            print("The number of integers cannot be negative.")
            return 1
        numbers = [random.randrange(100) for _ in range(count)]
        print("Generated numbers: " + "".join(f"{n} " for n in numbers))
        numbers.sort()
        print("Sorted numbers: " + "".join(f"{n} " for n in numbers))
        key = _read_int("Enter a number to search: ")
    except EOFError:
        return 0

    index = interpolation_search(numbers, key)
    if index is not None:
        print(f"Element found at index: {index}")
    else:
        print("Element not found!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())