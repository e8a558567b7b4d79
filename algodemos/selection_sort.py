"""Selection sort of random integers, driven by a small menu."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence

_DISPLAY_LIMIT = 20
_EDGE_COUNT = 5


def selection_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using selection sort."""
    result = list(values)
    for i in range(len(result) - 1):
        min_idx = min(range(i, len(result)), key=result.__getitem__)
        if min_idx != i:
            result[i], result[min_idx] = result[min_idx], result[i]
    return result


def generate_random_numbers(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers in ``[0, 100]``."""
    rng = rng or random.Random()
    return [rng.randint(0, 100) for _ in range(count)]


def _joined(values: Sequence[int]) -> str:
    return "".join(f"{n} " for n in values)


def format_array(values: Sequence[int], label: str) -> str:
    """Render ``values`` under ``label``; long arrays show only their ends."""
    if len(values) <= _DISPLAY_LIMIT:
        return f"{label}:\n{_joined(values)}\n"
    return (
        f"{label}:\n"
        f"Array is too large to display entirely. "
        f"Showing first and last {_EDGE_COUNT} elements.\n"
        f"First {_EDGE_COUNT} elements: {_joined(values[:_EDGE_COUNT])}\n"
        f"Last {_EDGE_COUNT} elements: {_joined(values[-_EDGE_COUNT:])}\n"
    )


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu."""
    argparse.ArgumentParser(description="Selection sort demonstration.").parse_args(argv)
    numbers: list[int] = []
    try:
        while True:
            print("\nMenu:\n1. Set N and generate random numbers\n"
                  "2. Sort using Selection Sort\n3. Exit")
            choice = _read_int("Enter choice: ")
            if choice == 1:
                count = _read_int("Enter N (positive integer): ")
                if count is None or count <= 0:
                    print("N must be positive.")
                    continue
                numbers = generate_random_numbers(count)
                print(f"Generated {count} random numbers.")
                print(format_array(numbers, "Unsorted array"), end="")
            elif choice == 2:
                if not numbers:
                    print("Please generate numbers first.")
                    continue
                start = time.perf_counter()
                numbers = selection_sort(numbers)
                elapsed_ms = (time.perf_counter() - start) * 1000
                print(f"Selection Sort took {elapsed_ms:g} ms.")
                print(format_array(numbers, "Sorted array"), end="")
            elif choice == 3:
                print("Exiting.")
                return 0
            else:
                print("Invalid choice.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())