"""Binary search over randomly generated integers, with a timing analysis."""

from __future__ import annotations

import argparse
import csv
import math
import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ANALYSIS_PATH = "binary_search_analysis.csv"
DEFAULT_SIZES = (100, 500, 1000, 5000, 10000, 50000, 100000)
CSV_HEADER = (
    "Input Size",
    "Best Case (ns)",
    "Average Case (ns)",
    "Worst Case (ns)",
    "Theoretical Log2(N)",
)


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def generate_random_numbers(
    count: int,
    low: int = 1,
    high: int = 1000,
    rng: random.Random | None = None,
) -> list[int]:
    """Return ``count`` random integers drawn uniformly from ``[low, high]``."""
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(count)]


@dataclass(frozen=True)
class AnalysisRow:
    """Timings of one input size, in nanoseconds."""

    size: int
    best_ns: int
    average_ns: int
    worst_ns: int
    log2: float


def _time_search(values: Sequence[int], target: int) -> int:
    start = time.perf_counter_ns()
    binary_search(values, target)
    return time.perf_counter_ns() - start


def analyse_performance(
    path: str | Path = DEFAULT_ANALYSIS_PATH,
    sizes: Iterable[int] = DEFAULT_SIZES,
    rng: random.Random | None = None,
) -> list[AnalysisRow]:
    """Time best, average and worst case searches and write them to a CSV file."""
    rng = rng or random.Random()
    rows = []
    for size in sizes:
        if size <= 0:
            raise ValueError(f"input size must be positive, got {size}")
        values = sorted(generate_random_numbers(size, 1, 100000, rng))
        best_target = values[len(values) // 2]
        average_target = values[rng.randint(0, len(values) - 1)]
        worst_target = values[-1] + 1
        rows.append(
            AnalysisRow(
                size=size,
                best_ns=_time_search(values, best_target),
                average_ns=_time_search(values, average_target),
                worst_ns=_time_search(values, worst_target),
                log2=math.log2(size),
            )
        )

    with open(path, "w", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for row in rows:
            writer.writerow(
                [row.size, row.best_ns, row.average_ns, row.worst_ns, f"{row.log2:g}"]
            )
    return rows


def _read_int(read: Callable[[str], str], prompt: str) -> int:
    while True:
        try:
            return int(read(prompt).strip())
        except ValueError:
            continue


def perform_search(
    read: Callable[[str], str] = input,
    write: Callable[[str], object] = print,
    rng: random.Random | None = None,
) -> int | None:
    """Ask for a count and a target, search a sorted random list, report the result."""
    prompt = "Enter the number of random integers to generate: "
    while True:
        try:
            count = int(read(prompt).strip())
        except ValueError:
            count = 0
        if count > 0:
            break
        prompt = "Please enter a positive number: "

    numbers = sorted(generate_random_numbers(count, rng=rng))
    write("Sorted Array: " + "".join(f"{n} " for n in numbers))

    target = _read_int(read, "Enter the element to search: ")
    result = binary_search(numbers, target)
    if result is not None:
        write(f"Element {target} found at index {result}")
    else:
        write(f"Element {target} not found in the array.")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu."""
    argparse.ArgumentParser(description="Binary search demonstration.").parse_args(argv)
    while True:
        print("\nMenu:\n1. Perform Search\n2. Run Performance Analysis\n3. Exit")
        try:
            choice = input("Enter your choice: ").strip()
        except EOFError:
            return 0
        try:
            if choice == "1":
                perform_search()
            elif choice == "2":
                analyse_performance()
                print("Binary Search Performance Analysis Complete.")
                print(f"Results saved to {DEFAULT_ANALYSIS_PATH}")
            elif choice == "3":
                print("Exiting the program.")
                return 0
            else:
                print("Invalid choice. Please try again.")
        except EOFError:
            return 0


if __name__ == "__main__":
    raise SystemExit(main())