"""Merge sort of random integers, followed by a timed binary search."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Sequence

from algodemos.binary_search import binary_search


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list, keeping equal items stable."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using merge sort."""
    if len(values) <= 1:
        return list(values)
    split = (len(values) + 1) // 2
    return merge(merge_sort(values[:split]), merge_sort(values[split:]))


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            continue


def main(argv: Sequence[str] | None = None) -> int:
    """Sort random numbers with merge sort and search for one the user enters."""
    argparse.ArgumentParser(description="Merge sort demonstration.").parse_args(argv)
    try:
        count = _read_int("Enter the number of random integers: ")
    except EOFError:
        return 0
    if count < 0:
        print("The number of integers cannot be negative.")
        return 1

    numbers = [random.randrange(1000) for _ in range(count)]
    print("\nOriginal Array: " + "".join(f"{n} " for n in numbers))

    start = time.perf_counter()
    numbers = merge_sort(numbers)
    elapsed_ms = (time.perf_counter() - start) * 1000
    print("\nSorted Array: " + "".join(f"{n} " for n in numbers))
    print(f"Merge Sort Time: {elapsed_ms:g} ms")

    try:
        key = _read_int("\nEnter an element to search: ")
    except EOFError:
        return 0
    start = time.perf_counter()
    index = binary_search(numbers, key)
    elapsed_ms = (time.perf_counter() - start) * 1000
    if index is not None:
        print(f"Element found at index: {index}")
    else:
        print("Element not found.")
    print(f"Binary Search Time: {elapsed_ms:g} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())