"""Merge sort."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable, List, Optional, Sequence


def merge(left: Sequence[Any], right: Sequence[Any]) -> List[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the value from ``left`` comes first, so the merge is stable.
    """
    result: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Return a new list holding ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _read_numbers(stream) -> List[int]:
    tokens = (token for line in stream for token in line.split())
    print("Enter the value of n = ", end="", flush=True)
    count = int(next(tokens))
    print("Enter the values in array = ", end="", flush=True)
    return [int(next(tokens)) for _ in range(count)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort integers given as arguments, or read a count and values from stdin."""
    parser = argparse.ArgumentParser(description="Sort integers with merge sort.")
    parser.add_argument("values", nargs="*", type=int, help="integers to sort")
    args = parser.parse_args(argv)
    try:
        numbers = args.values if args.values else _read_numbers(sys.stdin)
    except (StopIteration, ValueError):
        print("invalid input", file=sys.stderr)
        return 1
    print("Original array: " + " ".join(map(str, numbers)))
    print("Sorted array: " + " ".join(map(str, merge_sort(numbers))))
    return 0


if __name__ == "__main__":
    sys.exit(main())