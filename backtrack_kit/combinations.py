"""Combination, subset and permutation enumeration by backtracking."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence

__all__ = [
    "combination_sum",
    "combination_sum_unique",
    "subset_sums",
    "subsets_with_duplicates",
    "permutations",
    "permutation_sequence",
]


def _require_positive(candidates: Sequence[int]) -> None:
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must all be positive")


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every combination of candidates summing to target.

    A candidate may be used any number of times. Combinations follow the
    order of the candidates as given.
    """
    pool = list(candidates)
    _require_positive(pool)

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if value <= remaining:
                chosen.append(value)
                yield from search(index, remaining - value, chosen)
                chosen.pop()

    return list(search(0, target, []))


def combination_sum_unique(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct combinations summing to target, each candidate used once.

    Candidates are sorted first, so every combination is non-decreasing and
    the result is in lexicographic order.
    """
    pool = sorted(candidates)
    _require_positive(pool)

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if value > remaining:
                continue
            if index > start and value == pool[index - 1]:
                continue
            chosen.append(value)
            yield from search(index + 1, remaining - value, chosen)
            chosen.pop()

    return list(search(0, target, []))


def subset_sums(values: Iterable[int]) -> list[int]:
    """Return the sum of every subset, excluding each element before including it."""
    items = list(values)

    def search(position: int, total: int) -> Iterator[int]:
        if position >= len(items):
            yield total
            return
        yield from search(position + 1, total)
        yield from search(position + 1, total + items[position])

    return list(search(0, 0))


def subsets_with_duplicates(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset of nums, sorted, in lexicographic order."""
    items = sorted(nums)

    def search(start: int, chosen: list[int]) -> Iterator[list[int]]:
        yield list(chosen)
        for index in range(start, len(items)):
            if index > start and items[index] == items[index - 1]:
                continue
            chosen.append(items[index])
            yield from search(index + 1, chosen)
            chosen.pop()

    return list(search(0, []))


def permutations(nums: Iterable[int]) -> list[list[int]]:
    """Return every permutation of nums in swap-based generation order."""
    items = list(nums)

    def search(start: int) -> Iterator[list[int]]:
        if start >= len(items):
            yield list(items)
            return
        for index in range(start, len(items)):
            items[start], items[index] = items[index], items[start]
            yield from search(start + 1)
            items[start], items[index] = items[index], items[start]

    return list(search(0))


def permutation_sequence(n: int, k: int) -> str:
    """Return the k-th (1-based) lexicographic permutation of 1..n as a string."""
    if n < 1:
        raise ValueError("n must be at least 1")
    block = math.factorial(n - 1)
    if not 1 <= k <= block * n:
        raise ValueError(f"k must be between 1 and {block * n}")

    remaining = list(range(1, n + 1))
    rank = k - 1
    digits: list[str] = []
    while True:
        position, rank = divmod(rank, block)
        digits.append(str(remaining.pop(position)))
        if not remaining:
            break
        block //= len(remaining)
    return "".join(digits)