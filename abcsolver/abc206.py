"""Solvers for contest 206."""

from collections import Counter
from math import comb

from .structures import DisjointSetUnion, run_length_encoding


def price_reaction(n):
    """Reaction to a price of ``n`` before tax."""
    if n < 191:
        return "Yay!"
    if n == 191:
        return ":(" if False else "so-so"
    return ":("


def days_to_save(n):
    """First day on which depositing ``i`` yen on day ``i`` totals at least ``n``."""
    total = 0
    day = 0
    while total < n:
        day += 1
        total += day
    return day


def count_distinct_pairs(values):
    """Number of index pairs ``i < j`` with ``values[i] != values[j]``."""
    items = sorted(values)
    n = len(items)
    same = sum(comb(length, 2) for _, length in run_length_encoding(items))
    return comb(n, 2) - same


def min_palindrome_operations(values):
    """Fewest value replacements that make the sequence a palindrome."""
    items = list(values)
    if not items:
        return 0
    if min(items) < 0:
        raise ValueError("values must not be negative")
    dsu = DisjointSetUnion(max(items) + 1)
    return sum(1 for x, y in zip(items, reversed(items)) if dsu.unite(x, y))


def count_good_pairs(l, r):
    """Pairs ``(x, y)`` in ``[l, r]`` sharing a factor where neither divides the other."""
    if not 1 <= l <= r:
        raise ValueError("require 1 <= l <= r")
    size = r + 1
    with_gcd = [0] * size
    for g in reversed(range(1, size)):
        multiples = r // g - (l - 1) // g
        with_gcd[g] = multiples * multiples - sum(
            with_gcd[g * j] for j in range(2, (size - 1) // g + 1)
        )
    for x in range(l, size):
        with_gcd[x] -= 2 * (r // x) - 1
    return sum(with_gcd[2:])