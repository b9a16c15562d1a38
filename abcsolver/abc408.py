"""Solvers for contest 408. Positions in ranges are 1-based."""

from collections import deque

from .structures import SegmentTree


def can_stay_awake(s, times):
    """Whether no gap between successive taps, starting from time 0, exceeds ``s``."""
    previous = 0
    for t in times:
        if t - previous > s:
            return False
        previous = t
    return True


def distinct_sorted(values):
    """The distinct values in ascending order."""
    return sorted(set(values))


def min_guard_count(n, ranges):
    """Fewest guards covering any single wall among ``n`` walls.

    Each guard covers the inclusive 1-based range ``(l, r)``.
    """
    if n < 1:
        raise ValueError("there must be at least one wall")
    delta = [0] * (n + 1)
    for l, r in ranges:
        if not 1 <= l <= r <= n:
            raise ValueError(f"range ({l}, {r}) out of bounds")
        delta[l - 1] += 1
        delta[r] -= 1
    coverage = 0
    best = None
    for change in delta[:n]:
        coverage += change
        best = coverage if best is None else min(best, coverage)
    return best


def min_flips(s):
    """Fewest bit flips leaving the string's ones in one contiguous block."""
    if set(s) - {"0", "1"}:
        raise ValueError("string must consist of 0 and 1")
    before = ones = after = 0
    for c in s:
        if c == "0":
            before, ones, after = before, min(before, ones) + 1, min(ones, after)
        else:
            before, ones, after = before + 1, min(before, ones), min(ones, after) + 1
    return min(before, ones, after)


def min_or_path(n, edges):
    """Smallest bitwise OR of edge weights on a path from vertex 1 to vertex ``n``."""
    if n < 1:
        raise ValueError("there must be at least one vertex")
    adjacency = [[] for _ in range(n)]
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) out of range")
        adjacency[u - 1].append((v - 1, w))
        adjacency[v - 1].append((u - 1, w))
    answer = 0
    for bit in reversed(range(31)):
        limit = 1 << bit
        seen = [False] * n
        seen[0] = True
        stack = [0]
        while stack:
            u = stack.pop()
            for v, w in adjacency[u]:
                if w & ~answer < limit and not seen[v]:
                    seen[v] = True
                    stack.append(v)
        if not seen[n - 1]:
            answer |= limit
    return answer


def max_moves(heights, d, r):
    """Longest chain of jumps to lower scaffolds at most ``r`` apart and ``d`` lower."""
    n = len(heights)
    tree = SegmentTree([0] * n, max, 0)
    order = sorted(range(n), key=lambda i: heights[i])
    pending = deque()
    best = 0
    for rank, i in enumerate(order):
        if rank >= d:
            position, value = pending.popleft()
            tree.update(position, value)
        reach = tree.fold(max(i - r, 0), min(i + r + 1, n))
        best = max(best, reach)
        pending.append((i, reach + 1))
    return best