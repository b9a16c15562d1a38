"""Data structures shared by the contest solvers."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from itertools import accumulate, groupby
from typing import Generic, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


class DisjointSetUnion:
    """Union-find over the elements ``0..n-1`` with union by size."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self._parents = [-1] * n
        self._count = n

    def _check(self, v):
        if not 0 <= v < len(self._parents):
            raise IndexError(f"element {v} out of range")

    def root(self, v):
        """Return the representative of the set holding ``v``."""
        self._check(v)
        parents = self._parents
        while parents[v] >= 0:
            v = parents[v]
        return v

    def unite(self, u, v):
        """Merge the sets of ``u`` and ``v``; return whether they were apart."""
        u = self.root(u)
        v = self.root(v)
        if u == v:
            return False
        if self._parents[u] > self._parents[v]:
            u, v = v, u
        self._parents[u] += self._parents[v]
        self._parents[v] = u
        self._count -= 1
        return True

    def is_same(self, u, v):
        """Whether ``u`` and ``v`` are in the same set."""
        return self.root(u) == self.root(v)

    def size(self, v):
        """Number of elements in the set holding ``v``."""
        return -self._parents[self.root(v)]

    def count(self):
        """Number of disjoint sets."""
        return self._count


class SegmentTree(Generic[T]):
    """Point-update, range-fold tree over an associative operation."""

    def __init__(
        self, values: Iterable[T], op: Callable[[T, T], T], identity: T
    ) -> None:
        items = list(values)
        self._len = len(items)
        size = 1
        while size < self._len:
            size *= 2
        self._size = size
        self._op = op
        self._identity = identity
        tree = [identity] * (2 * size)
        tree[size : size + self._len] = items
        for i in range(size - 1, 0, -1):
            tree[i] = op(tree[2 * i], tree[2 * i + 1])
        self._tree = tree

    def __len__(self) -> int:
        return self._len

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._len:
            raise IndexError(f"index {index} out of range")

    def get(self, index: int) -> T:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._tree[index + self._size]

    def update(self, index: int, value: T) -> None:
        """Replace the element at ``index``."""
        self._check_index(index)
        tree, op = self._tree, self._op
        i = index + self._size
        tree[i] = value
        i >>= 1
        while i:
            tree[i] = op(tree[2 * i], tree[2 * i + 1])
            i >>= 1

    def fold(self, start: int = 0, stop: int | None = None) -> T:
        """Fold the elements in ``[start, stop)``."""
        if stop is None:
            stop = self._len
        if not 0 <= start <= stop <= self._len:
            raise IndexError(f"range {start}..{stop} out of bounds")
        tree, op = self._tree, self._op
        left = right = self._identity
        lo, hi = start + self._size, stop + self._size
        while lo < hi:
            if lo & 1:
                left = op(left, tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right = op(tree[hi], right)
            lo >>= 1
            hi >>= 1
        return op(left, right)

    def max_right(self, left: int, predicate: Callable[[T], bool]) -> int:
        """Largest ``r`` such that ``predicate(fold(left, r))`` holds.

        ``predicate`` must hold for the identity and be monotone.
        """
        if not 0 <= left <= self._len:
            raise IndexError(f"index {left} out of range")
        n = self._size
        if left == n:
            return self._len
        tree, op = self._tree, self._op
        lo, hi = left + n, 2 * n
        acc = self._identity
        while lo < hi:
            if lo & 1:
                candidate = op(acc, tree[lo])
                if not predicate(candidate):
                    while lo < n:
                        lo *= 2
                        extended = op(acc, tree[lo])
                        if predicate(extended):
                            acc = extended
                            lo += 1
                    return lo - n
                acc = candidate
                lo += 1
            lo >>= 1
            hi >>= 1
        return self._len


class PrefixSum2d:
    """Two-dimensional prefix sums answering rectangle sums."""

    def __init__(self, grid):
        rows = [list(row) for row in grid]
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("grid rows must have equal length")
        table = [[0] * (width + 1)]
        for row in rows:
            above = table[-1]
            table.append(
                [0] + [up + run for up, run in zip(above[1:], accumulate(row))]
            )
        self._table = table
        self._height = len(rows)
        self._width = width

    def area(self, top, bottom, left, right):
        """Sum of rows ``[top, bottom)`` and columns ``[left, right)``."""
        if not (
            0 <= top <= bottom <= self._height and 0 <= left <= right <= self._width
        ):
            raise IndexError("rectangle out of bounds")
        t = self._table
        return t[bottom][right] + t[top][left] - t[bottom][left] - t[top][right]


class BinomialTable:
    """Pascal's triangle up to a fixed row."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self._n = n
        rows = [[1] + [0] * n]
        for _ in range(n):
            prev = rows[-1]
            rows.append([1] + [prev[j - 1] + prev[j] for j in range(1, n + 1)])
        self._rows = rows

    def binom(self, n, r):
        """Return ``n`` choose ``r`` for ``0 <= n, r <= size``."""
        if not (0 <= n <= self._n and 0 <= r <= self._n):
            raise IndexError(f"binom({n}, {r}) outside the table")
        return self._rows[n][r]


def run_length_encoding(values: Iterable[H]) -> list[tuple[H, int]]:
    """Collapse runs of equal values into ``(value, length)`` pairs."""
    return [(value, sum(1 for _ in run)) for value, run in groupby(values)]


def run_length_decoding(runs: Sequence[tuple[T, int]]) -> list[T]:
    """Expand ``(value, length)`` pairs back into a list."""
    return [value for value, length in runs for _ in range(length)]