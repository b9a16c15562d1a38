"""Solvers for contest 203."""

from itertools import groupby
from operator import itemgetter

from .structures import PrefixSum2d


def odd_one_out(values):
    """The value appearing once among three with a pair, else 0."""
    x, y, z = values
    if x != y and y != z and z != x:
        return 0
    return x ^ y ^ z


def room_sum(n, k):
    """Sum of room numbers ``100 * i + j`` for floors 1..n and rooms 1..k."""
    return k * n * (n + 1) * 50 + n * k * (k + 1) // 2


def farthest_village(k, friends):
    """How far one gets with ``k`` yen, collecting gifts from ``(village, gift)``."""
    position = 0
    for village, gift in sorted(friends):
        if position + k < village:
            break
        k += gift - (village - position)
        position = village
    return position + k


def min_median(grid, k):
    """Smallest median over all ``k`` by ``k`` windows of a square grid."""
    n = len(grid)
    if not 1 <= k <= n:
        raise ValueError("window size must be between 1 and the grid size")
    threshold = k * k // 2
    windows = [(i, j) for i in range(n - k + 1) for j in range(n - k + 1)]
    low, high = 0, 1 << 30
    while high - low > 1:
        mid = (low + high) // 2
        sums = PrefixSum2d([[1 if x >= mid else 0 for x in row] for row in grid])
        if all(sums.area(i, i + k, j, j + k) > threshold for i, j in windows):
            low = mid
        else:
            high = mid
    return low


def reachable_pawn_columns(n, pawns):
    """Number of columns a white pawn starting at column ``n`` can end in."""
    reachable = {n}
    for _, row in groupby(sorted(pawns), key=itemgetter(0)):
        columns = [y for _, y in row]
        added = {
            y
            for y in columns
            if (y > 0 and y - 1 in reachable) or (y < 2 * n - 1 and y + 1 in reachable)
        }
        reachable.difference_update(columns)
        reachable |= added
    return len(reachable)