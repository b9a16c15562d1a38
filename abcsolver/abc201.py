"""Solvers for contest 201. Vertex numbers are 1-based, as in the problem input."""

from itertools import product

MOD = 1_000_000_007


def is_arithmetic_sequence(values):
    """Whether the three values can be ordered into an arithmetic sequence."""
    low, mid, high = sorted(values)
    return low + high == 2 * mid


def second_highest(entries):
    """Name of the entry with the second largest height in ``(name, height)`` pairs."""
    ranked = sorted(entries, key=lambda entry: entry[1], reverse=True)
    if len(ranked) < 2:
        raise ValueError("at least two entries are required")
    return ranked[1][0]


def count_pins(pattern):
    """Count four-digit PINs matching a 10-character o/?/x digit pattern."""
    if len(pattern) != 10:
        raise ValueError("pattern must describe the ten digits")
    required = {digit for digit, mark in enumerate(pattern) if mark == "o"}
    allowed = {digit for digit, mark in enumerate(pattern) if mark in "o?"}
    return sum(
        1
        for pin in product(range(10), repeat=4)
        if required <= set(pin) <= allowed
    )


def winner(grid):
    """Outcome of the grid walking game: "Takahashi", "Aoki" or "Draw"."""
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    height, width = len(rows), len(rows[0])
    score = [[0] * width for _ in range(height)]
    for i in reversed(range(height)):
        for j in reversed(range(width)):
            if (i, j) == (height - 1, width - 1):
                continue
            score[i][j] = max(
                (1 if rows[ni][nj] == "+" else -1) - score[ni][nj]
                for ni, nj in ((i + 1, j), (i, j + 1))
                if ni < height and nj < width
            )
    result = score[0][0]
    if result > 0:
        return "Takahashi"
    if result < 0:
        return "Aoki"
    return "Draw"


def xor_distance_sum(n, edges):
    """Sum over vertex pairs of the xor of path weights, modulo 1e9+7."""
    if n < 1:
        raise ValueError("the tree needs at least one vertex")
    adjacency = [[] for _ in range(n)]
    for u, v, w in edges:
        adjacency[u - 1].append((v - 1, w))
        adjacency[v - 1].append((u - 1, w))
    dist = [None] * n
    dist[0] = 0
    stack = [0]
    while stack:
        u = stack.pop()
        for v, w in adjacency[u]:
            if dist[v] is None:
                dist[v] = dist[u] ^ w
                stack.append(v)
    if any(d is None for d in dist):
        raise ValueError("the edges do not connect every vertex")
    total = 0
    for bit in range(64):
        ones = sum((d >> bit) & 1 for d in dist)
        total = (total + ones * (n - ones) * pow(2, bit, MOD)) % MOD
    return total