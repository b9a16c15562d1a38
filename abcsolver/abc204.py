"""Solvers for contest 204. Vertex numbers are 1-based, as in the problem input."""

import heapq
from math import isqrt


def draw_hand(x, y):
    """The hand that ties a game where two players showed ``x`` and ``y``.

    Hands are 0, 1 and 2. If both show the same hand, the third player
    shows it too; otherwise the third shows the remaining hand.
    """
    if x == y:
        return x
    return 3 - x - y


def nut_harvest(trees):
    """Total nuts taken when every tree is cut down to ten nuts."""
    return sum(max(nuts - 10, 0) for nuts in trees)


def count_reachable_pairs(n, edges):
    """Count ordered pairs ``(s, t)`` with ``t`` reachable from ``s``, ``s == t`` included."""
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) out of range")
        adjacency[a - 1].append(b - 1)
    total = 0
    for start in range(n):
        seen = {start}
        stack = [start]
        while stack:
            u = stack.pop()
            for v in adjacency[u]:
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
        total += len(seen)
    return total


def min_cooking_time(times):
    """Finish time of the dishes split between two ovens as evenly as possible."""
    total = sum(times)
    reachable = 1  # bit i set when a subset of the dishes sums to i
    for t in times:
        reachable |= reachable << t
    return min(
        max(s, total - s) for s in range(total + 1) if (reachable >> s) & 1
    )


def arrival_time(t, c, d):
    """Earliest arrival over a road taking ``c + d // (x + 1)`` when left at ``x >= t``."""
    root = isqrt(d)
    best = t + c + d // (t + 1)
    for x in range(max(root - 5, 0), root + 5):
        if t <= x:
            best = min(best, x + c + d // (x + 1))
    return best


def earliest_arrival(n, roads):
    """Earliest time to reach vertex ``n`` from vertex 1, or -1 if it cannot be reached.

    ``roads`` holds ``(a, b, c, d)`` tuples describing undirected roads.
    """
    if n < 1:
        raise ValueError("there must be at least one city")
    adjacency = [[] for _ in range(n)]
    for a, b, c, d in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) out of range")
        adjacency[a - 1].append((b - 1, c, d))
        adjacency[b - 1].append((a - 1, c, d))
    best = [None] * n
    best[0] = 0
    heap = [(0, 0)]
    while heap:
        t, u = heapq.heappop(heap)
        if best[u] < t:
            continue
        for v, c, d in adjacency[u]:
            arrival = arrival_time(t, c, d)
            if best[v] is None or arrival < best[v]:
                best[v] = arrival
                heapq.heappush(heap, (arrival, v))
    return -1 if best[n - 1] is None else best[n - 1]