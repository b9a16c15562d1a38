"""Solvers for contest 202. Vertex numbers and positions are 1-based."""

from bisect import bisect_left, bisect_right
from collections import Counter, defaultdict

from .structures import BinomialTable

_FLIP = str.maketrans("69", "96")


def remaining_pips(values):
    """Sum of the bottom faces of three dice showing ``values`` on top."""
    return 21 - sum(values)


def upside_down(s):
    """The digit string as read after rotating it half a turn."""
    return s[::-1].translate(_FLIP)


def count_triples(a, b, c):
    """Count pairs ``(i, j)`` with ``a[i] == b[c[j]]`` using 1-based ``c``."""
    freq = Counter(a)
    total = 0
    for position in c:
        if not 1 <= position <= len(b):
            raise IndexError(f"position {position} out of range")
        total += freq[b[position - 1]]
    return total


def kth_string(a, b, k):
    """The ``k``-th smallest string of ``a`` letters 'a' and ``b`` letters 'b'."""
    table = BinomialTable(a + b)
    if not 1 <= k <= table.binom(a + b, a):
        raise ValueError(f"k={k} is out of range")
    k -= 1
    letters = []
    for _ in range(a + b):
        starting_with_a = table.binom(a + b - 1, b)
        if k >= starting_with_a:
            letters.append("b")
            k -= starting_with_a
            b -= 1
        else:
            letters.append("a")
            a -= 1
    return "".join(letters)


def count_descendants_at_depth(parents, queries):
    """For each ``(u, d)`` count vertices at depth ``d`` in the subtree of ``u``.

    ``parents[i]`` is the parent of vertex ``i + 2``; the root is vertex 1.
    """
    n = len(parents) + 1
    children = [[] for _ in range(n)]
    for child, parent in enumerate(parents, start=1):
        if not 1 <= parent <= n:
            raise ValueError(f"parent {parent} out of range")
        children[parent - 1].append(child)

    order = []
    depth = [0] * n
    stack = [0]
    while stack:
        v = stack.pop()
        order.append(v)
        for child in reversed(children[v]):
            depth[child] = depth[v] + 1
            stack.append(child)
    if len(order) != n:
        raise ValueError("parents do not form a tree rooted at vertex 1")

    entry = [0] * n
    by_depth = defaultdict(list)
    for time, v in enumerate(order):
        entry[v] = time
        by_depth[depth[v]].append(time)
    size = [1] * n
    for v in reversed(order):
        size[v] += sum(size[child] for child in children[v])

    answers = []
    for u, d in queries:
        if not 1 <= u <= n:
            raise IndexError(f"vertex {u} out of range")
        v = u - 1
        times = by_depth.get(d, [])
        exit_time = entry[v] + size[v] - 1
        answers.append(bisect_right(times, exit_time) - bisect_left(times, entry[v]))
    return answers