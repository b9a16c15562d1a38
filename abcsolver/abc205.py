"""Solvers for contest 205."""


def percent_of(a, b):
    """``b`` percent of ``a``."""
    return a * b / 100.0


def is_permutation(values):
    """Whether all values are distinct."""
    items = list(values)
    return len(set(items)) == len(items)


def compare_powers(a, b, c):
    """Compare ``a ** c`` with ``b ** c`` and return ``">"``, ``"<"`` or ``"="``."""
    if c % 2 == 0:
        a, b = abs(a), abs(b)
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "="


def kth_missing(a, queries):
    """For each ``k`` the ``k``-th smallest positive integer not in ``a``."""
    removed = sorted(set(a))
    order = sorted(range(len(queries)), key=lambda i: queries[i])
    answers = [0] * len(queries)
    skipped = 0
    for index in order:
        x = queries[index] + skipped
        while skipped < len(removed) and removed[skipped] <= x:
            x += 1
            skipped += 1
        answers[index] = x
    return answers