import itertools
import math
import random

import pytest

from abcsolver.abc202 import (
    count_descendants_at_depth,
    count_triples,
    kth_string,
    remaining_pips,
    upside_down,
)


def test_remaining_pips_complements_to_21():
    for values in itertools.product(range(1, 7), repeat=3):
        assert remaining_pips(list(values)) + sum(values) == 21


def test_upside_down_sample():
    assert upside_down("0601889") == "6881090"


def test_upside_down_is_involution():
    rng = random.Random(0)
    for _ in range(50):
        s = "".join(rng.choice("01689") for _ in range(rng.randint(1, 12)))
        assert upside_down(upside_down(s)) == s
        assert len(upside_down(s)) == len(s)


def test_count_triples_sample():
    assert count_triples([1, 2, 2], [3, 1, 2], [2, 3, 2]) == 4


def test_count_triples_constant_b():
    a = [2, 1, 2, 3, 2]
    b = [2] * 5
    c = [1, 5, 3, 2, 4]
    assert count_triples(a, b, c) == a.count(2) * len(c)


def test_count_triples_order_of_a_irrelevant():
    rng = random.Random(8)
    n = 9
    a = [rng.randint(1, n) for _ in range(n)]
    b = [rng.randint(1, n) for _ in range(n)]
    c = [rng.randint(1, n) for _ in range(n)]
    shuffled = a[:]
    rng.shuffle(shuffled)
    assert count_triples(shuffled, b, c) == count_triples(a, b, c)


def test_count_triples_bad_position():
    with pytest.raises(IndexError):
        count_triples([1], [1], [2])


def test_kth_string_enumerates_all_in_order():
    for a in range(4):
        for b in range(4):
            total = math.comb(a + b, a)
            got = [kth_string(a, b, k) for k in range(1, total + 1)]
            expected = sorted({"".join(p) for p in itertools.permutations("a" * a + "b" * b)})
            assert got == expected


def test_kth_string_extremes():
    assert kth_string(5, 3, 1) == "a" * 5 + "b" * 3
    assert kth_string(5, 3, math.comb(8, 3)) == "b" * 3 + "a" * 5


def test_kth_string_out_of_range():
    with pytest.raises(ValueError):
        kth_string(2, 2, 0)
    with pytest.raises(ValueError):
        kth_string(2, 2, math.comb(4, 2) + 1)


def test_descendants_sample():
    parents = [1, 1, 2, 2, 4, 2]
    queries = [(1, 2), (7, 2), (4, 1), (5, 5)]
    assert count_descendants_at_depth(parents, queries) == [3, 1, 0, 0]


def test_descendants_on_chain_sum_to_subtree_size():
    n = 6
    parents = list(range(1, n))
    for u in range(1, n + 1):
        counts = count_descendants_at_depth(parents, [(u, d) for d in range(n)])
        assert sum(counts) == n - u + 1


def test_descendants_root_counts_cover_tree():
    rng = random.Random(11)
    n = 30
    parents = [rng.randint(1, v - 1) for v in range(2, n + 1)]
    counts = count_descendants_at_depth(parents, [(1, d) for d in range(n)])
    assert sum(counts) == n


def test_descendants_rejects_cycle():
    with pytest.raises(ValueError):
        count_descendants_at_depth([3, 2], [(1, 0)])