import itertools
import random

import pytest

from abcsolver.abc201 import (
    MOD,
    count_pins,
    is_arithmetic_sequence,
    second_highest,
    winner,
    xor_distance_sum,
)


def test_arithmetic_sequence_any_order():
    for perm in itertools.permutations([5, 1, 3]):
        assert is_arithmetic_sequence(perm)
    for perm in itertools.permutations([1, 2, 4]):
        assert not is_arithmetic_sequence(perm)


def test_arithmetic_sequence_needs_three_values():
    with pytest.raises(ValueError):
        is_arithmetic_sequence([1, 2])


def test_second_highest():
    entries = [("alpha", 3), ("beta", 1), ("gamma", 2)]
    assert second_highest(entries) == "gamma"
    assert second_highest(list(reversed(entries))) == "gamma"


def test_second_highest_needs_two():
    with pytest.raises(ValueError):
        second_highest([("solo", 10)])


def test_count_pins_sample():
    assert count_pins("ooo???xxxx") == 108


def test_count_pins_everything_allowed():
    assert count_pins("?" * 10) == 10 ** 4


def test_count_pins_restricting_never_increases():
    rng = random.Random(2)
    for _ in range(20):
        pattern = "".join(rng.choice("o?x") for _ in range(10))
        base = count_pins(pattern)
        for pos, mark in enumerate(pattern):
            if mark == "?":
                for repl in "ox":
                    changed = pattern[:pos] + repl + pattern[pos + 1 :]
                    assert count_pins(changed) <= base


def test_count_pins_rejects_short_pattern():
    with pytest.raises(ValueError):
        count_pins("o?x")


def test_winner_small_grids():
    assert winner(["-"]) == "Draw"
    assert winner(["-+", "+-"]) == "Takahashi"
    assert winner(["+-"]) == "Aoki"
    assert winner(["++"]) == "Takahashi"


def test_xor_distance_sample():
    assert xor_distance_sum(3, [(1, 2, 1), (2, 3, 2)]) == 6


def test_xor_distance_single_edge_is_weight_mod():
    weight = 2 ** 60 - 1
    assert xor_distance_sum(2, [(1, 2, weight)]) == weight % MOD


def test_xor_distance_relabelling_invariant():
    rng = random.Random(9)
    n = 12
    edges = [(v, rng.randint(1, v - 1), rng.randrange(1 << 60)) for v in range(2, n + 1)]
    base = xor_distance_sum(n, edges)
    assert 0 <= base < MOD
    labels = list(range(1, n + 1))
    rng.shuffle(labels)
    relabelled = [(labels[u - 1], labels[v - 1], w) for u, v, w in edges]
    assert xor_distance_sum(n, relabelled) == base


def test_xor_distance_disconnected():
    with pytest.raises(ValueError):
        xor_distance_sum(3, [(1, 2, 5)])