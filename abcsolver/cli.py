"""Command line front end: read a problem's input on stdin and print the answer."""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal

from . import abc201, abc202, abc203, abc204, abc205, abc206, abc408


class _Tokens:
    """Whitespace-separated tokens of a problem input."""

    def __init__(self, text):
        self._words = iter(text.split())

    def word(self):
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self):
        return int(self.word())

    def ints(self, count):
        return [self.int() for _ in range(count)]

    def tuples(self, count, width):
        return [tuple(self.ints(width)) for _ in range(count)]


_SOLVERS = {}


def _solver(contest, problem):
    def register(func):
        _SOLVERS[contest, problem] = func
        return func

    return register


def _lines(values):
    return "\n".join(map(str, values))


def _format_float(value):
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@_solver("abc201", "a")
def _201a(tok):
    return "Yes" if abc201.is_arithmetic_sequence(tok.ints(3)) else "No"


@_solver("abc201", "b")
def _201b(tok):
    n = tok.int()
    return abc201.second_highest([(tok.word(), tok.int()) for _ in range(n)])


@_solver("abc201", "c")
def _201c(tok):
    return str(abc201.count_pins(tok.word()))


@_solver("abc201", "d")
def _201d(tok):
    h, _ = tok.ints(2)
    return abc201.winner([tok.word() for _ in range(h)])


@_solver("abc201", "e")
def _201e(tok):
    n = tok.int()
    return str(abc201.xor_distance_sum(n, tok.tuples(n - 1, 3)))


@_solver("abc202", "a")
def _202a(tok):
    return str(abc202.remaining_pips(tok.ints(3)))


@_solver("abc202", "b")
def _202b(tok):
    return abc202.upside_down(tok.word())


@_solver("abc202", "c")
def _202c(tok):
    n = tok.int()
    a, b, c = tok.ints(n), tok.ints(n), tok.ints(n)
    return str(abc202.count_triples(a, b, c))


@_solver("abc202", "d")
def _202d(tok):
    a, b, k = tok.ints(3)
    return abc202.kth_string(a, b, k)


@_solver("abc202", "e")
def _202e(tok):
    n = tok.int()
    parents = tok.ints(n - 1)
    q = tok.int()
    return _lines(abc202.count_descendants_at_depth(parents, tok.tuples(q, 2)))


@_solver("abc203", "a")
def _203a(tok):
    return str(abc203.odd_one_out(tok.ints(3)))


@_solver("abc203", "b")
def _203b(tok):
    n, k = tok.ints(2)
    return str(abc203.room_sum(n, k))


@_solver("abc203", "c")
def _203c(tok):
    n, k = tok.ints(2)
    return str(abc203.farthest_village(k, tok.tuples(n, 2)))


@_solver("abc203", "d")
def _203d(tok):
    n, k = tok.ints(2)
    return str(abc203.min_median([tok.ints(n) for _ in range(n)], k))


@_solver("abc203", "e")
def _203e(tok):
    n, m = tok.ints(2)
    return str(abc203.reachable_pawn_columns(n, tok.tuples(m, 2)))


@_solver("abc204", "a")
def _204a(tok):
    x, y = tok.ints(2)
    return str(abc204.draw_hand(x, y))


@_solver("abc204", "b")
def _204b(tok):
    return str(abc204.nut_harvest(tok.ints(tok.int())))


@_solver("abc204", "c")
def _204c(tok):
    n, m = tok.ints(2)
    return str(abc204.count_reachable_pairs(n, tok.tuples(m, 2)))


@_solver("abc204", "d")
def _204d(tok):
    return str(abc204.min_cooking_time(tok.ints(tok.int())))


@_solver("abc204", "e")
def _204e(tok):
    n, m = tok.ints(2)
    return str(abc204.earliest_arrival(n, tok.tuples(m, 4)))


@_solver("abc205", "a")
def _205a(tok):
    a, b = float(tok.word()), float(tok.word())
    return _format_float(abc205.percent_of(a, b))


@_solver("abc205", "b")
def _205b(tok):
    return "Yes" if abc205.is_permutation(tok.ints(tok.int())) else "No"


@_solver("abc205", "c")
def _205c(tok):
    a, b, c = tok.ints(3)
    return abc205.compare_powers(a, b, c)


@_solver("abc205", "d")
def _205d(tok):
    n, q = tok.ints(2)
    a = tok.ints(n)
    return _lines(abc205.kth_missing(a, tok.ints(q)))


@_solver("abc206", "a")
def _206a(tok):
    return abc206.price_reaction(tok.int())


@_solver("abc206", "b")
def _206b(tok):
    return str(abc206.days_to_save(tok.int()))


@_solver("abc206", "c")
def _206c(tok):
    return str(abc206.count_distinct_pairs(tok.ints(tok.int())))


@_solver("abc206", "d")
def _206d(tok):
    return str(abc206.min_palindrome_operations(tok.ints(tok.int())))


@_solver("abc206", "e")
def _206e(tok):
    l, r = tok.ints(2)
    return str(abc206.count_good_pairs(l, r))


@_solver("abc408", "a")
def _408a(tok):
    n, s = tok.ints(2)
    return "Yes" if abc408.can_stay_awake(s, tok.ints(n)) else "No"


@_solver("abc408", "b")
def _408b(tok):
    values = abc408.distinct_sorted(tok.ints(tok.int()))
    return f"{len(values)}\n{' '.join(map(str, values))}"


@_solver("abc408", "c")
def _408c(tok):
    n, m = tok.ints(2)
    return str(abc408.min_guard_count(n, tok.tuples(m, 2)))


@_solver("abc408", "d")
def _408d(tok):
    answers = []
    for _ in range(tok.int()):
        tok.int()
        answers.append(abc408.min_flips(tok.word()))
    return _lines(answers)


@_solver("abc408", "e")
def _408e(tok):
    n, m = tok.ints(2)
    return str(abc408.min_or_path(n, tok.tuples(m, 3)))


@_solver("abc408", "f")
def _408f(tok):
    n, d, r = tok.ints(3)
    return str(abc408.max_moves(tok.ints(n), d, r))


def solve(contest, problem, text):
    """Answer ``problem`` of ``contest`` for the input ``text``; return the output."""
    key = str(contest).strip().lower()
    if key.isdigit():
        key = "abc" + key
    letter = str(problem).strip().lower()
    try:
        solver = _SOLVERS[key, letter]
    except KeyError:
        raise ValueError(f"no solver for {contest} {problem}") from None
    return solver(_Tokens(text))


def main(argv=None):
    """Read a problem input from stdin and print its answer."""
    parser = argparse.ArgumentParser(
        prog="abcsolver", description="Solve a contest problem read from stdin."
    )
    parser.add_argument("contest", help="contest, e.g. abc201 or 201")
    parser.add_argument("problem", help="problem letter, e.g. a")
    args = parser.parse_args(argv)
    try:
        output = solve(args.contest, args.problem, sys.stdin.read())
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0