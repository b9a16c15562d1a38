# abcsolver

Solvers for a collection of contest programming problems, together with the
small data structures they are built on.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `abcsolver` command reads a problem's input from standard input and
prints the answer. Name the contest (`abc201` or just `201`) and the problem
letter:

```
abcsolver 201 a < input.txt
```

These problems are covered:

| Contest | Problems |
|---------|----------|
| 201     | a – e    |
| 202     | a – e    |
| 203     | a – e    |
| 204     | a – e    |
| 205     | a – d    |
| 206     | a – e    |
| 408     | a – f    |

An unknown contest or problem, or malformed input, prints an `error: ...`
message on standard error and exits with status 1.

## Library use

Every problem is available as a plain function that takes Python values and
returns the answer, in the modules `abcsolver.abc201` to `abcsolver.abc206`
and `abcsolver.abc408`. Vertex numbers and positions are 1-based, as in the
problem inputs.

```python
from abcsolver.abc201 import is_arithmetic_sequence, winner
from abcsolver.abc205 import kth_missing

is_arithmetic_sequence([5, 1, 3])   # True
winner(["-+-", "+--", "+-+"])       # "Takahashi", "Aoki" or "Draw"
kth_missing([3, 5, 6, 7], [2, 5, 3])
```

The same work can be done on raw input text with `abcsolver.cli.solve`,
which takes the contest, the problem letter and the input text and returns
the output text; it raises `ValueError` for a problem it has no solver for.

### Data structures

`abcsolver.structures` holds the reusable pieces:

- `DisjointSetUnion` — union–find over `0..n-1` with `unite` (returns
  whether two sets were merged), `is_same`, `root`, `size` and `count` of
  sets.
- `SegmentTree` — a tree over any associative operation with an identity,
  supporting `get`, `update`, range `fold(start, stop)` and `max_right`.
- `PrefixSum2d` — sums over rectangles of a grid via
  `area(top, bottom, left, right)` with half-open bounds.
- `BinomialTable` — a precomputed Pascal's triangle queried with `binom`.
- `run_length_encoding` and `run_length_decoding`.

```python
from abcsolver.structures import SegmentTree

tree = SegmentTree([3, 1, 4, 1, 5], max, 0)
tree.fold(1, 4)    # 4
tree.update(2, 0)
tree.fold(0, 5)    # 5
```

## Not included

Problem f of contests 201 to 206, problem e of contest 205 and problem g of
contest 408 have no solver; asking for them reports an error.