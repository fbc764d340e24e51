# nissy

Building blocks for working with the 3x3x3 Rubik's cube in Python. The
package has no dependencies outside the standard library.

## What is inside

- `nissy.cube`: the immutable `Cube` value: 8 corner values and 12 edge
  values, each packing a piece index with its orientation bits. Build one
  with `static_cube(...)` from 20 piece values (corners first), check for
  the all-zero cube with `Cube.is_zero()`, and take a piece value apart
  with `corner_permutation`, `corner_orientation`, `edge_permutation` and
  `edge_orientation`. The module also holds `SOLVED_CUBE`, `ZERO_CUBE`
  and the fixed cubes of the 18 face moves (`MOVE_CUBES`) and of the 48
  transformations (`TRANS_CUBES`, `TRANS_CUBES_INVERSE`).
- `nissy.constants`: the `Move`, `Trans`, `Orientation` and `Axis`
  enumerations with their lookup tables: `move_name`, `trans_name`,
  `inverse_trans`, `trans_moves`, `orientation_moves`,
  `orientation_transition`, `orientation_trans`, and `equivalent_moves`,
  which expresses any move as face moves followed by rotations
  (an `EquivalentMoves` value). Move and transformation bit masks come
  from `allowed_mask`, `single_move_mask`, `face_mask` and
  `single_trans_mask`, along with named masks such as `MM18_ALLMOVES`,
  `MM18_EO`, `MM18_DR`, `MM18_HTR`, `TM_UDFIX` and `TM_UDRLFIX`.
- `nissy.formats`: reading and writing cubes as text in the `B32`, `LST`
  and `H48` formats, through `read_cube` / `write_cube` with a format name
  (see `available_formats()`), or directly with `read_b32` / `write_b32`,
  `read_h48` / `write_h48` and `read_lst` / `write_lst`. Bad input, an
  unknown format name or a cube that a format cannot hold raises
  `CubeFormatError`, a subclass of `ValueError`.
- `nissy.hashmap`: `H48Map`, a fixed-capacity open-addressing map with
  linear probing whose entries pack a 40-bit key and a 24-bit value. It
  keeps the smallest value inserted for each key (`insert_min`), and offers
  `value`, `lookup`, `items`, `clear` and `len()`. A key that was never
  inserted has the value `MAP_UNSET_VAL`.
- `nissy.tables`: sizes of pruning tables (`h48_coordmax`,
  `h48_tablesize`) and access to tables that pack 1, 2, 4 or 8-bit entries
  into bytes (`h48_get`, `h48_set`, and the 4-bit `get_eoesep_pval` /
  `set_eoesep_pval`).
- `nissy.storage`: `TableStorage`, which keeps binary table data as files
  under a directory prefix (`./tables/` by default). `read(key, size)`
  returns the bytes, or `None` when the file is missing or too short;
  `write(key, data)` creates the directory if needed. `write_table` writes
  data to a file, prints the outcome and returns whether it succeeded;
  `timerun` calls a function, prints the elapsed time and returns it in
  seconds.
- `nissy.solvecheck`: `SOLVE_CASES`, a tuple of `SolveCase` reference
  scrambles with all their optimal solutions, and `check_one` /
  `check_all` to compare a solver's text output against them.

## What it does not do

The package does not apply moves or transformations to a cube, does not
generate pruning tables and contains no solver and no command-line
program. It provides the encodings, tables, formats and helpers that such
code works with.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from nissy.formats import read_cube, write_cube, available_formats

print(available_formats())          # ('B32', 'LST', 'H48')
cube = read_cube("B32", "ABCDEFGH=ABCDEFGHIJKL")
print(write_cube("H48", cube))
```

```python
from nissy.hashmap import H48Map

m = H48Map(capacity=1024, randomizer=11)
m.insert_min(42, 7)
m.insert_min(42, 3)
assert m.value(42) == 3
assert len(m) == 1
```

```python
from nissy.solvecheck import check_one

expected = "U R' D R U' R' D' R\nB' D2 B U' B' D2 B U\n"
assert check_one("B' D2 B U' B' D2 B U\n", expected)
```