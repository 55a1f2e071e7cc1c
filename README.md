# olysolve

A library of solvers for algorithmic olympiad problems. Every solver is a plain
function (or, for one stateful problem, a class) that takes Python values and
returns Python values. Nothing reads standard input or writes to standard
output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from olysolve.improvements import max_improvement
from olysolve.hack import count_and_xor_pairs
from olysolve.toll import min_travel_cost
from olysolve.torus_walk import TorusWalker

max_improvement([2, 1, 3])
count_and_xor_pairs([1, 2, 3])
min_travel_cost(3, [(1, 2, 5), (2, 3, 7)], 1)

walker = TorusWalker([[1, 2], [3, 4]])
walker.move(3)        # new position as a 1-based (row, column) pair
walker.change(1, 1, 9)
```

## Interactive problems

Two problems are interactive: the solver asks questions and reacts to the
answers. The answering side is passed in as a callable.

- `olysolve.jump.find_hidden(n, ask, rng=None)` — `ask(s)` receives a string
  of `'0'`/`'1'` and returns `n` for a full match, `n // 2` for exactly half
  matching bits, anything else otherwise. `rng` is an optional
  `random.Random`, so runs can be reproduced by seeding it. Returns the hidden
  string once confirmed, or `None`.
- `olysolve.intercept.intercept(xr, vr, check)` — `check(l, r)` reports
  whether the target currently lies in `[l, r]`; each call is one time step.
  Returns the pinned-down position, or `None` after 100 rounds.

## Modules

| Module | Entry point | Returns |
| --- | --- | --- |
| `unfold` | `reconstruct(grid)` | trimmed rows of `'#'`/`'.'` |
| `borders` | `sort_by_borders(n, words)` | the words, reordered |
| `dice` | `expected_sum(n, d, r)` | `float` |
| `triangles` | `count_triangles(rows, cols, lines)` | `int` |
| `arches` | `min_arch_cost(h, a, b, points)` | `int`, or `None` if impossible |
| `suffix_counts` | `count_matches(entries, queries)` | list of counts |
| `kth_sum` | `kth_smallest(r, k, a, b, c)` | `int` |
| `toll` | `min_travel_cost(n, edges, k)` | `int`, or `None` if unreachable |
| `knapsack` | `solve_subset_sum(weights, target)` | `'0'`/`'1'` selection string |
| `tree_paths` | `paths_form_chain(n, edges, pairs)` | `bool` |
| `intercept` | `intercept(xr, vr, check)` | `int` or `None` |
| `delight` | `max_delight(k, min_sleep, min_eat, sleep, eat)` | `(total, 'S'/'E' plan)` |
| `game` | `classify_positions(n, edges)` | two strings of `'W'`/`'L'`/`'D'` |
| `prime_lists` | `prime_list_slice(a, b)` | `str` |
| `moles` | `process_moles(counts, visits)` | total distance after each visit |
| `decimal_binary` | `nth_number(goal)` | decimal string |
| `polygon_distance` | `triangulation_distances(n, diagonals, queries)` | list of distances |
| `jump` | `find_hidden(n, ask, rng=None)` | `str` or `None` |
| `landscape` | `max_peak(v, heights)` | `int` |
| `improvements` | `max_improvement(perm)` | `int` |
| `hack` | `count_and_xor_pairs(values)` | `int` |
| `intervals` | `minimal_good_segments(perm, queries)` | list of `(a, b)` pairs |
| `rotations` | `min_operations(values)` | `int` |
| `squares_area` | `covered_area(shapes)` | `float` |
| `bipartite_sums` | `count_strong_pairs(matrix, left, right, threshold)` | `int` |
| `torus_walk` | `TorusWalker(grid)` with `move(k)` and `change(x, y, z)` | see above |
| `tickets` | `min_ticket_cost(n, journey, offers)` | `int` |
| `logic` | `build_implications(rows)` | list of `"a -> b"` strings, or `None` |

Input that breaks a solver's preconditions (mismatched lengths, out-of-range
vertices, a list that is not a permutation, and similar) raises `ValueError`.
Where a problem can simply have no answer, the solver says so in its return
value, as listed above.

## What the package does not do

There is no command-line program: the package installs no commands and does
not parse problem input files or format answers for a judge. Call the
functions from Python with already-parsed values.