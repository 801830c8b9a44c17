# contestkit

A collection of classic programming-contest algorithms as plain Python
functions, plus a `contestkit` command that solves the problems from
standard input. No third-party dependencies.

## Installation

```
pip install contestkit
```

For running the test suite:

```
pip install "contestkit[test]"
pytest
```

## Modules

| Module                    | Contents |
|---------------------------|----------|
| `contestkit.backtracking` | `count_queens(n)`, `permutations(s)` |
| `contestkit.dynamic`      | `min_coins(amount, coins)`, `optimal_bst_cost(freq)`, `longest_common_subsequence(a, b)`, `bachet_winner(n, moves)`, `shortest_tour(graph, source)` |
| `contestkit.grids`        | `count_deposits(grid)`, `explore(grid, start, end)`, `find_path(grid, start, end)`, `maja_position(n)`, `MazeState` |
| `contestkit.arithmetic`   | `gcd(a, b)`, `last_digit(number)`, `sumset_max(values)` |
| `contestkit.searching`    | `can_fill(vessels, containers, capacity)`, `min_capacity(vessels, containers)`, `neighbours(heights, height)`, `locate_marbles(marbles, queries)` |
| `contestkit.josephus`     | `survivor_offset(count, step)`, `power_crisis_step(n)`, `joseph_min_m(k)` |
| `contestkit.text`         | `prefix_function(pattern)`, `extend_to_palindrome(s)`, `uncompress(text)` |
| `contestkit.geometry`     | `Line`, `line_through(p, q)`, `count_unique_lines(points)`, `count_unique_lines_float(points)` |
| `contestkit.disktree`     | `DiskTree`, `split_path(path)` |
| `contestkit.cli`          | `main(argv=None)`, the command line front end |

Some notes on behaviour:

- `min_coins` uses the coins 1, 5, 10, 50, 100, 500 and 1000 unless others
  are given, and raises `ValueError` when the amount cannot be made.
- `bachet_winner` returns `"Stan wins"` or `"Ollie wins"`.
- `permutations` keeps duplicates when characters repeat and returns an
  empty list for an empty string.
- `explore` is a generator that yields a `MazeState` after each expanded
  cell; its return value tells whether the end was reached. `find_path`
  just runs it to completion. Cells holding `1` are walls.
- `neighbours` expects heights sorted ascending and reports a missing side
  as `None`; `locate_marbles` gives `None` for a query that is absent.
- `sumset_max` returns `None` when no `d = a + b + c` exists.
- `uncompress` stops at a line holding only `0`.

## Examples

```python
from contestkit.backtracking import count_queens
from contestkit.dynamic import optimal_bst_cost, shortest_tour

count_queens(8)                    # 92 placements on an 8x8 board
optimal_bst_cost([34, 8, 50])      # 142

graph = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]
shortest_tour(graph, 0)            # 80
```

Building a directory tree from backslash-separated paths:

```python
from contestkit.disktree import DiskTree

tree = DiskTree()
tree.add_path(r"home\games\a")
tree.add_path(r"home\games\b")
print(tree.render())
```

Each child is indented one space deeper than its parent, and siblings are
listed in sorted order.

## Command line

```
contestkit COMMAND < input.txt
```

The command reads all of standard input, prints one answer per line, and
exits with status 1 and a message on standard error if the input is
malformed. For example:

```
echo 8 | contestkit queens
```

prints `92`.

| Command       | Input                                                        | Output |
|---------------|--------------------------------------------------------------|--------|
| `queens`      | board size n                                                 | number of placements |
| `permute`     | words                                                        | every permutation of each word |
| `change`      | amounts                                                      | fewest coins for each |
| `obst`        | count, then that many frequencies                            | `Cost of Optimal BST is ...` |
| `lcs`         | two words                                                    | a longest common subsequence |
| `bachet`      | repeated: stones, move count, moves                          | `Stan wins` / `Ollie wins` |
| `oil`         | repeated: rows, cols, grid characters; ends at `0 0`         | number of deposits |
| `maze`        | rows, cols, grid of 0/1, start row and column, end row and column | each search state, then whether a path exists |
| `palindrome`  | words                                                        | each word extended to a palindrome |
| `containers`  | repeated: vessel count, container count, vessels             | smallest capacity |
| `chimp`       | count, sorted heights, query count, queries                  | shorter and taller neighbour, `X` if none |
| `marble`      | repeated: count, query count, marbles, queries; ends at `0 0` | `CASE# n:` then positions |
| `joseph`      | values of k; ends at `0`                                     | smallest m |
| `lastdigit`   | numbers of any length; ends at `0`                           | last digit of 1^1 + ... + N^N |
| `powercrisis` | region counts; ends at `0`                                   | step that switches off region 13 last (0 if none) |
| `sumset`      | repeated: count, values; ends at `0`                         | largest d, or `no solution` |
| `lines`       | case count, then per case: point count and points            | number of distinct lines |
| `beemaja`     | cell numbers                                                 | hexagonal coordinates |
| `disktree`    | repeated: path count, backslash-separated paths              | indented tree, then a blank line |
| `uncompress`  | move-to-front compressed text, ending at a line `0`          | expanded text |
| `tsp`         | size n, then an n x n weight matrix                          | cheapest round trip from vertex 0 |