# algokit

Plain-Python implementations of classic algorithms, grouped by topic. The
package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.arrays`

- `swap_pair(first, second)`: the two values in swapped order.
- `average(values)`: arithmetic mean.
- `special_sum(values, index)`: `values[index]` plus every second element after it.
- `largest_special_sum(values)`: `(sum, index)` of the largest positive special
  sum, first index on ties, or `None` if none is above zero.
- `window_maxima(values, k)`: maximum of each contiguous window of size `k`.
- `merge_sorted(first, second)`: merge two sorted iterables.
- `flood_fill(screen, x, y, new_color)`: repaint a 4-connected region in place.
- `kadane(values)`: largest sum of a non-empty contiguous run.
- `find_peak(values)`: index of an element not smaller than its neighbours.
- `reverse_range(values, start, end)`: reverse an inclusive range in place.
- `rotate_square(matrix)`: rotate a square matrix 90 degrees clockwise in place.
- `two_sum_pairs(nums, target)`: all index pairs `(i, j)` with `i <= j` whose
  values sum to `target` (an index may pair with itself).

### `algokit.numtheory`

`factorial`, `is_armstrong`, `fibonacci` (with `fibonacci(0) == 0`), `is_even`,
`pascal_triangle`, `is_prime`, `reverse_number` (keeps the sign) and `sieve`.
`sieve(n)` returns the numbers from 1 to `n` left unmarked by the sieve of
Eratosthenes: 1 followed by every prime up to `n`.

### `algokit.sorting`

`bead_sort`, `bucket_sort`, `heap_sort`, `merge_sort`, `selection_sort`,
`tree_sort`, `bubble_sort`, `cycle_sort`, `insertion_sort`, `quick_sort` and
`shell_sort`. Each takes an iterable and returns a new ascending list, leaving
the input untouched. Some limits:

- `bead_sort` accepts only non-negative integers.
- `bucket_sort` accepts only numbers in `[0, 1)`.
- `tree_sort` keeps each value once, so duplicates are dropped.

### `algokit.searching`

`binary_search`, `linear_search`, `ternary_search` and `exponential_search`.
Each returns an index of the target, or `None` when it is absent. All but
`linear_search` expect ascending input.

### `algokit.graphs`

- `floyd_warshall(graph)`: all-pairs shortest distances from a square adjacency
  matrix in which `INF` (99999) marks a missing edge.
- `format_distances(dist)`: tab-separated text, with `INF` for no path.
- `Edge`: a frozen `(src, dest, weight)` record.
- `WeightedGraph(vertices)`: `add_edge(src, dest, weight)` and `kruskal_mst()`,
  which returns the edges of a minimum spanning forest, lightest first.
- `Digraph(vertices)`: `add_edge(v, w)` and `topological_sort()`.
- `UndirectedGraph(vertices)`: `add_edge(v, w)` and
  `roots_for_minimum_height()`, which peels leaves until at most two vertices
  remain and raises `ValueError` if the graph is not a tree.

### `algokit.problems`

`length_of_longest_substring`, `trap` (rain water), `longest_palindrome`,
`largest_rectangle_area`, `calculate_minimum_hp` (dungeon game),
`max_subarray_sum`, `rot_oranges` (minutes until all oranges rot, or `-1`) and
`find_median_sorted_arrays`.

### `algokit.trees`

`TreeNode` (a dataclass with `val`, `left`, `right`) and `min_depth(root)`.

## Examples

```python
from algokit.sorting import heap_sort
from algokit.searching import binary_search
from algokit.numtheory import sieve
from algokit.graphs import Digraph

heap_sort([12, 11, 13, 5, 6, 7])        # [5, 6, 7, 11, 12, 13]
binary_search([1, 3, 5, 7], 5)          # 2
binary_search([1, 3, 5, 7], 4)          # None
sieve(20)                               # [1, 2, 3, 5, 7, 11, 13, 17, 19]

g = Digraph(6)
for v, w in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(v, w)
g.topological_sort()                    # [5, 4, 2, 3, 1, 0]
```

## Errors

Input a function cannot work on raises an exception: `ValueError` for an empty
sequence where a result needs at least one element, a negative count, a
non-square matrix or an out-of-range vertex, and `IndexError` for a position
outside the data.

## What it does not do

This is a library only. It has no command-line program and reads no input
from the terminal; call the functions from your own code.