# algopack

Classic algorithms as small, dependency-free Python functions: sorting,
searching, quickselect, shortest paths, topological ordering, a spiral
matrix walk and a set of dynamic-programming solutions.

## Installation

```
pip install algopack
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "algopack[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `algopack.sorting` | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `odd_even_sort`, `pancake_sort`, `quick_sort`, `radix_sort`, `selection_sort`, `shell_sort`, `tim_sort` |
| `algopack.topological` | `topological_sort` |
| `algopack.dijkstra` | `dijkstra` |
| `algopack.snail` | `snail` |
| `algopack.search` | `binary_search`, `binary_search_rec`, `exponential_search`, `fibonacci_search`, `interpolation_search`, `jump_search`, `linear_search` |
| `algopack.ternary_search` | `ternary_search`, `ternary_search_rec` |
| `algopack.quick_select` | `quick_select` |
| `algopack.coin_change` | `coin_change` |
| `algopack.edit_distance` | `edit_distance`, `edit_distance_se` |
| `algopack.egg_drop` | `egg_drop` |
| `algopack.fibonacci` | `fibonacci`, `recursive_fibonacci`, `classical_fibonacci`, `logarithmic_fibonacci`, `memoized_fibonacci` |
| `algopack.knapsack` | `knapsack`, `rod_cut` |
| `algopack.subsequences` | `is_subsequence`, `longest_common_subsequence`, `longest_common_substring`, `longest_continuous_increasing_subsequence`, `longest_increasing_subsequence` |
| `algopack.subarrays` | `maximal_square`, `maximum_subarray` |

## Examples

```python
from algopack.sorting import bubble_sort
from algopack.search import binary_search
from algopack.dijkstra import dijkstra
from algopack.coin_change import coin_change
from algopack.knapsack import knapsack
from algopack.subsequences import longest_common_subsequence

numbers = [4, 3, 2, 1]
bubble_sort(numbers)              # sorts in place, returns None
print(numbers)                    # [1, 2, 3, 4]

print(binary_search([1, 5, 6, 7, 22], 7))   # 3

graph = {"a": {"c": 12}, "b": {"a": 10}, "c": {"b": 20}}
print(dijkstra(graph, "a"))
# {'a': None, 'c': ('a', 12), 'b': ('c', 32)}

print(coin_change([1, 2, 5], 11))           # 3
print(knapsack(26, [12, 7, 11, 8, 9], [24, 13, 23, 15, 16]))
# (51, 26, [2, 3, 4])

print(longest_common_subsequence("aggtab", "gxtxayb"))  # 'gtab'
```

## Behaviour worth knowing

- The sorts in `algopack.sorting` reorder the given mutable sequence in place
  and return `None`, except `pancake_sort`, which also returns a sorted list
  copy. `radix_sort` takes non-negative integers only and raises `ValueError`
  otherwise.
- Search functions return the index found, or `None` when the value is
  absent. Note the argument order: `binary_search(items, target)` and
  `binary_search_rec(items, target, left, right)` take the sequence first;
  `exponential_search`, `fibonacci_search`, `jump_search` and
  `linear_search` take the item first. `binary_search_rec` searches the
  half-open range `items[left:right]` and works on ascending or descending
  sequences, judged from the first and last elements.
- `ternary_search` and `ternary_search_rec` search the inclusive range
  `start..end`.
- `quick_select(items, left, right, index)` returns the element that belongs
  at `index` within the inclusive range `left..right`, reordering `items`.
- `dijkstra(graph, start)` takes a mapping of vertex to a mapping of
  neighbour to weight, and maps each reachable vertex to
  `(predecessor, distance)`, the start vertex to `None`. Every reached vertex
  must be a key of `graph`, or `KeyError` is raised.
- `topological_sort(graph)` takes a mapping of vertex to `(target, weight)`
  pairs (weights are ignored). Vertices on or behind a cycle are left out of
  the result.
- `edit_distance`, `edit_distance_se`, `is_subsequence` and
  `longest_common_substring` compare the UTF-8 bytes of their strings;
  `longest_common_subsequence` compares characters.
- `fibonacci` and `recursive_fibonacci` count with F(0) = F(1) = 1; the other
  Fibonacci functions use F(0) = 0, F(1) = 1. All raise `ValueError` for a
  negative `n`.
- `egg_drop` raises `ValueError` for fewer than one egg or negative floors;
  `coin_change` and `knapsack` for a negative amount or capacity; `knapsack`
  also when `weights` and `values` differ in length; `maximum_subarray` for
  an empty array.
- `maximal_square` leaves its matrix unchanged.

The package is a library only: it provides no command-line program.