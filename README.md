# dsakit

A small collection of classic data structures and algorithms written in plain
Python. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.avl` | `AVLTree` with `insert`, `delete`, `preorder`, `inorder`, membership and length |
| `dsakit.heap` | max-heaps built by insertion (`build_heap_by_insertion`) or bottom-up (`heapify`), `delete_max`, `heap_sort`, `heap_sort_heapify`, 1-based index helpers |
| `dsakit.hashing` | `LinearProbingTable`, `QuadraticProbingTable`, `ChainedHashTable` |
| `dsakit.sorting` | bubble (with optional comparator), insertion, selection, merge, quick, count and bucket sort, `sort_descending` |
| `dsakit.searching` | `linear_search`, `binary_search`, `interpolation_position`, `contains_sorted`, `lower_bound`, `upper_bound`, `find_index` |
| `dsakit.stacks` | `LinkedStack`, `ArrayStack`, `is_balanced`, `precedence`, `infix_to_postfix` |
| `dsakit.binary_tree` | `build_tree` from level-order values, recursive and iterative traversals, `height`, `array_children` |
| `dsakit.queues` | `ArrayQueue`, `CircularQueue`, `drain` |
| `dsakit.graph` | `bfs`, `adjacency_matrix`, `adjacency_list`, `Graph` |
| `dsakit.arrays` | gap counting, Kadane's maximum subarray, merging, union and intersection, duplicates, missing elements and more |
| `dsakit.strings` | anagrams, palindromes, duplicates, case conversion, permutations, subsets, tokenizing |
| `dsakit.numeric` | Fibonacci, factorials and combinations, Catalan tree counts, tree height and node ranges, greedy coin change, next permutation, rotation |

Sorting functions and most list helpers return new lists and leave their
input unchanged.

## Examples

```python
from dsakit.avl import AVLTree

tree = AVLTree()
for key in (10, 20, 30, 25, 28, 27, 5):
    tree.insert(key)
tree.preorder()      # [25, 10, 5, 20, 28, 27, 30]
tree.delete(28)
27 in tree           # True
len(tree)            # 6
```

```python
from dsakit.heap import heap_sort
from dsakit.sorting import merge_sort

heap_sort([10, 20, 30, 25, 5])   # [5, 10, 20, 25, 30]
merge_sort([3, 1, 2])            # [1, 2, 3]
```

```python
from dsakit.hashing import LinearProbingTable

table = LinearProbingTable()
for key in (10, 20, 30, 11, 5, 25, 29):
    table.insert(key)
table.search(20)   # 1
```

```python
from dsakit.stacks import is_balanced, infix_to_postfix

is_balanced("{[()]}")          # True
infix_to_postfix("a+b*c-d/e")  # "abc*+de/-"
```

```python
from dsakit.graph import bfs

bfs([[1, 2], [0, 3], [0], [1]])   # [0, 1, 2, 3]
```

```python
from dsakit.numeric import fibonacci, tree_counts, greedy_coins

fibonacci(7)       # 13
tree_counts(3)     # TreeCounts(unlabelled=5, labelled=30)
greedy_coins(93)   # [50, 20, 20, 2, 1]
```

## Errors

Operations that cannot proceed raise exceptions instead of returning sentinel
values: a full open-addressing table raises `TableFullError`, a full or empty
stack raises `StackOverflowError` or `StackUnderflowError`, a full or empty
queue raises `QueueFullError` or `QueueEmptyError`, deleting a missing key from
an `AVLTree` raises `KeyError`, and the heap index helpers raise `IndexError`
for positions without a parent or child.

## What it does not do

`dsakit` is a library only. It installs no command-line program and reads
nothing from standard input or files; every function takes its data as
arguments and returns its result.