# dsakit

A small collection of classic data structures and algorithms on integers,
written in plain Python with no dependencies beyond the standard library.

## Installation

```
pip install .
```

Install the test extra and run the suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `dsakit.arrays`

- `average(values)`: integer mean, truncated toward zero; `ValueError` on an
  empty sequence.
- `total(values)`: the sum.
- `max_min(values)`: `(maximum, minimum)`; `ValueError` when empty.
- `largest_two(values)`: the largest value and the largest value distinct
  from it. The scan starts from the first two elements, so if all elements
  are equal both results are that value. Needs at least two values.
- `second_largest_and_smallest(values)`: the second element from each end of
  the descending order, duplicates kept. Needs at least two values.
- `insert_at(values, position, value)`: a new list with `value` inserted at
  the 1-based `position`; `IndexError` outside `1..len(values) + 1`.
- `remove_adjacent_duplicates(values)`: collapses runs of equal neighbours.
- `reverse_values(values)`, `sort_descending(values)`.

### `dsakit.searching`

- `binary_search(values, target)` and `binary_search_recursive(values, target)`:
  an index of `target` in a sorted sequence, or `None`.
- `linear_search(values, target)`: every index where `target` occurs.

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` and
`quick_sort` each take an iterable and return a new ascending list.

### `dsakit.stack_algorithms`

- `evaluate_postfix(expression)`: evaluates postfix expressions of
  single-digit operands with `+ - * /`; other characters are ignored and
  division truncates toward zero. Raises `ValueError` on stack underflow or
  on more than 100 pending operands, `ZeroDivisionError` on division by zero.
- `reverse_string(text)`.
- `hanoi_moves(count, source="A", auxiliary="B", destination="C")`: a
  generator of `(from, to)` moves; `ValueError` for a negative count.

### `dsakit.stacks`

`ArrayStack(capacity)` (bounded) and `LinkedStack()` (unbounded), both with
`push`, `pop`, `peek`, `is_empty`, `len()` and iteration from top to bottom.
A full `ArrayStack` raises `StackOverflow`; popping or peeking an empty
stack raises `StackUnderflow`.

### `dsakit.queues`

`LinkedQueue()` (unbounded) and `ArrayQueue(capacity)`, both with `enqueue`,
`dequeue`, `len()` and iteration from front to back. `ArrayQueue` never
reuses slots: after `capacity` values have been enqueued it raises
`QueueOverflow`, even if some were dequeued. Dequeuing from an empty queue
raises `QueueUnderflow`.

### `dsakit.graphs`

- `adjacency_matrix(vertex_count, edges)`: the symmetric 0/1 matrix of an
  undirected graph.
- `dfs_order(vertex_count, edges)`: depth-first order over every component,
  starting each from the lowest unvisited vertex, neighbours in increasing
  order.
- `Graph(vertex_count)` with `add_edge(source, destination)`,
  `neighbors(vertex)` (most recently added first) and `bfs(start)`, which
  returns the breadth-first visiting order.

Out-of-range vertices raise `IndexError`.

### `dsakit.bst`

`BinarySearchTree(values=())` with `insert`, `delete` (absent values are
ignored; a node with two children takes its in-order successor's value),
`preorder`, `inorder`, `postorder` and their explicit-stack counterparts
`iterative_preorder`, `iterative_inorder`, `iterative_postorder`. It also
supports `len()`, `in` and ascending iteration. Equal values go to the right
subtree.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.stack_algorithms import evaluate_postfix, hanoi_moves

print(merge_sort([5, 2, 9, 1]))             # [1, 2, 5, 9]
print(binary_search([1, 3, 5, 7], 5))       # 2
print(evaluate_postfix("2 3 4 + * 5 -"))    # 9
print(list(hanoi_moves(2, "A", "B", "C")))  # [('A', 'B'), ('A', 'C'), ('B', 'C')]
```

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)
print(tree.inorder())   # [20, 40, 50, 70]
```

```python
from dsakit.stacks import LinkedStack, StackUnderflow

stack = LinkedStack()
stack.push(1)
stack.push(2)
print(stack.pop())   # 2
stack.pop()
try:
    stack.pop()
except StackUnderflow:
    print("empty")
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus for reading numbers or driving the stacks, queues and trees; call the
functions and classes from your own code.