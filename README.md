# dslab

A small collection of classic data structures and teaching simulations,
written with the standard library only.

## Modules

- `dslab.linked_list` – `ListNode` and `SinglyLinkedList`, a singly linked list
  that behaves like a Python sequence: `len()`, iteration, `in`, indexing and
  item assignment (negative indices allowed), `index`, plus `append`,
  `prepend`, `insert`, `pop_front`, `pop_back`, `remove_at`, `reverse` and
  `sort`. `insert` accepts positions from 0 to the current length; other
  positions raise `IndexError`.
- `dslab.doubly_linked_list` – `DoublyLinkedList`, with the same operations
  (except item assignment) and backward iteration through `reversed()`.
- `dslab.list_algorithms` – in-place exercises on a `SinglyLinkedList`:
  `remove_negatives`, `minimum`, `remove_adjacent_duplicates`, `keep_evens`,
  `is_palindrome`, `rotate` (moves the first `k` nodes to the end) and `swap`
  (exchanges the values at two positions).
- `dslab.stack` – `Stack` with `push`, `pop`, `peek`, `is_empty` and `clear`;
  `pop` and `peek` on an empty stack raise `IndexError`. Iteration runs from the
  top down.
- `dslab.bst` – `BinarySearchTree`, which sends values equal to a node to its
  right. It offers `insert`, `delete`, `in`, traversals (`preorder`, `inorder`,
  `postorder`, each returning a list), `minimum`, `maximum`, `height` and the
  search paths `path_to(end)` and `path(start, end)`.
- `dslab.cache` – `Cache`, a fixed-capacity key-value store with eviction
  chosen by `Policy.LRU`, `Policy.FIFO` or `Policy.RANDOM`. `get` returns
  `None` for a key that is not cached; a `random.Random` can be passed in to
  make random eviction repeatable.
- `dslab.sorting` – `merge` (stable merge of two ascending sequences) and
  `merge_sort`.
- `dslab.scheduling` – `Process` and the algorithms `fcfs`, `sjf`,
  `priority_scheduling`, `round_robin(processes, quantum)` and `srtf`. Each
  returns a `Schedule` holding `ScheduledProcess` results and Gantt entries,
  with `average_waiting_time()`, `format_table()` and `format_gantt()`.
- `dslab.restaurant` – `MenuItem`, `DiningOption`, `PaymentMethod` and an
  `Order` whose `total(dining, payment)` applies the surcharge given by
  `surcharge_rate` and rounds to the cent; `format_menu()` renders the menu
  board.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dslab.linked_list import SinglyLinkedList

numbers = SinglyLinkedList([10, 20, 30])
numbers.append(40)
numbers.prepend(5)
print(len(numbers))    # 5
print(20 in numbers)   # True
print(list(numbers))   # [5, 10, 20, 30, 40]
```

```python
from dslab.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
print(tree.inorder())      # [20, 30, 40, 50, 70]
print(tree.height())       # 3
print(tree.path_to(40))    # [50, 30, 40]
```

```python
from dslab.cache import Cache, Policy

cache = Cache(3, Policy.LRU)
cache.put(1, 100)
print(cache.get(1))   # 100
print(cache.get(2))   # None
```

```python
from dslab.scheduling import Process, round_robin

schedule = round_robin([Process(1, 5), Process(2, 3, arrival_time=1)], quantum=2)
print(schedule.average_waiting_time())
print(schedule)
```

## Command-line programs

Each program reads from standard input and writes to standard output.

| Command            | What it does                                                         |
|--------------------|----------------------------------------------------------------------|
| `dslab-list-shell` | Menu for building and editing a singly linked list (`--doubly` for a doubly linked one) |
| `dslab-bst`        | Builds a sample search tree and prints traversals and queries        |
| `dslab-cache`      | Shows an LRU cache of three entries evicting as new keys arrive      |
| `dslab-mergesort`  | Sorts integers given as arguments, or reads a count and values       |
| `dslab-scheduler`  | Reads processes, then runs the scheduling algorithm chosen from a menu |
| `dslab-restaurant` | Takes one order and prints the bill (`--delay` sets the welcome pause) |

For example:

```
dslab-mergesort 5 3 9 1
dslab-scheduler
```

## What it does not do

The interactive programs keep nothing between runs: the list built in
`dslab-list-shell`, the processes entered in `dslab-scheduler` and the order
taken by `dslab-restaurant` are lost when the program ends. The restaurant
program handles a single order and has no record of past sales.