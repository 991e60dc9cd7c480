# turbolib

Small, readable implementations of classic data structures, algorithms and
object-oriented design patterns, in plain Python with no dependencies outside
the standard library.

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
| `turbolib.fibonacci` | `simple`, `cached` and `tabulated` Fibonacci numbers |
| `turbolib.linked_queue` | `Queue`, a doubly linked FIFO queue of integers |
| `turbolib.linked_stack` | `Stack`, a singly linked LIFO stack of strings |
| `turbolib.binary_search_tree` | `BinarySearchTree` and its `TreeNode` |
| `turbolib.hash_table` | `HashTable` of `Record`s, bucketed by key length |
| `turbolib.parallelism` | `nmap`, which runs one function on several threads |
| `turbolib.object_copy` | `String`, a mutable character buffer with explicit copying |
| `turbolib.polymorphism` | `Shape`, `Rectangle`, `Triangle` |
| `turbolib.singleton` | `Singleton` with a shared, lock-protected counter |
| `turbolib.builder` | `CarProduct`, `CarBuilder`, `SportsCarBuilder`, `Pipeline` |
| `turbolib.dependency_injection` | `EnergySource`, `EnergySourcePetrol`, `EnergySourceBattery`, `Car` |
| `turbolib.factory` | `Account`, `AccountFactory` and their personal and business variants |

## Examples

### Fibonacci numbers

All three functions count from `fib(1) == fib(2) == 1`. `simple` is plain
recursion, `cached` memoises (and raises `ValueError` for `n < 1`), and
`tabulated` builds the sequence bottom-up (raising `ValueError` for `n < 0`).

```python
from turbolib.fibonacci import simple, cached, tabulated

assert simple(9) == cached(9) == tabulated(9) == 34
```

### Hash table

`HashTable(width, depth)` has `width` buckets, each starting with `depth` free
slots; a key goes to bucket `len(key) % width`. When a bucket is full,
`create_item` appends to it and increases `depth`.

```python
from turbolib.hash_table import HashTable

table = HashTable(10, 5)
table.create_item("Porsche", "Stuttgart, Germany")
assert table.query_item("Porsche").value == "Stuttgart, Germany"

table.update_item("Porsche", "Zuffenhausen, Germany")
table.delete_item("Porsche")
print(table.format_table())   # free slots are shown as "nil"
table.print_table()           # the same, written to stdout or a given file
```

`create_item` and `update_item` raise `ValueError` for an empty key.
`query_item`, `update_item` and `delete_item` raise `KeyError` when the key is
not in the table.

### Queues and stacks

`dequeue` and `pop` return the removed value and raise `IndexError` when the
container is empty. Both classes support `len()` and iteration, and have a
`print(file=None)` method that writes one `-> value` line per item followed by
a blank line (the stack writes nothing when empty).

```python
from turbolib.linked_queue import Queue
from turbolib.linked_stack import Stack

queue = Queue()
for value in (30, 20, 40, 10):
    queue.enqueue(value)
assert queue.dequeue() == 30
assert list(queue) == [20, 40, 10]

stack = Stack()
for name in ("Jaguar", "Envision", "Avalanche", "McLaren"):
    stack.push(name)
assert stack.pop() == "McLaren"
assert list(stack) == ["Avalanche", "Envision", "Jaguar"]
```

### Binary search tree

Inserting a value that is already present does nothing.

```python
from turbolib.binary_search_tree import BinarySearchTree

tree = BinarySearchTree()
for value in (10, 6, 15, 3, 8, 20):
    tree.insert(value)
assert tree.contains(8)
assert not tree.contains(7)
assert tree.dfs_pre_order() == [10, 6, 3, 8, 15, 20]
```

### Running a function on several threads

`nmap(n_threads, fun, msg)` starts `n_threads` threads, each calling
`fun(msg)`, prints `Thread i returns: 0` as each one starts, waits for all of
them and returns their results in thread order. If any call raises, the first
such exception is raised after every thread has finished.

```python
from turbolib.parallelism import nmap

results = nmap(3, str.upper, "hello")
assert results == ["HELLO", "HELLO", "HELLO"]
```

### A string with its own buffer

`String.copy()` (and `copy.copy`/`copy.deepcopy`) gives a copy that shares no
storage with the original. Indexing is allowed from 0 up to and including
`len(s)`, the position of the terminating NUL; anything else raises
`IndexError("out of bounds")`.

```python
from turbolib.object_copy import String

first = String("test")
second = first.copy()
second[2] = "n"
assert str(first) == "test"
assert str(second) == "tent"
```

### Polymorphism

```python
from turbolib.polymorphism import Rectangle, Triangle

assert Rectangle(10, 7).area() == 70
assert Triangle(10, 5).area() == 25   # half of width * height, truncated toward zero
```

### Builder

```python
from turbolib.builder import Pipeline, SportsCarBuilder

builder = SportsCarBuilder()
pipeline = Pipeline(builder)

pipeline.build_rolling_chassis_product()
assert builder.get_product().count_parts() == 3

pipeline.build_full_featured_product()
assert builder.get_product().count_parts() == 7

builder.set_chassis()
builder.set_engine()
assert builder.get_product().count_parts() == 2
```

`get_product` hands over the product built so far and starts a new one.
`Pipeline(None)` raises `ValueError`.

### Factory method

```python
from turbolib.factory import AccountBusinessCreator, AccountPersonalCreator

assert AccountPersonalCreator().get_account_type() == "Personal"
assert AccountBusinessCreator().get_account_type() == "Business"
```

### Dependency injection

A `Car` uses whichever `EnergySource` it is given; `Car(None)` raises
`ValueError`. Each `get()` prints a line and lowers the source's `capacity`
(which starts at 100) by one.

```python
from turbolib.dependency_injection import Car, EnergySourcePetrol

petrol = EnergySourcePetrol()
car = Car(petrol)
car.get_energy()   # prints two lines
assert petrol.capacity == 99
```

### Singleton

There is exactly one instance; calling `Singleton()` raises `TypeError`.

```python
from turbolib.singleton import Singleton

instance = Singleton.get_instance()
instance.increment_counter()
assert Singleton.get_instance().counter_value() == instance.counter_value()
```

## What this package does not do

It is a library only: it has no command-line program, and nothing in it
stores data beyond the lifetime of the Python objects it creates.