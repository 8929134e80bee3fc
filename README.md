# menustructs

Small, dependency-free container types, plus interactive menu programs that
let you try them out from a terminal.

## Installation

    pip install menustructs

To run the test suite:

    pip install "menustructs[test]"
    pytest

## Containers

### Queues (`menustructs.queues`)

- `LinearQueue(capacity=5)` is a fixed-size queue in which each slot is used
  only once. Dequeuing does not free space for new items. Space comes back
  only when the queue has been emptied completely.
- `CircularQueue(capacity=5)` is a fixed-size ring buffer. Space freed by
  dequeuing can be used again straight away.
- `LinkedQueue()` is an unbounded queue.

All queues provide the following:

- `enqueue(item)`
- `dequeue()`, which returns the front item
- `is_empty()`
- `len()`
- iteration from front to rear

The bounded queues also have `is_full()` and a `capacity` attribute. A
capacity below 1 raises `ValueError`.

Errors:

- `enqueue` on a full queue raises `QueueFullError`.
- `dequeue` on an empty queue raises `QueueEmptyError`.

```python
from menustructs.queues import CircularQueue, QueueFullError

q = CircularQueue(5)
for n in range(5):
    q.enqueue(n)
q.dequeue()        # -> 0
q.enqueue(5)       # the freed slot is reused
list(q)            # -> [1, 2, 3, 4, 5]
try:
    q.enqueue(6)
except QueueFullError:
    print("Queue is full")
```

### Stack (`menustructs.stack`)

`LinkedStack()` is an unbounded stack. It provides `push(item)`, `pop()`,
`is_empty()` and `len()`. Iteration runs from the top of the stack to the
bottom. Calling `pop` on an empty stack raises `StackUnderflowError`.

```python
from menustructs.stack import LinkedStack

s = LinkedStack()
s.push("a")
s.push("b")
list(s)            # -> ["b", "a"]
s.pop()            # -> "b"
```

### Singly linked list (`menustructs.linkedlist`)

`SinglyLinkedList()` numbers its positions from 1. It provides:

- `insert_first(item)`
- `insert_last(item)`
- `insert_at(position, item)`: valid positions run from 1 to `len + 1`.
- `insert_after(position, item)`: valid positions run from 1 to `len`.
- `delete_first()`, `delete_last()` and `delete_at(position)`: each returns
  the item it removed.
- `is_empty()`
- `len()`
- iteration from head to tail

Errors:

- A position that is out of range, or below 1, raises `PositionError`.
- Deleting from an empty list raises `ListEmptyError`.

```python
from menustructs.linkedlist import SinglyLinkedList

lst = SinglyLinkedList()
lst.insert_last("b")
lst.insert_first("a")
lst.insert_after(2, "c")
list(lst)          # -> ["a", "b", "c"]
lst.delete_at(2)   # -> "b"
```

## Menu programs

The `menustructs` command runs a numbered menu for one container. Give the
name of the container as an argument, for example:

    menustructs circular-queue

These programs are available:

| Program | Container | Items |
| --- | --- | --- |
| `linear-queue` | `LinearQueue(5)` | integers |
| `circular-queue` | `CircularQueue(5)` | integers |
| `linked-queue` | `LinkedQueue` | integers |
| `stack` | `LinkedStack` | integers |
| `string-linear-queue` | `LinearQueue(5)` | text lines |
| `string-circular-queue` | `CircularQueue(5)` | text lines |
| `string-linked-queue` | `LinkedQueue` | text lines |
| `string-stack` | `LinkedStack` | text lines |
| `linked-list` | `SinglyLinkedList` | single words |

The queue and stack menus offer four entries: add, remove, display and exit.
The linked-list menu offers nine entries: insert first, insert at end, insert
at position, insert after position, delete first, delete at end, delete at
position, display and exit.

A text-line item keeps at most 99 characters. The program reads your choices
from standard input and writes its results to standard output. It stops when
you pick the exit entry or when the input ends. To list the programs, run:

    menustructs --help

You can also drive a menu from code with `menustructs.cli.run_menu`. Pass it a
program name and two text streams:

```python
import io
from menustructs.cli import run_menu

out = io.StringIO()
run_menu("stack", io.StringIO("1\n7\n3\n4\n"), out)
```

`run_menu` raises `ValueError` for an unknown program name.

## Limitations

Contents are held in memory only. The menu programs do not save anything, so
whatever you entered is gone once a program exits.