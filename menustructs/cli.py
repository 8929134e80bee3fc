"""Interactive menus driving the queue, stack and linked-list containers."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TextIO

from menustructs.linkedlist import ListEmptyError, PositionError, SinglyLinkedList
from menustructs.queues import (
    CircularQueue,
    LinearQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)
from menustructs.stack import LinkedStack, StackUnderflowError

TEXT_LIMIT = 99

_INT_PATTERN = re.compile(r"[+-]?\d+")


class _EndOfInput(Exception):
    """Raised internally when the input stream runs dry."""


class _Input:
    """Line-buffered reader offering scanf/fgets-like primitives."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0

    def _fill(self) -> None:
        if self._pos < len(self._line):
            return
        self._line = self._stream.readline()
        self._pos = 0
        if not self._line:
            raise _EndOfInput

    def _skip_space(self) -> None:
        while True:
            self._fill()
            if not self._line[self._pos].isspace():
                return
            self._pos += 1

    def read_int(self) -> int | None:
        """Read an integer; on a mismatch consume the token and return None."""
        self._skip_space()
        match = _INT_PATTERN.match(self._line, self._pos)
        if match:
            self._pos = match.end()
            return int(match.group())
        self.read_word()
        return None

    def read_word(self) -> str:
        """Read one whitespace-delimited word."""
        self._skip_space()
        start = self._pos
        while self._pos < len(self._line) and not self._line[self._pos].isspace():
            self._pos += 1
        return self._line[start:self._pos]

    def skip_char(self) -> None:
        """Discard a single character."""
        self._fill()
        self._pos += 1

    def read_line(self) -> str:
        """Read the rest of a line, at most ``TEXT_LIMIT`` characters, without the newline."""
        self._fill()
        end = self._line.find("\n", self._pos)
        end = len(self._line) if end == -1 else end + 1
        end = min(end, self._pos + TEXT_LIMIT)
        text = self._line[self._pos:end]
        self._pos = end
        return text.split("\n", 1)[0]


@dataclass(frozen=True)
class _Menu:
    """Text and behaviour of a four-option add/remove/display menu."""

    make: Callable[[], Any]
    add: Callable[[Any, Any], None]
    remove: Callable[[Any], Any]
    menu: str
    prompt: str
    added: str
    removed: str
    empty: str
    label: str
    item: str
    farewell: str
    invalid: str
    text: bool


_QUEUE_MENU = (
    "\nSelect Operation:\n1. Enqueue\n2. Dequeue\n3. Display\n4. Exit\n"
    "Enter your choice: "
)
_LINKED_QUEUE_MENU = "\nMENU\n1. Enqueue\n2. Dequeue\n3. Display\n4. Exit\nEnter your choice: "
_STACK_MENU = "\nMENU\n1. Push\n2. Pop\n3. Display\n4. Exit\nEnter your choice: "


def _array_queue(make: Callable[[], Any], text: bool) -> _Menu:
    quoted = "'{}'" if text else "{}"
    return _Menu(
        make=make,
        add=lambda queue, item: queue.enqueue(item),
        remove=lambda queue: queue.dequeue(),
        menu=_QUEUE_MENU,
        prompt="Enter string to enqueue: " if text else "Enter element to enqueue: ",
        added=quoted + " inserted\n",
        removed=quoted + " is deleted\n",
        empty="Queue is empty\n",
        label="Queue elements: ",
        item=quoted + " ",
        farewell="Exiting program.\n",
        invalid="Invalid choice! Try again.\n",
        text=text,
    )


def _linked_queue(text: bool) -> _Menu:
    quoted = "'{}'" if text else "{}"
    return _Menu(
        make=LinkedQueue,
        add=lambda queue, item: queue.enqueue(item),
        remove=lambda queue: queue.dequeue(),
        menu=_LINKED_QUEUE_MENU,
        prompt="Enter string to enqueue: " if text else "Enter value to enqueue: ",
        added="Enqueued " + quoted + " to queue\n",
        removed="Dequeued " + quoted + " from queue\n",
        empty="Queue is empty\n",
        label="QUEUE: ",
        item="{} ",
        farewell="Exiting...\n",
        invalid="Invalid choice! Please try again.\n",
        text=text,
    )


def _linked_stack(text: bool) -> _Menu:
    quoted = "'{}'" if text else "{}"
    return _Menu(
        make=LinkedStack,
        add=lambda stack, item: stack.push(item),
        remove=lambda stack: stack.pop(),
        menu=_STACK_MENU,
        prompt="Enter string to push: " if text else "Enter value to push: ",
        added="Pushed " + quoted + " onto stack\n",
        removed="Popped " + quoted + " from stack\n",
        empty="Stack is empty\n",
        label="STACK: ",
        item="{} ",
        farewell="Exiting...\n",
        invalid="Invalid choice! Please try again.\n",
        text=text,
    )


_MENUS: dict[str, _Menu] = {
    "linear-queue": _array_queue(LinearQueue, text=False),
    "circular-queue": _array_queue(CircularQueue, text=False),
    "linked-queue": _linked_queue(text=False),
    "stack": _linked_stack(text=False),
    "string-linear-queue": _array_queue(LinearQueue, text=True),
    "string-circular-queue": _array_queue(CircularQueue, text=True),
    "string-linked-queue": _linked_queue(text=True),
    "string-stack": _linked_stack(text=True),
}

LINKED_LIST = "linked-list"
PROGRAMS = (*_MENUS, LINKED_LIST)

_LIST_MENU = (
    "\n--- MENU ---\n"
    "1. Insert at First\n"
    "2. Insert at End\n"
    "3. Insert at Position\n"
    "4. Insert After Position\n"
    "5. Delete at First\n"
    "6. Delete at End\n"
    "7. Delete at Position\n"
    "8. Display\n"
    "9. Exit\n"
    "Enter choice: "
)


def _run_container(spec: _Menu, reader: _Input, out: TextIO) -> None:
    container = spec.make()
    while True:
        out.write(spec.menu)
        choice = reader.read_int()
        if spec.text:
            reader.skip_char()
        if choice == 1:
            out.write(spec.prompt)
            item = reader.read_line() if spec.text else reader.read_int()
            if item is None:
                out.write(spec.invalid)
                continue
            try:
                spec.add(container, item)
            except QueueFullError as exc:
                out.write(f"{exc}\n")
            else:
                out.write(spec.added.format(item))
        elif choice == 2:
            try:
                item = spec.remove(container)
            except (QueueEmptyError, StackUnderflowError) as exc:
                out.write(f"{exc}\n")
            else:
                out.write(spec.removed.format(item))
        elif choice == 3:
            if container.is_empty():
                out.write(spec.empty)
            else:
                out.write(spec.label + "".join(spec.item.format(x) for x in container) + "\n")
        elif choice == 4:
            out.write(spec.farewell)
            return
        else:
            out.write(spec.invalid)


def _ask_word(reader: _Input, out: TextIO) -> str:
    out.write("Enter string: ")
    return reader.read_word()


def _run_list(reader: _Input, out: TextIO) -> None:
    items = SinglyLinkedList()
    while True:
        out.write(_LIST_MENU)
        choice = reader.read_int()
        if choice == 1:
            items.insert_first(_ask_word(reader, out))
            out.write("Inserted at beginning.\n")
        elif choice == 2:
            items.insert_last(_ask_word(reader, out))
            out.write("Inserted at end.\n")
        elif choice == 3:
            out.write("Enter position: ")
            pos = reader.read_int()
            if pos is None or pos < 1:
                out.write("Invalid position.\n")
            elif pos == 1:
                items.insert_first(_ask_word(reader, out))
                out.write("Inserted at beginning.\n")
            elif pos > len(items) + 1:
                out.write("Position out of range.\n")
            else:
                items.insert_at(pos, _ask_word(reader, out))
                out.write(f"Inserted at position {pos}.\n")
        elif choice == 4:
            out.write("Enter position after which to insert: ")
            pos = reader.read_int()
            if pos is None or pos < 1:
                out.write("Invalid position.\n")
            elif pos > len(items):
                out.write("Position out of range.\n")
            else:
                items.insert_after(pos, _ask_word(reader, out))
                out.write(f"Inserted after position {pos}.\n")
        elif choice in (5, 6, 7):
            try:
                if choice == 5:
                    removed = items.delete_first()
                elif choice == 6:
                    removed = items.delete_last()
                else:
                    out.write("Enter position to delete: ")
                    pos = reader.read_int()
                    removed = items.delete_at(0 if pos is None else pos)
            except (ListEmptyError, PositionError) as exc:
                out.write(f"{exc}\n")
            else:
                out.write(f"Deleted: {removed}\n")
        elif choice == 8:
            if items.is_empty():
                out.write("List is empty.\n")
            else:
                out.write("Linked List:\n" + "".join(f"{x} -> " for x in items) + "NULL\n")
        elif choice == 9:
            out.write("Exiting.\n")
            return
        else:
            out.write("Invalid choice.\n")


def run_menu(program: str, stdin: TextIO, stdout: TextIO) -> int:
    """Run the interactive menu named ``program`` until exit or end of input."""
    if program != LINKED_LIST and program not in _MENUS:
        raise ValueError(f"unknown program: {program!r}")
    reader = _Input(stdin)
    try:
        if program == LINKED_LIST:
            _run_list(reader, stdout)
        else:
            _run_container(_MENUS[program], reader, stdout)
    except _EndOfInput:
        pass
    stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="menustructs",
        description="Menu-driven queue, stack and linked-list demonstrations.",
    )
    parser.add_argument("program", choices=PROGRAMS, help="which structure to drive")
    args = parser.parse_args(argv)
    return run_menu(args.program, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())