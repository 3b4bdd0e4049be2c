"""A doubly linked list whose cells can be held and removed directly."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TextIO


@dataclass(eq=False)
class Cell:
    """One cell of a :class:`LinkedList`."""

    data: Any
    prev: Cell | None = field(default=None, repr=False)
    next: Cell | None = field(default=None, repr=False)
    _owner: LinkedList | None = field(default=None, repr=False, compare=False)


class LinkedList:
    """Doubly linked list; empty when both ``head`` and ``tail`` are None."""

    def __init__(self) -> None:
        self.head: Cell | None = None
        self.tail: Cell | None = None

    def add_head(self, data: Any) -> Cell:
        """Store ``data`` in a new first cell and return that cell."""
        cell = Cell(data, prev=None, next=self.head, _owner=self)
        if self.head is None:
            self.tail = cell
        else:
            self.head.prev = cell
        self.head = cell
        return cell

    def add_tail(self, data: Any) -> Cell:
        """Store ``data`` in a new last cell and return that cell."""
        cell = Cell(data, prev=self.tail, next=None, _owner=self)
        if self.tail is None:
            self.head = cell
        else:
            self.tail.next = cell
        self.tail = cell
        return cell

    def remove(self, cell: Cell) -> None:
        """Unlink ``cell`` from the list; its data is left untouched."""
        if cell._owner is not self:
            raise ValueError("cell does not belong to this list")
        if cell.prev is not None:
            cell.prev.next = cell.next
        else:
            self.head = cell.next
        if cell.next is not None:
            cell.next.prev = cell.prev
        else:
            self.tail = cell.prev
        cell.prev = cell.next = None
        cell._owner = None

    def clear(self) -> None:
        """Remove every cell."""
        for cell in list(self.cells()):
            self.remove(cell)

    def cells(self) -> Iterator[Cell]:
        """Yield the cells from head to tail."""
        cell = self.head
        while cell is not None:
            following = cell.next
            yield cell
            cell = following

    def show(self, stream: TextIO | None = None) -> int:
        """Write every cell's data as text, head first; return characters written."""
        out = sys.stdout if stream is None else stream
        written = 0
        for data in self:
            text = str(data)
            out.write(text)
            written += len(text)
        return written

    def __len__(self) -> int:
        return sum(1 for _ in self.cells())

    def __iter__(self) -> Iterator[Any]:
        return (cell.data for cell in self.cells())


def swap_cells(c1: Cell, c2: Cell) -> None:
    """Exchange the data of two cells, from the same list or not."""
    c1.data, c2.data = c2.data, c1.data