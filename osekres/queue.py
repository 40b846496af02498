"""Ring-structured doubly linked queue with a header node."""

from __future__ import annotations

from typing import Any, Iterator

__all__ = ["QueueNode", "Queue"]


class QueueNode:
    """An entry that can be linked into a :class:`Queue`.

    A fresh node links to itself, which is also the state of an empty queue
    header.
    """

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: QueueNode = self
        self.prev: QueueNode = self

    def delete(self) -> None:
        """Unlink this entry from the queue it is in."""
        self.prev.next = self.next
        self.next.prev = self.prev
        self.next = self
        self.prev = self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Queue(QueueNode):
    """Queue header: ``next`` is the first entry, ``prev`` the last."""

    def __init__(self) -> None:
        super().__init__()

    def insert_prev(self, entry: QueueNode) -> None:
        """Insert ``entry`` before the header, that is at the tail."""
        entry.prev = self.prev
        entry.next = self
        self.prev.next = entry
        self.prev = entry

    def insert_next(self, entry: QueueNode) -> None:
        """Insert ``entry`` after the header, that is at the head."""
        entry.next = self.next
        entry.prev = self
        self.next.prev = entry
        self.next = entry

    def delete_next(self) -> QueueNode:
        """Remove and return the first entry."""
        if self.empty():
            raise IndexError("delete_next from an empty queue")
        entry = self.next
        self.next = entry.next
        entry.next.prev = self
        entry.next = entry
        entry.prev = entry
        return entry

    def empty(self) -> bool:
        """True if the queue holds no entries."""
        return self.next is self

    def __iter__(self) -> Iterator[QueueNode]:
        node = self.next
        while node is not self:
            following = node.next
            yield node
            node = following

    def __repr__(self) -> str:
        return f"Queue({[node.value for node in self]!r})"