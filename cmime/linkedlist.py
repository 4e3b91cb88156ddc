"""A doubly linked list whose elements can be addressed and spliced directly."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Destroy = Callable[[Any], None]


class ListElement:
    """One node of a :class:`LinkedList`, holding a reference to its data."""

    __slots__ = ("data", "prev", "next", "_owner")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[ListElement] = None
        self.next: Optional[ListElement] = None
        self._owner: Optional[LinkedList] = None

    def is_head(self) -> bool:
        """Return True if this element has no predecessor."""
        return self.prev is None

    def is_tail(self) -> bool:
        """Return True if this element has no successor."""
        return self.next is None

    def __repr__(self) -> str:
        return f"ListElement({self.data!r})"


class LinkedList:
    """Doubly linked list with an optional destroy callback used by :meth:`clear`."""

    def __init__(self, destroy: Optional[Destroy] = None) -> None:
        self.destroy = destroy
        self._head: Optional[ListElement] = None
        self._tail: Optional[ListElement] = None
        self._size = 0

    @property
    def head(self) -> Optional[ListElement]:
        """The first element, or None for an empty list."""
        return self._head

    @property
    def tail(self) -> Optional[ListElement]:
        """The last element, or None for an empty list."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for elem in self.elements():
            yield elem.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def elements(self) -> Iterator[ListElement]:
        """Yield the elements from head to tail."""
        elem = self._head
        while elem is not None:
            following = elem.next
            yield elem
            elem = following

    def clear(self) -> None:
        """Remove every element, tail first, handing each datum to the destroy callback."""
        while self._size > 0:
            data = self.remove(self._tail)
            if self.destroy is not None:
                self.destroy(data)

    def remove(self, elem: Optional[ListElement]) -> Any:
        """Unlink ``elem`` from the list and return its data."""
        if elem is None or self._size == 0:
            raise ValueError("cannot remove from an empty list or a missing element")
        if elem._owner is not self:
            raise ValueError("element does not belong to this list")

        if elem is self._head:
            self._head = elem.next
            if self._head is None:
                self._tail = None
            else:
                self._head.prev = None
        else:
            assert elem.prev is not None
            elem.prev.next = elem.next
            if elem.next is None:
                self._tail = elem.prev
            else:
                elem.next.prev = elem.prev

        elem.prev = elem.next = None
        elem._owner = None
        self._size -= 1
        return elem.data

    def _check_anchor(self, elem: Optional[ListElement]) -> None:
        if self._size != 0:
            if elem is None:
                raise ValueError("an anchor element is required for a non-empty list")
            if elem._owner is not self:
                raise ValueError("element does not belong to this list")

    def _insert_first(self, new: ListElement) -> None:
        self._head = self._tail = new
        new.prev = new.next = None

    def insert_next(self, elem: Optional[ListElement], data: Any) -> ListElement:
        """Insert ``data`` after ``elem`` and return the new element."""
        self._check_anchor(elem)
        new = ListElement(data)
        new._owner = self
        if self._size == 0:
            self._insert_first(new)
        else:
            assert elem is not None
            new.next = elem.next
            new.prev = elem
            if elem.next is None:
                self._tail = new
            else:
                elem.next.prev = new
            elem.next = new
        self._size += 1
        return new

    def insert_prev(self, elem: Optional[ListElement], data: Any) -> ListElement:
        """Insert ``data`` before ``elem`` and return the new element."""
        self._check_anchor(elem)
        new = ListElement(data)
        new._owner = self
        if self._size == 0:
            self._insert_first(new)
        else:
            assert elem is not None
            new.next = elem
            new.prev = elem.prev
            if elem.prev is None:
                self._head = new
            else:
                elem.prev.next = new
            elem.prev = new
        self._size += 1
        return new

    def append(self, data: Any) -> ListElement:
        """Add ``data`` at the tail."""
        if data is None:
            raise ValueError("list data must not be None")
        return self.insert_next(self._tail, data)

    def prepend(self, data: Any) -> ListElement:
        """Add ``data`` at the head."""
        if data is None:
            raise ValueError("list data must not be None")
        return self.insert_prev(self._head, data)

    def pop_tail(self) -> Any:
        """Remove the tail element and return its data, or None if the list is empty."""
        if self._size == 0:
            return None
        return self.remove(self._tail)

    def pop_head(self) -> Any:
        """Remove the head element and return its data, or None if the list is empty."""
        if self._size == 0:
            return None
        return self.remove(self._head)

    def map(self, func: Callable[..., Any], *args: Any) -> None:
        """Call ``func(elem, *args)`` for every element from head to tail."""
        for elem in self.elements():
            func(elem, *args)

    def map_new(self, func: Callable[..., Any], *args: Any) -> "LinkedList":
        """Return a new list holding ``func(elem, *args)`` for every element."""
        result = LinkedList(None)
        for elem in self.elements():
            result.append(func(elem, *args))
        return result