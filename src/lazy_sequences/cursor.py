"""Explicit cursor over a lazy sequence."""

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_EMPTY = object()


class SequenceCursor(Generic[T]):
    """
    Cursor exposing ``has_next()`` / ``next()`` over any iterable.

    ``has_next()`` pulls at most one element ahead and buffers it, so the
    upstream is never advanced further than the consumer has asked about.
    Exceptions raised by the upstream surface from whichever call caused
    the pull.
    """

    def __init__(self, iterable: Iterable[T]):
        self._iterator = iter(iterable)
        self._buffered = _EMPTY
        self._exhausted = False
        self.consumed = 0

    def has_next(self) -> bool:
        """Return True if another element is available."""
        if self._buffered is not _EMPTY:
            return True
        if self._exhausted:
            return False
        try:
            self._buffered = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def next(self) -> T:
        """Return the next element, raising StopIteration when exhausted."""
        if not self.has_next():
            raise StopIteration
        element = self._buffered
        self._buffered = _EMPTY
        self.consumed += 1
        return element

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self.next()
