"""Re-iterable, chainable wrapper around lazy sequence producers."""

from itertools import islice
from typing import Callable, Generic, Iterable, Iterator, List, TypeVar

from .filters import filter_by, filter_even, filter_non_blank, require_predicate
from .ordering import order_alphabetically
from .protocols import TextPredicate
from .sources import name_sequence, range_sequence

T = TypeVar("T")


class LazySequence(Generic[T]):
    """
    A sequence that re-runs its producer on every iteration.

    A plain generator can be consumed only once. LazySequence keeps the
    producing operation instead, so every ``iter()`` starts a fresh,
    independent pass with identical contents. Chaining methods build new
    LazySequence objects without pulling any element.
    """

    def __init__(self, factory: Callable[[], Iterable[T]]):
        """
        Initialize sequence.

        Args:
            factory: Zero-argument callable returning a new iterable each call
        """
        if not callable(factory):
            raise TypeError("factory must be callable")
        self._factory = factory

    @classmethod
    def of_range(cls, start: int, total: int) -> "LazySequence[int]":
        """Create a sequence over ``range_sequence(start, total)``."""
        # Validate now rather than on first iteration
        range_sequence(start, total)
        return cls(lambda: range_sequence(start, total))

    @classmethod
    def of_names(cls) -> "LazySequence[str]":
        """Create a sequence over the demo names."""
        return cls(name_sequence)

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def even(self) -> "LazySequence[int]":
        """Keep only even numbers."""
        return LazySequence(lambda: filter_even(self))

    def non_blank(self) -> "LazySequence[str]":
        """Drop None, empty and whitespace-only texts."""
        return LazySequence(lambda: filter_non_blank(self))

    def where(self, predicate: TextPredicate) -> "LazySequence[str]":
        """Keep texts matching ``predicate``."""
        require_predicate(predicate)
        return LazySequence(lambda: filter_by(self, predicate))

    def ordered(self, ascending: bool = True) -> "LazySequence[str]":
        """Sort texts alphabetically."""
        return LazySequence(lambda: order_alphabetically(self, ascending))

    def take(self, count: int) -> "LazySequence[T]":
        """Limit the sequence to its first ``count`` elements."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return LazySequence(lambda: islice(self, count))

    def to_list(self) -> List[T]:
        """Materialize one pass of the sequence."""
        return list(self)
