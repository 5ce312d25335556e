"""Lazy filters that pass through only the qualifying upstream elements.

Every filter pulls from its upstream one element at a time, and only when
its own next element is requested. Upstream order is preserved.
"""

import logging
from typing import Iterable, Iterator, Optional

from .protocols import TextPredicate

logger = logging.getLogger(__name__)


def filter_even(numbers: Iterable[int]) -> Iterator[int]:
    """Generator that keeps only even numbers."""
    for number in numbers:
        if number % 2 == 0:
            yield number


def filter_non_blank(texts: Iterable[Optional[str]]) -> Iterator[str]:
    """Generator that drops None, empty and whitespace-only texts."""
    for text in texts:
        if text is not None and text.strip():
            yield text


def filter_by(texts: Iterable[str], predicate: TextPredicate) -> Iterator[str]:
    """Keep the texts for which ``predicate`` returns True.

    The predicate is checked here, before any element is produced. It is
    then called exactly once per upstream element, in upstream order, as
    the returned generator is advanced. Anything the predicate raises
    reaches the consumer from the ``next()`` that evaluated that element.

    Args:
        texts: Upstream sequence of texts
        predicate: Callable deciding whether a text is kept

    Returns:
        Generator yielding the kept texts

    Raises:
        TypeError: If ``predicate`` is None or not callable
    """
    require_predicate(predicate)
    return _filter_by(texts, predicate)


def require_predicate(predicate: TextPredicate) -> None:
    """Raise TypeError unless ``predicate`` is present and callable."""
    if predicate is None:
        raise TypeError("predicate is required")
    if not callable(predicate):
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")


def _filter_by(texts: Iterable[str], predicate: TextPredicate) -> Iterator[str]:
    kept = 0
    for text in texts:
        if predicate(text):
            kept += 1
            yield text
    logger.debug(f"Predicate filter finished, kept {kept} elements")
