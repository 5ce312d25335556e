"""Ordering of text sequences."""

import logging
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def order_alphabetically(texts: Iterable[str], ascending: bool = True) -> Iterator[str]:
    """
    Generator that yields texts sorted by code-point comparison.

    Sorting needs the whole upstream, so it is consumed in full when the
    first element is requested. The sorted elements are then handed out
    one at a time. Equal texts keep their input order in both directions.

    Args:
        texts: Upstream sequence of texts
        ascending: Sort ascending if True, descending otherwise

    Yields:
        Texts in sorted order
    """
    ordered = sorted(texts, reverse=not ascending)
    logger.debug(
        f"Ordered {len(ordered)} texts {'ascending' if ascending else 'descending'}"
    )
    yield from ordered
