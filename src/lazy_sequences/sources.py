"""Sequence sources that produce finite lazy sequences on demand."""

import logging
from typing import Iterator

from faker import Faker

logger = logging.getLogger(__name__)

NAMES = ("Steve", "John", "Sarah", "David", "Olivia")


def range_sequence(start: int, total: int) -> Iterator[int]:
    """Produce exactly ``total`` consecutive integers beginning at ``start``.

    Arguments are checked when the function is called, not when the
    returned generator is first advanced.

    Args:
        start: First integer of the sequence
        total: Number of integers to produce

    Returns:
        Generator yielding ``start + index`` for index in ``[0, total)``

    Raises:
        TypeError: If ``start`` or ``total`` is not an integer
        ValueError: If ``total`` is negative
    """
    if not isinstance(start, int) or not isinstance(total, int):
        raise TypeError("start and total must be integers")
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    return _generate_range(start, total)


def _generate_range(start: int, total: int) -> Iterator[int]:
    logger.debug(f"Starting range sequence: start={start}, total={total}")
    for index in range(total):
        yield start + index
    logger.debug(f"Range sequence exhausted after {total} elements")


def name_sequence() -> Iterator[str]:
    """Generator that yields the five demo names in a fixed order."""
    logger.debug("Starting name sequence")
    for name in NAMES:
        yield name
    logger.debug("Name sequence exhausted")


def fake_name_sequence(count: int, seed: int = 42) -> Iterator[str]:
    """Produce ``count`` generated first names.

    Every call seeds its own Faker instance, so two calls with the same
    seed yield identical names and consuming one never affects the other.

    Args:
        count: Number of names to generate
        seed: Random seed for reproducibility

    Returns:
        Generator yielding first names

    Raises:
        ValueError: If ``count`` is negative
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    faker = Faker()
    faker.seed_instance(seed)
    return _generate_fake_names(faker, count)


def _generate_fake_names(faker: Faker, count: int) -> Iterator[str]:
    logger.debug(f"Generating {count} fake names...")
    for _ in range(count):
        yield faker.first_name()
    logger.debug(f"Generated {count} fake names")
