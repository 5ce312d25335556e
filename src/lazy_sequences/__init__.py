"""Lazy Sequences - Pull-based sequence generation, filtering and ordering."""

__version__ = "0.1.0"

from .cursor import SequenceCursor
from .filters import filter_by, filter_even, filter_non_blank
from .ordering import order_alphabetically
from .predicates import ContainsLetter, contains_letter, negate
from .protocols import LoggerProtocol, TextPredicate
from .sequence import LazySequence
from .sources import fake_name_sequence, name_sequence, range_sequence

__all__ = [
    # Sources
    "range_sequence",
    "name_sequence",
    "fake_name_sequence",
    # Filters
    "filter_even",
    "filter_non_blank",
    "filter_by",
    # Ordering
    "order_alphabetically",
    # Predicates
    "ContainsLetter",
    "contains_letter",
    "negate",
    # Protocols
    "TextPredicate",
    "LoggerProtocol",
    # Wrappers
    "LazySequence",
    "SequenceCursor",
]
