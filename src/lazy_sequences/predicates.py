"""Built-in text predicates."""

from typing import Optional

from .protocols import TextPredicate


class ContainsLetter:
    """
    Predicate that matches texts containing a given letter.

    Single Responsibility: Decide membership of one letter in one text.
    """

    def __init__(self, letter: str, case_sensitive: bool = False):
        """
        Initialize predicate.

        Args:
            letter: Letter (or substring) to look for
            case_sensitive: Compare exactly if True, casefolded otherwise
        """
        if not letter:
            raise ValueError("letter must not be empty")
        self.letter = letter
        self.case_sensitive = case_sensitive
        self._needle = letter if case_sensitive else letter.casefold()

    def __call__(self, text: Optional[str]) -> bool:
        if text is None:
            return False
        haystack = text if self.case_sensitive else text.casefold()
        return self._needle in haystack

    def __repr__(self) -> str:
        return f"ContainsLetter({self.letter!r}, case_sensitive={self.case_sensitive})"


def contains_letter(letter: str) -> ContainsLetter:
    """Create a case-insensitive ContainsLetter predicate."""
    return ContainsLetter(letter)


def negate(predicate: TextPredicate) -> TextPredicate:
    """Wrap a predicate so that it keeps what the original drops."""
    if not callable(predicate):
        raise TypeError("predicate must be callable")

    def negated(text: str) -> bool:
        return not predicate(text)

    return negated
