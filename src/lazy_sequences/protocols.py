"""Protocol definitions for dependency inversion."""

from typing import Protocol


class TextPredicate(Protocol):
    """Protocol for predicates evaluated against a single text element.

    Plain functions, lambdas, closures and objects defining ``__call__``
    all satisfy it. Implementations must be pure: no side effects and no
    state retained between calls.
    """

    def __call__(self, text: str) -> bool:
        """Return True if the element should be kept."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
