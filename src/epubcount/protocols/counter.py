"""Protocol for character counting strategies."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CountingStrategy(Protocol):
    """Turns one document's markup into a character count."""

    def count(self, markup: str) -> int:
        """Return the number of counted characters in the markup."""
        ...
