"""Port interfaces for log source adapters.

These protocols define the contracts that source adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSourcePort(Protocol):
    """Port for an append-only query log.

    Adapters implementing this protocol hand out raw lines newest-first and
    can truncate the log. Examples: FileLogSource, InMemoryLogSource.
    """

    def exists(self) -> bool:
        """Return True if the log source is present."""
        ...

    def read_recent(self, max_lines: int | None = None) -> Iterator[str]:
        """Yield raw lines, most recently written first.

        Args:
            max_lines: Maximum number of candidate lines to yield.
                       Default None yields every line.

        Returns:
            Lazy iterator of non-empty lines. Empty when the source does
            not exist.

        Raises:
            LogAccessError: If the source exists but cannot be read.
        """
        ...

    def clear(self) -> None:
        """Truncate the log source to zero length.

        Succeeds without doing anything when the source does not exist.

        Raises:
            LogAccessError: If the source cannot be truncated.
        """
        ...
