"""In-memory query log source."""

from collections.abc import Iterable, Iterator


class InMemoryLogSource:
    """In-memory implementation of LogSourcePort.

    Holds raw lines in a list, oldest first. Suitable for testing and for
    embedding a viewer next to a producer in the same process.

    Args:
        lines: Initial raw lines, oldest first.
        exists: Whether the source starts out present. A source with
                initial lines is always present.
    """

    def __init__(self, lines: Iterable[str] | None = None, exists: bool = True) -> None:
        self._lines: list[str] = []
        self._exists = exists
        for line in lines or ():
            self.append(line)

    def append(self, text: str) -> None:
        """Append text the way a producer writes to the log.

        Text containing newlines is stored as several lines.
        """
        self._exists = True
        for line in text.split("\n"):
            self._lines.append(line.rstrip("\r"))

    def exists(self) -> bool:
        """Return True if the source is present."""
        return self._exists

    def read_recent(self, max_lines: int | None = None) -> Iterator[str]:
        """Yield non-empty lines newest-first.

        Lines appended after iteration starts are not returned.
        """
        if max_lines is not None and max_lines <= 0:
            return
        yielded = 0
        for index in range(len(self._lines) - 1, -1, -1):
            if index >= len(self._lines):
                # Cleared while being read
                return
            line = self._lines[index]
            if not line:
                continue
            yield line
            yielded += 1
            if max_lines is not None and yielded >= max_lines:
                return

    def clear(self) -> None:
        """Drop all lines. Does nothing if the source is absent."""
        self._lines.clear()
