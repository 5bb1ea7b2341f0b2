"""File adapter for the resolver's query log.

Reads the log backwards in fixed-size chunks so that a newest-first scan
which stops early never touches the older part of the file.
"""

import logging
import os
from collections.abc import Iterator
from typing import BinaryIO

from dnsquerylog.core.config import DEFAULT_CHUNK_SIZE, QueryLogSettings
from dnsquerylog.core.exceptions import LogAccessError

logger = logging.getLogger(__name__)


def _iter_reversed_lines(handle: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield the lines of a binary file from last to first.

    The file size is read once up front; anything appended afterwards is
    not returned. Line terminators are removed. A long run without a newline
    is collected in pieces and joined once.
    """
    handle.seek(0, os.SEEK_END)
    position = handle.tell()
    # Fragments of the line being assembled, last fragment first
    pending: list[bytes] = []
    while position > 0:
        step = min(chunk_size, position)
        position -= step
        handle.seek(position)
        chunk = handle.read(step)
        if chunk.rfind(b"\n") == -1:
            pending.append(chunk)
            continue
        pieces = chunk.split(b"\n")
        pending.append(pieces[-1])
        yield b"".join(reversed(pending))
        for piece in reversed(pieces[1:-1]):
            yield piece
        # The first piece may continue in the preceding chunk
        pending = [pieces[0]]
    yield b"".join(reversed(pending))


class FileLogSource:
    """File implementation of LogSourcePort.

    Args:
        path: Location of the query log file.
        chunk_size: Bytes read per step when scanning backwards.
    """

    def __init__(
        self, path: str | os.PathLike[str], chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._path = os.fspath(path)
        self._chunk_size = chunk_size

    @classmethod
    def from_settings(cls, settings: QueryLogSettings) -> "FileLogSource":
        """Create a source for the log described by settings."""
        return cls(settings.log_path, chunk_size=settings.chunk_size)

    @property
    def path(self) -> str:
        """Location of the query log file."""
        return self._path

    def exists(self) -> bool:
        """Return True if the log file is present."""
        return os.path.exists(self._path)

    def read_recent(self, max_lines: int | None = None) -> Iterator[str]:
        """Yield non-empty lines newest-first.

        Bytes are decoded as UTF-8, replacing invalid sequences. A missing
        file yields nothing.

        Raises:
            LogAccessError: If the file exists but cannot be read.
        """
        if max_lines is not None and max_lines <= 0:
            return
        try:
            handle = open(self._path, "rb")
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning("Cannot open query log %s: %s", self._path, exc)
            raise LogAccessError(
                f"Cannot read query log {self._path}: {exc}", path=self._path
            ) from exc

        with handle:
            yielded = 0
            try:
                for raw in _iter_reversed_lines(handle, self._chunk_size):
                    raw = raw.rstrip(b"\r")
                    if not raw:
                        continue
                    yield raw.decode("utf-8", errors="replace")
                    yielded += 1
                    if max_lines is not None and yielded >= max_lines:
                        return
            except OSError as exc:
                logger.warning("Error reading query log %s: %s", self._path, exc)
                raise LogAccessError(
                    f"Cannot read query log {self._path}: {exc}", path=self._path
                ) from exc

    def clear(self) -> None:
        """Truncate the log file in place.

        The file is never removed or replaced, so a resolver holding it open
        in append mode keeps writing to the same file.

        Raises:
            LogAccessError: If the file cannot be truncated.
        """
        # @tra: Adapter.FileSource.Clear.TruncateInPlace
        try:
            os.truncate(self._path, 0)
        except FileNotFoundError:
            logger.debug("Query log %s does not exist, nothing to clear", self._path)
            return
        except OSError as exc:
            logger.warning("Cannot clear query log %s: %s", self._path, exc)
            raise LogAccessError(
                f"Cannot clear query log {self._path}: {exc}", path=self._path
            ) from exc
        logger.info("Cleared query log %s", self._path)
