"""Exceptions raised by query log sources."""


class LogAccessError(Exception):
    """The log source exists but cannot be read or truncated.

    Raised for permission and filesystem faults. A missing log source is
    not an access error.

    Attributes:
        path: Location of the log source, if it has one.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
