"""Core domain models for DNS query log data."""

import math
import re
import sys
from dataclasses import dataclass

DEFAULT_STATUS = "OK"
MIN_FIELDS = 6

DEFAULT_MAX_ENTRIES = 100
MIN_MAX_ENTRIES = 10
MAX_MAX_ENTRIES = 1000

# Query types offered by operator UIs. Matching is never restricted to these.
QUERY_TYPES = ("A", "AAAA", "CNAME", "MX", "TXT", "PTR", "SRV", "HTTPS")

# Entry counts offered by operator UIs.
ENTRY_CHOICES = (50, 100, 250, 500, 1000)

# ASCII digits only: \d also matches digits that int() and float() reject
_LEADING_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class LogRecord:
    """One resolved DNS query event.

    All fields are kept exactly as the resolver wrote them.

    Attributes:
        time: Timestamp in the resolver's own format.
        client: Client IP address or identifier.
        domain: Query name.
        query_type: Record type token (e.g., A, AAAA, HTTPS).
        server: Resolver or upstream that answered.
        latency: Latency in milliseconds, as written.
        status: Outcome token (e.g., OK, PASS, BLOCK, REJECT).
    """

    time: str
    client: str
    domain: str
    query_type: str
    server: str
    latency: str
    status: str = DEFAULT_STATUS


def _leading_int(text: str) -> int | None:
    """Parse the leading number of a string, truncated to an integer.

    Follows PHP's intval(): "250abc" -> 250, "1e3" -> 1000, "12.7" -> 12.
    """
    match = _LEADING_NUMBER.match(text.strip())
    if match is None:
        return None
    literal = match.group()
    if _INTEGER.fullmatch(literal):
        try:
            return int(literal)
        except ValueError:
            # Too many digits for int(); only the sign matters once clamped
            return -sys.maxsize if literal.startswith("-") else sys.maxsize
    number = float(literal)
    if math.isinf(number):
        return -sys.maxsize if number < 0 else sys.maxsize
    return int(number)


def coerce_max_entries(value: object) -> int:
    """Coerce untrusted input into a valid entry cap.

    Missing or non-numeric input becomes DEFAULT_MAX_ENTRIES; numeric input
    is truncated to an integer and clamped to [MIN_MAX_ENTRIES, MAX_MAX_ENTRIES].

    Args:
        value: Raw value (None, int, float, or string).

    Returns:
        Entry cap within the valid range.
    """
    number: int | None
    if value is None or isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        # Reject NaN and infinite values
        number = int(value) if value == value and abs(value) != float("inf") else None
    elif isinstance(value, str):
        number = _leading_int(value)
    else:
        number = None

    if number is None:
        number = DEFAULT_MAX_ENTRIES
    return min(max(number, MIN_MAX_ENTRIES), MAX_MAX_ENTRIES)


@dataclass(frozen=True)
class FilterCriteria:
    """Operator-supplied filters and entry cap for one query.

    Construct with ``FilterCriteria.create()`` when the values come from
    untrusted input; the constructor itself stores values as given.

    Attributes:
        domain: Case-insensitive substring the query name must contain.
        query_type: Exact (case-sensitive) query type.
        client: Case-insensitive substring the client must contain.
        max_entries: Maximum number of records to return.
    """

    domain: str | None = None
    query_type: str | None = None
    client: str | None = None
    max_entries: int = DEFAULT_MAX_ENTRIES

    @classmethod
    def create(
        cls,
        domain: str | None = None,
        query_type: str | None = None,
        client: str | None = None,
        max_entries: object = None,
    ) -> "FilterCriteria":
        """Build criteria from untrusted input.

        Empty strings are treated as absent filters and ``max_entries`` is
        coerced with ``coerce_max_entries``.
        """
        return cls(
            domain=domain or None,
            query_type=query_type or None,
            client=client or None,
            max_entries=coerce_max_entries(max_entries),
        )


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a query.

    Attributes:
        records: Matching records, newest first.
        source_exists: False when the log source does not exist yet. Lets
            callers tell "nothing logged" apart from "nothing matched".
    """

    records: tuple[LogRecord, ...] = ()
    source_exists: bool = True

    @property
    def count(self) -> int:
        """Number of records in the result."""
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        """True if the result holds no records."""
        return not self.records
