"""Parser for tab-separated query log lines.

Line format, as written by the resolver:

    timestamp \\t client \\t query_name \\t query_type \\t resolver \\t latency_ms [\\t status]
"""

from dnsquerylog.core.models import DEFAULT_STATUS, MIN_FIELDS, LogRecord


def parse_line(raw: str) -> LogRecord | None:
    """Parse one raw log line into a LogRecord.

    Values are not validated or reformatted. Lines with fewer than
    MIN_FIELDS tab-separated fields are not records.

    Args:
        raw: A single line, with or without its line terminator.

    Returns:
        The parsed LogRecord, or None if the line is structurally short.
    """
    # @tra: Core.Parsing.ShortLine
    parts = raw.rstrip("\r\n").split("\t")
    if len(parts) < MIN_FIELDS:
        return None

    # @tra: Core.Parsing.DefaultStatus
    return LogRecord(
        time=parts[0],
        client=parts[1],
        domain=parts[2],
        query_type=parts[3],
        server=parts[4],
        latency=parts[5],
        status=parts[6] if len(parts) > MIN_FIELDS else DEFAULT_STATUS,
    )
