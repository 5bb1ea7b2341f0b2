"""NDJSON encoder for query log records."""

import json
from collections.abc import Iterable

from dnsquerylog.core.models import LogRecord


def record_to_dict(record: LogRecord) -> dict[str, str]:
    """Convert a record to a JSON-serializable dict.

    Keys follow the column names operators see: time, client, domain,
    type, server, latency, status.
    """
    return {
        "time": record.time,
        "client": record.client,
        "domain": record.domain,
        "type": record.query_type,
        "server": record.server,
        "latency": record.latency,
        "status": record.status,
    }


def encode_records(records: Iterable[LogRecord]) -> str:
    """Encode records to newline-delimited JSON.

    Args:
        records: An iterable of LogRecord objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no records.
    """
    lines = [json.dumps(record_to_dict(record)) for record in records]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
