"""View and filter a resolver's tab-separated DNS query log.

Example:
    ```python
    from dnsquerylog import FileLogSource, FilterCriteria, query

    source = FileLogSource("/var/log/dnscrypt-proxy/query.log")
    result = query(source, FilterCriteria.create(domain="example", max_entries=50))
    for record in result.records:
        print(record.time, record.client, record.domain, record.status)
    ```
"""

from dnsquerylog.adapters.sources.file import FileLogSource
from dnsquerylog.adapters.sources.in_memory import InMemoryLogSource
from dnsquerylog.core.config import QueryLogSettings, is_logging_enabled
from dnsquerylog.core.exceptions import LogAccessError
from dnsquerylog.core.filters import matches
from dnsquerylog.core.models import (
    DEFAULT_MAX_ENTRIES,
    ENTRY_CHOICES,
    MAX_MAX_ENTRIES,
    MIN_MAX_ENTRIES,
    QUERY_TYPES,
    FilterCriteria,
    LogRecord,
    QueryResult,
    coerce_max_entries,
)
from dnsquerylog.core.parsing import parse_line
from dnsquerylog.core.ports import LogSourcePort
from dnsquerylog.core.query import query

__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "ENTRY_CHOICES",
    "MAX_MAX_ENTRIES",
    "MIN_MAX_ENTRIES",
    "QUERY_TYPES",
    "FileLogSource",
    "FilterCriteria",
    "InMemoryLogSource",
    "LogAccessError",
    "LogRecord",
    "LogSourcePort",
    "QueryLogSettings",
    "QueryResult",
    "coerce_max_entries",
    "is_logging_enabled",
    "matches",
    "parse_line",
    "query",
]
