"""Core domain: records, filters, the query pipeline and source ports."""

from dnsquerylog.core.exceptions import LogAccessError
from dnsquerylog.core.filters import build_predicate, matches
from dnsquerylog.core.models import FilterCriteria, LogRecord, QueryResult
from dnsquerylog.core.parsing import parse_line
from dnsquerylog.core.ports import LogSourcePort
from dnsquerylog.core.query import query

__all__ = [
    "FilterCriteria",
    "LogAccessError",
    "LogRecord",
    "LogSourcePort",
    "QueryResult",
    "build_predicate",
    "matches",
    "parse_line",
    "query",
]
