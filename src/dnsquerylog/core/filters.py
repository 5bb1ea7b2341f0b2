"""Filter predicates for query log records."""

from collections.abc import Callable

from dnsquerylog.core.models import FilterCriteria, LogRecord


def matches(record: LogRecord, criteria: FilterCriteria) -> bool:
    """Check whether a record satisfies every filter set in criteria.

    Domain and client are case-insensitive substring matches, query type is
    an exact match. Absent or empty filters impose no constraint.

    Args:
        record: The record to test.
        criteria: Filters to apply. ``max_entries`` is ignored here.

    Returns:
        True if the record passes all active filters.
    """
    if criteria.domain and criteria.domain.lower() not in record.domain.lower():
        return False
    if criteria.query_type and record.query_type != criteria.query_type:
        return False
    if criteria.client and criteria.client.lower() not in record.client.lower():
        return False
    return True


def build_predicate(criteria: FilterCriteria) -> Callable[[LogRecord], bool]:
    """Build a single-argument predicate equivalent to ``matches``.

    Filter needles are lowered once so scanning a large log does not redo
    the work for every line.
    """
    domain = criteria.domain.lower() if criteria.domain else None
    query_type = criteria.query_type or None
    client = criteria.client.lower() if criteria.client else None

    if domain is None and query_type is None and client is None:
        return lambda record: True

    def predicate(record: LogRecord) -> bool:
        if domain is not None and domain not in record.domain.lower():
            return False
        if query_type is not None and record.query_type != query_type:
            return False
        if client is not None and client not in record.client.lower():
            return False
        return True

    return predicate
