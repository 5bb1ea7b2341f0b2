"""Query pipeline: newest-first scan with early exit.

Pulls candidate lines from a LogSourcePort, parses them, applies the
filters and stops as soon as enough records matched. A rare-match filter
on a large log may still scan the whole log.
"""

import logging

from dnsquerylog.core.filters import build_predicate
from dnsquerylog.core.models import FilterCriteria, LogRecord, QueryResult
from dnsquerylog.core.parsing import parse_line
from dnsquerylog.core.ports import LogSourcePort

logger = logging.getLogger(__name__)


def query(
    source: LogSourcePort,
    criteria: FilterCriteria | None = None,
    *,
    scan_limit: int | None = None,
) -> QueryResult:
    """Return the most recent records matching criteria.

    Malformed lines are skipped and do not count toward the cap.

    The cap is taken from ``criteria.max_entries`` as given. Callers passing
    raw request input must build criteria with ``FilterCriteria.create``,
    which clamps the cap to the valid range.

    Args:
        source: Log source to scan.
        criteria: Filters and entry cap. Defaults to no filters and the
                  default cap.
        scan_limit: Maximum number of candidate lines to examine.
                    Default None scans until the cap is reached or the
                    source is exhausted.

    Returns:
        QueryResult with records newest-first and at most
        ``criteria.max_entries`` of them. ``source_exists`` is False when
        the source is absent.

    Raises:
        LogAccessError: If the source exists but cannot be read.
    """
    if criteria is None:
        criteria = FilterCriteria()

    # @tra: Core.Query.SourceAbsent
    if not source.exists():
        return QueryResult(records=(), source_exists=False)

    if criteria.max_entries <= 0:
        return QueryResult(records=(), source_exists=True)

    predicate = build_predicate(criteria)
    records: list[LogRecord] = []
    scanned = 0
    malformed = 0

    candidates = source.read_recent(max_lines=scan_limit)
    try:
        for line in candidates:
            scanned += 1
            record = parse_line(line)
            if record is None:
                malformed += 1
                continue
            if not predicate(record):
                continue
            records.append(record)
            # @tra: Core.Query.EarlyExit
            if len(records) >= criteria.max_entries:
                break
    finally:
        close = getattr(candidates, "close", None)
        if close is not None:
            close()

    if malformed:
        logger.debug("Skipped %d malformed query log lines", malformed)
    logger.debug(
        "Query scanned %d lines, matched %d (cap %d)",
        scanned,
        len(records),
        criteria.max_entries,
    )
    return QueryResult(records=tuple(records), source_exists=True)
