"""Presentation helpers shared by framework adapters."""

from collections.abc import Mapping
from typing import Any

from dnsquerylog.core.encoding.ndjson import record_to_dict
from dnsquerylog.core.models import (
    ENTRY_CHOICES,
    QUERY_TYPES,
    FilterCriteria,
    QueryResult,
)

MESSAGE_NO_SOURCE = (
    "Query log file does not exist. Enable query logging and make some DNS queries."
)
MESSAGE_NO_MATCH = "No queries found matching the filter criteria."


def status_severity(status: str) -> str:
    """Map a record status to a display severity.

    Returns:
        "success" for OK and PASS statuses, "danger" for BLOCK and REJECT
        statuses, "default" for anything else.
    """
    upper = status.upper()
    if "PASS" in upper or status == "OK":
        return "success"
    if "BLOCK" in upper or "REJECT" in upper:
        return "danger"
    return "default"


def empty_message(result: QueryResult) -> str | None:
    """Return the message to show for an empty result, or None."""
    if not result.is_empty:
        return None
    return MESSAGE_NO_SOURCE if not result.source_exists else MESSAGE_NO_MATCH


def criteria_to_dict(criteria: FilterCriteria) -> dict[str, Any]:
    """Echo criteria back using the request parameter names."""
    return {
        "filter_domain": criteria.domain or "",
        "filter_type": criteria.query_type or "",
        "filter_client": criteria.client or "",
        "entries": criteria.max_entries,
    }


def render_query_payload(
    result: QueryResult,
    criteria: FilterCriteria,
    logging_enabled: bool,
) -> Mapping[str, Any]:
    """Build the JSON payload returned by the query endpoints.

    ``options`` lists the query types and entry counts an operator UI offers
    in its selectors.
    """
    records = []
    for record in result.records:
        item: dict[str, Any] = dict(record_to_dict(record))
        item["severity"] = status_severity(record.status)
        records.append(item)
    return {
        "records": records,
        "count": result.count,
        "source_exists": result.source_exists,
        "logging_enabled": logging_enabled,
        "message": empty_message(result),
        "criteria": criteria_to_dict(criteria),
        "options": {"types": list(QUERY_TYPES), "entries": list(ENTRY_CHOICES)},
    }
