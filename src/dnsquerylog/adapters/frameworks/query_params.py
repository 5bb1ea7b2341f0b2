"""Shared query parameter parsing utilities for framework adapters.

This module provides utilities for parsing and validating the query log
filter parameters that are common across framework adapters (ASGI, FastAPI).
Parameter names match the operator page: filter_domain, filter_type,
filter_client and entries.
"""

from dnsquerylog.core.models import FilterCriteria, coerce_max_entries

# Valid response formats for the query endpoint
VALID_FORMATS = {"json", "ndjson"}


def _first(params: dict[str, list[str]], name: str) -> str | None:
    """Return the first value of a parameter, or None if missing."""
    values = params.get(name)
    return values[0] if values else None


def _parse_text_param(params: dict[str, list[str]], name: str) -> str | None:
    """Parse an optional text filter parameter.

    Args:
        params: Parsed query string parameters (as returned by urllib.parse.parse_qs).
        name: Parameter name.

    Returns:
        The value, or None if missing or empty.
    """
    return _first(params, name) or None


def _parse_entries_param(params: dict[str, list[str]]) -> int:
    """Parse and clamp the 'entries' query parameter.

    Args:
        params: Parsed query string parameters (as returned by urllib.parse.parse_qs).

    Returns:
        Entry cap clamped to the valid range. Missing or non-numeric
        values give the default.
    """
    # @tra: Adapter.QueryParameter.EntriesClamp
    return coerce_max_entries(_first(params, "entries"))


def _parse_format_param(params: dict[str, list[str]]) -> str:
    """Parse the 'format' query parameter, defaulting to json."""
    raw = _first(params, "format")
    if raw and raw.lower() in VALID_FORMATS:
        return raw.lower()
    return "json"


def criteria_from_params(params: dict[str, list[str]]) -> FilterCriteria:
    """Build FilterCriteria from parsed query string parameters."""
    return FilterCriteria(
        domain=_parse_text_param(params, "filter_domain"),
        query_type=_parse_text_param(params, "filter_type"),
        client=_parse_text_param(params, "filter_client"),
        max_entries=_parse_entries_param(params),
    )
