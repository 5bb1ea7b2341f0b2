"""FastAPI adapter for the query log endpoints."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Response
from fastapi.responses import JSONResponse

from dnsquerylog.adapters.frameworks.presentation import render_query_payload
from dnsquerylog.core.config import is_logging_enabled
from dnsquerylog.core.encoding.ndjson import encode_records
from dnsquerylog.core.exceptions import LogAccessError
from dnsquerylog.core.models import FilterCriteria
from dnsquerylog.core.ports import LogSourcePort
from dnsquerylog.core.query import query

logger = logging.getLogger(__name__)


def create_querylog_router(
    source: LogSourcePort,
    config_provider: Callable[[], Mapping[str, Any] | None] | None = None,
    *,
    allow_clear: bool = True,
) -> APIRouter:
    """Create a FastAPI router with /querylog and /querylog/clear endpoints.

    Endpoints are plain functions so FastAPI runs the blocking file scan in
    its threadpool.

    Args:
        source: Log source implementing LogSourcePort.
        config_provider: Callable returning the resolver configuration,
                         used to report whether query logging is enabled.
        allow_clear: False to refuse the clear action with 403.

    Returns:
        APIRouter with the query log endpoints configured.
    """
    router = APIRouter()

    @router.get("/querylog")
    def get_querylog(
        filter_domain: str = Query(default=""),
        filter_type: str = Query(default=""),
        filter_client: str = Query(default=""),
        entries: str | None = Query(default=None),
        format: str = Query(default="json"),
    ) -> Response:
        """Return the most recent matching queries.

        Args:
            filter_domain: Case-insensitive substring of the query name.
            filter_type: Exact query type.
            filter_client: Case-insensitive substring of the client.
            entries: Maximum number of records, clamped to 10-1000.
            format: "json" (default) or "ndjson".
        """
        criteria = FilterCriteria.create(
            domain=filter_domain,
            query_type=filter_type,
            client=filter_client,
            max_entries=entries,
        )
        try:
            result = query(source, criteria)
        except LogAccessError as exc:
            logger.warning("Error reading query log: %s", exc)
            raise HTTPException(
                status_code=503, detail="Query log is not accessible"
            ) from exc

        if format.lower() == "ndjson":
            return Response(
                content=encode_records(result.records),
                media_type="application/x-ndjson",
            )
        enabled = is_logging_enabled(config_provider()) if config_provider else False
        return JSONResponse(content=render_query_payload(result, criteria, enabled))

    @router.post("/querylog/clear")
    def clear_querylog() -> dict[str, bool]:
        """Truncate the query log."""
        if not allow_clear:
            raise HTTPException(
                status_code=403, detail="Clearing the query log is disabled"
            )
        try:
            source.clear()
        except LogAccessError as exc:
            logger.warning("Error clearing query log: %s", exc)
            raise HTTPException(
                status_code=503, detail="Query log is not accessible"
            ) from exc
        return {"cleared": True}

    return router
