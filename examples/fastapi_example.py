"""Example FastAPI application serving the DNS query log.

Run with:
    DNSQUERYLOG_LOG_PATH=/var/log/dnscrypt-proxy/query.log \
        uvicorn examples.fastapi_example:app --reload

Endpoints:
    /querylog                              - JSON envelope, newest first
    /querylog?filter_domain=<substring>    - case-insensitive domain filter
    /querylog?filter_type=<type>           - exact query type (A, AAAA, MX, ...)
    /querylog?filter_client=<substring>    - case-insensitive client filter
    /querylog?entries=<n>                  - record cap, clamped to 10-1000
    /querylog?format=ndjson                - NDJSON, one record per line
    POST /querylog/clear                   - truncate the log
"""

import logging

from fastapi import FastAPI

from dnsquerylog.adapters.frameworks.fastapi import create_querylog_router
from dnsquerylog.adapters.sources.file import FileLogSource
from dnsquerylog.core.config import QueryLogSettings

logging.basicConfig(level=logging.INFO)

settings = QueryLogSettings.from_env()
source = FileLogSource.from_settings(settings)

# Resolver configuration is usually read from the host's config store
resolver_config = {"query_log": "on"}

app = FastAPI(title="DNS Query Log")
app.include_router(
    create_querylog_router(
        source,
        config_provider=lambda: resolver_config,
        allow_clear=settings.allow_clear,
    )
)


@app.get("/")
def root() -> dict[str, str]:
    """Point at the query log endpoint."""
    return {"message": f"Serving {settings.log_path}. See /querylog."}
