"""ASGI generic adapter for the query log endpoints.

This adapter provides a framework-agnostic ASGI application that can be used
with any ASGI server (uvicorn, hypercorn, daphne) without requiring FastAPI
as a dependency.

Endpoints:
    GET  /querylog        - JSON envelope with records (format=ndjson for NDJSON)
    POST /querylog/clear  - truncate the query log
"""

import asyncio
import json
import logging
from collections.abc import Callable, Coroutine, Mapping
from typing import Any
from urllib.parse import parse_qs

from dnsquerylog.adapters.frameworks.presentation import render_query_payload
from dnsquerylog.adapters.frameworks.query_params import (
    _parse_format_param,
    criteria_from_params,
)
from dnsquerylog.core.config import is_logging_enabled
from dnsquerylog.core.encoding.ndjson import encode_records
from dnsquerylog.core.exceptions import LogAccessError
from dnsquerylog.core.ports import LogSourcePort
from dnsquerylog.core.query import query

logger = logging.getLogger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]

ConfigProvider = Callable[[], Mapping[str, Any] | None]


def _parse_query_params(scope: Scope) -> dict[str, list[str]]:
    """Parse query string from ASGI scope into parameter dictionary.

    Args:
        scope: ASGI scope dictionary containing request metadata.

    Returns:
        Dictionary mapping parameter names to lists of values.
        Returns empty dict if query_string is missing or empty.
    """
    query_string = scope.get("query_string", b"").decode(errors="replace")
    return parse_qs(query_string)


async def _send_response(send: Send, status: int, content_type: str, body: str) -> None:
    """Send an HTTP response with headers and body.

    Args:
        send: ASGI send callable for writing response.
        status: HTTP status code.
        content_type: Content-Type header value.
        body: Response body as string (will be encoded to bytes).
    """
    headers = [(b"content-type", content_type.encode())]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body.encode()})


async def _send_json(send: Send, status: int, payload: Mapping[str, Any]) -> None:
    """Send a JSON response."""
    await _send_response(send, status, "application/json", json.dumps(payload))


def _discard_body(send: Send) -> Send:
    """Wrap send so response bodies go out empty, as HEAD requires."""

    async def send_headers_only(message: dict[str, Any]) -> None:
        if message["type"] == "http.response.body":
            message = {**message, "body": b""}
        await send(message)

    return send_headers_only


async def _handle_endpoint(
    send: Send,
    endpoint_func: Callable[[], Coroutine[Any, Any, str]],
    content_type: str,
    log_message: str,
) -> None:
    """Execute an endpoint function with error handling and send response.

    A LogAccessError becomes a 503 response; anything else a 500.

    Args:
        send: ASGI send callable for writing response.
        endpoint_func: Async function that returns response body.
        content_type: Content-Type header for success response.
        log_message: Message to log on error.
    """
    try:
        body = await endpoint_func()
    except LogAccessError as exc:
        # @tra: Adapter.ASGI.AccessError
        logger.warning("%s: %s", log_message, exc)
        await _send_json(send, 503, {"error": "Query log is not accessible"})
        return
    except Exception:
        logger.exception(log_message)
        await _send_json(send, 500, {"error": "Internal Server Error"})
        return
    await _send_response(send, 200, content_type, body)


def create_asgi_app(
    source: LogSourcePort,
    config_provider: ConfigProvider | None = None,
    *,
    allow_clear: bool = True,
) -> ASGIApp:
    """Create an ASGI app with /querylog and /querylog/clear endpoints.

    Args:
        source: Log source implementing LogSourcePort.
        config_provider: Callable returning the resolver configuration,
                         used to report whether query logging is enabled.
        allow_clear: False to refuse the clear action with 403.

    Returns:
        ASGI application callable.
    """

    def logging_enabled() -> bool:
        if config_provider is None:
            return False
        return is_logging_enabled(config_provider())

    async def handle_query(scope: Scope, send: Send) -> None:
        params = _parse_query_params(scope)
        criteria = criteria_from_params(params)
        output_format = _parse_format_param(params)

        async def body() -> str:
            result = await asyncio.to_thread(query, source, criteria)
            if output_format == "ndjson":
                return encode_records(result.records)
            payload = render_query_payload(result, criteria, logging_enabled())
            return json.dumps(payload)

        content_type = (
            "application/x-ndjson" if output_format == "ndjson" else "application/json"
        )
        await _handle_endpoint(send, body, content_type, "Error reading query log")

    async def handle_clear(scope: Scope, send: Send) -> None:
        # @tra: Adapter.ASGI.ClearMethod
        if scope["method"] != "POST":
            await _send_json(send, 405, {"error": "Method Not Allowed"})
            return
        # @tra: Adapter.ASGI.ClearDisabled
        if not allow_clear:
            await _send_json(send, 403, {"error": "Clearing the query log is disabled"})
            return

        async def body() -> str:
            await asyncio.to_thread(source.clear)
            return json.dumps({"cleared": True})

        await _handle_endpoint(
            send, body, "application/json", "Error clearing query log"
        )

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        path = scope["path"]

        if path == "/querylog":
            if scope["method"] not in ("GET", "HEAD"):
                await _send_json(send, 405, {"error": "Method Not Allowed"})
                return
            # @tra: Adapter.ASGI.HeadWithoutBody
            if scope["method"] == "HEAD":
                send = _discard_body(send)
            await handle_query(scope, send)
        elif path == "/querylog/clear":
            await handle_clear(scope, send)
        else:
            await _send_response(send, 404, "text/plain", "Not Found")

    return app
