"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

try:
    import httpx
except ImportError:
    httpx = None

# Sample lines used across modules, oldest first
LINE_T1 = "t1\tc1\texample.com\tA\tsrv1\t10\tOK"
LINE_T2 = "t2\tc2\tblocked.test\tA\tsrv1\t5\tBLOCK"


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Provide a temporary query log path (file not created)."""
    return tmp_path / "query.log"


@pytest.fixture
def write_log(log_path: Path) -> Callable[[Iterable[str]], Path]:
    """Factory fixture that writes lines to the temporary query log.

    Lines are written oldest first, each terminated by a newline, the way
    the resolver appends them.

    Usage:
        def test_something(write_log):
            path = write_log(["t1\\tc1\\texample.com\\tA\\tsrv1\\t10"])
    """

    def _write(lines: Iterable[str]) -> Path:
        with log_path.open("w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line + "\n")
        return log_path

    return _write


@pytest.fixture
def sample_lines() -> list[str]:
    """Two valid lines, oldest first."""
    return [LINE_T1, LINE_T2]


# === ASGI Test Fixtures ===


@pytest.fixture
def asgi_send_capture():
    """Fixture that returns a send callable and a responses list for capture.

    Returns a tuple of (send_func, responses_list) for recording ASGI messages.
    """

    responses: list[dict[str, object]] = []

    async def send(message: dict[str, object]) -> None:
        """Capture ASGI messages."""
        responses.append(message)

    return send, responses


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Returns a callable that accepts an ASGI app and returns a client
    with ASGITransport configured.

    Usage:
        async def test_something(asgi_test_client):
            app = create_asgi_app(source)
            async with asgi_test_client(app) as client:
                response = await client.get("/querylog")
    """
    if httpx is None:
        pytest.skip("httpx not installed")

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
