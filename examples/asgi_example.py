"""Example ASGI application serving the DNS query log without FastAPI.

Run with:
    uvicorn examples.asgi_example:app

The in-memory source is filled with a few sample lines so the endpoints
have something to show. Point a FileLogSource at the resolver's log for
real use.
"""

from dnsquerylog.adapters.frameworks.asgi import create_asgi_app
from dnsquerylog.adapters.sources.in_memory import InMemoryLogSource

source = InMemoryLogSource(
    [
        "2026-01-01 10:00:00\t192.168.1.100\texample.com\tA\tquad9\t10\tPASS",
        "2026-01-01 10:00:01\t192.168.1.101\tads.example.net\tA\tquad9\t1\tBLOCK",
        "2026-01-01 10:00:02\t192.168.1.100\texample.com\tAAAA\tcloudflare\t12",
    ]
)

app = create_asgi_app(source, allow_clear=False)
