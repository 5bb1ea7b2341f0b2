"""Web framework adapters for the query log.

The ASGI adapter has no third-party dependencies. Import the FastAPI
adapter from ``dnsquerylog.adapters.frameworks.fastapi`` when FastAPI is
installed.
"""

from dnsquerylog.adapters.frameworks.asgi import create_asgi_app
from dnsquerylog.adapters.frameworks.presentation import status_severity

__all__ = ["create_asgi_app", "status_severity"]
