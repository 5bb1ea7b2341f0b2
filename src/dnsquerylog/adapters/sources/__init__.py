"""Log source adapters implementing core ports."""

from dnsquerylog.adapters.sources.file import FileLogSource
from dnsquerylog.adapters.sources.in_memory import InMemoryLogSource

__all__ = [
    "FileLogSource",
    "InMemoryLogSource",
]
