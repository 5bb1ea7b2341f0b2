"""Settings for locating and serving the query log."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_LOG_PATH = "/var/log/dnscrypt-proxy/query.log"
DEFAULT_CHUNK_SIZE = 64 * 1024

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def is_logging_enabled(config: Mapping[str, Any] | None) -> bool:
    """Check the resolver configuration's query logging flag.

    Args:
        config: Resolver package configuration, as provided by its own
                configuration system. May be None.

    Returns:
        True only if the ``query_log`` setting is ``"on"``.
    """
    if not config:
        return False
    return config.get("query_log") == "on"


def _parse_positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class QueryLogSettings:
    """Where the query log lives and how it is served.

    Attributes:
        log_path: Path of the resolver's query log file.
        chunk_size: Bytes read per step when scanning the file backwards.
        allow_clear: Whether HTTP adapters expose the clear action.
    """

    log_path: str = DEFAULT_LOG_PATH
    chunk_size: int = DEFAULT_CHUNK_SIZE
    allow_clear: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "QueryLogSettings":
        """Load settings from environment variables.

        Reads ``DNSQUERYLOG_LOG_PATH``, ``DNSQUERYLOG_CHUNK_SIZE`` and
        ``DNSQUERYLOG_ALLOW_CLEAR``. Invalid values fall back to defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            log_path=env.get("DNSQUERYLOG_LOG_PATH") or DEFAULT_LOG_PATH,
            chunk_size=_parse_positive_int(
                env.get("DNSQUERYLOG_CHUNK_SIZE"), DEFAULT_CHUNK_SIZE
            ),
            allow_clear=_parse_bool(env.get("DNSQUERYLOG_ALLOW_CLEAR"), True),
        )
