"""Encoders for query log records."""

from dnsquerylog.core.encoding.ndjson import encode_records, record_to_dict

__all__ = ["encode_records", "record_to_dict"]
