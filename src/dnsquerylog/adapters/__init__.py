"""Adapters implementing core ports and exposing the query log over HTTP."""
