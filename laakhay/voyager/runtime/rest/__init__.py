"""REST runtime abstractions."""

from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, encode_query

__all__ = [
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "encode_query",
]
