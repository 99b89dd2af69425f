"""Request orchestration: dispatch, pagination and endpoint execution."""

from .dispatcher import EvasiveDispatcher
from .pagination import PageCollector, PageHint, PagePolicy, PageResult, StopReason
from .rest import ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "EvasiveDispatcher",
    "PageCollector",
    "PageHint",
    "PagePolicy",
    "PageResult",
    "StopReason",
    "ResponseAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
