"""Generic pagination layer for offset-paged endpoints.

Architecture:
    - definitions.py: Paging metadata (PagePolicy, PageHint, PageResult)
    - executors.py: Page collection loop (PageCollector)
    - telemetry.py: Structured logging

Usage:
    Endpoints opt into pagination by setting ``page_policy`` on their
    RestEndpointSpec; RestRunner.run_paged drives the collector.
"""

from __future__ import annotations

from .definitions import (
    PageHint,
    PagePolicy,
    PageResult,
    StopReason,
    extract_page_hint,
    extract_page_policy,
)
from .executors import PageCollector

__all__ = [
    "PagePolicy",
    "PageHint",
    "PageResult",
    "StopReason",
    "PageCollector",
    "extract_page_policy",
    "extract_page_hint",
]
