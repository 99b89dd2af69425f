"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

from ...models.response import RawResponse
from ..dispatcher import EvasiveDispatcher
from ..pagination import (
    PageCollector,
    PageHint,
    PagePolicy,
    PageResult,
    extract_page_hint,
    extract_page_policy,
)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    # Page policy can be static or a factory function that creates policy from params
    page_policy: PagePolicy | Callable[[dict[str, Any]], PagePolicy] | None = None
    page_hint: PageHint | None = None
    offset_param: str = "start"


class ResponseAdapter:
    def parse(self, response: RawResponse, params: dict[str, Any]) -> Any:
        return response


def encode_query(query: dict[str, Any]) -> str:
    """Percent-encode every key and value (``List()`` becomes ``List%28%29``)."""
    return urlencode({k: str(v) for k, v in query.items()}, quote_via=quote, safe="")


class RestRunner:
    def __init__(self, dispatcher: EvasiveDispatcher) -> None:
        self._d = dispatcher

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        if query:
            path = f"{path}?{encode_query(query)}"

        if spec.method.upper() == "GET":
            response = await self._d.get(path)
        else:
            body = spec.build_body(params) if spec.build_body else None
            response = await self._d.post(path, body)

        return adapter.parse(response, params)

    async def run_paged(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        limit: int | None = None,
    ) -> PageResult:
        """Run a paged endpoint through the page collector.

        The adapter must return the list of items on one page; the offset is
        passed to the spec builders under ``spec.offset_param``.
        """
        policy = extract_page_policy(spec, params)
        if policy is None:
            raise ValueError(f"Endpoint {spec.id!r} has no page policy")

        collector = PageCollector(policy, extract_page_hint(spec))

        async def fetch_page(offset: int) -> Any:
            return await self.run(
                spec=spec, adapter=adapter, params={**params, spec.offset_param: offset}
            )

        return await collector.collect(fetch_page=fetch_page, limit=limit, endpoint_id=spec.id)
