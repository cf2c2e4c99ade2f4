from __future__ import annotations

import asyncio
import logging
from enum import Enum
from types import TracebackType

import httpx

from deck_e2e.api.models import (
    VERBS,
    ApiClientOptions,
    HttpMethod,
    InternalRequestOptions,
    RequestBody,
    RequestOptions,
)
from deck_e2e.api.validation import validate_response

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ClientState(str, Enum):
    UNINITIALIZED = "UNINITIALIZED"
    READY = "READY"


class ApiClient:
    """
    Async JSON client bound to one base URL.

    The underlying httpx.AsyncClient is created lazily on first use (or by init())
    and reused by every call until close(). Creation and teardown share one lock,
    so concurrent first calls create a single context. Non-2xx responses raise
    ApiError; transport failures from httpx propagate unchanged.
    """

    def __init__(
        self,
        options: ApiClientOptions,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._options = options
        self._transport = transport
        self._default_headers: dict[str, str] = {**DEFAULT_HEADERS, **(options.headers or {})}
        self._context: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    @property
    def base_url(self) -> str:
        return self._options.base_url

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._default_headers)

    @property
    def state(self) -> ClientState:
        return ClientState.UNINITIALIZED if self._context is None else ClientState.READY

    async def __aenter__(self) -> ApiClient:
        await self.init()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def init(self) -> None:
        await self._ensure_context()

    async def close(self) -> None:
        async with self._lock:
            if self._context is None:
                return
            context, self._context = self._context, None
            await context.aclose()
        logger.info("Closed request context for %s", self._options.base_url)

    async def _ensure_context(self) -> httpx.AsyncClient:
        context = self._context
        if context is not None:
            return context

        async with self._lock:
            if self._context is None:
                self._context = httpx.AsyncClient(
                    base_url=self._options.base_url,
                    headers=self._default_headers,
                    verify=not self._options.ignore_tls_errors,
                    timeout=self._options.timeout_s,
                    transport=self._transport,
                )
                logger.info("Created request context for %s", self._options.base_url)
            return self._context

    def _build_options(
        self, options: RequestOptions | None, body: RequestBody | None = None
    ) -> InternalRequestOptions:
        options = options or RequestOptions()
        return InternalRequestOptions(
            headers={**self._default_headers, **(options.headers or {})},
            params=dict(options.params) if options.params else None,
            json=body,
        )

    async def _request(
        self, method: HttpMethod, endpoint: str, request_options: InternalRequestOptions
    ) -> httpx.Response:
        verb = VERBS[method]
        context = await self._ensure_context()

        logger.debug("%s %s params=%s", verb.method.value, endpoint, request_options.params)
        response = await context.request(
            verb.method.value,
            endpoint,
            params=request_options.params,
            headers=request_options.headers,
            json=request_options.json if verb.accepts_body else None,
        )
        return await validate_response(
            response,
            base_url=self._options.base_url,
            endpoint=endpoint,
            params=request_options.params,
        )

    async def get(self, endpoint: str, options: RequestOptions | None = None) -> httpx.Response:
        return await self._request(HttpMethod.GET, endpoint, self._build_options(options))

    async def post(
        self,
        endpoint: str,
        body: RequestBody | None = None,
        options: RequestOptions | None = None,
    ) -> httpx.Response:
        return await self._request(HttpMethod.POST, endpoint, self._build_options(options, body))

    async def put(
        self,
        endpoint: str,
        body: RequestBody | None = None,
        options: RequestOptions | None = None,
    ) -> httpx.Response:
        return await self._request(HttpMethod.PUT, endpoint, self._build_options(options, body))

    async def delete(
        self, endpoint: str, options: RequestOptions | None = None
    ) -> httpx.Response:
        return await self._request(HttpMethod.DELETE, endpoint, self._build_options(options))

    async def patch(
        self,
        endpoint: str,
        body: RequestBody | None = None,
        options: RequestOptions | None = None,
    ) -> httpx.Response:
        return await self._request(HttpMethod.PATCH, endpoint, self._build_options(options, body))
