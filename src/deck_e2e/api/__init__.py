from __future__ import annotations

from deck_e2e.api.client import ApiClient, ClientState
from deck_e2e.api.errors import ApiError, HttpResponseError
from deck_e2e.api.models import ApiClientOptions, HttpMethod, RequestOptions

__all__ = [
    "ApiClient",
    "ApiClientOptions",
    "ApiError",
    "ClientState",
    "HttpMethod",
    "HttpResponseError",
    "RequestOptions",
]
