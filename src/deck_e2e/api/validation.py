"""
Response classification for ApiClient.

Both fallbacks live here as standalone functions so each can be exercised on its own:

  - read_error_body: a body that cannot be read becomes UNREADABLE_BODY
  - resolve_request_url: an endpoint that cannot be joined to the base URL is concatenated
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import urlencode

import httpx

from deck_e2e.api.errors import UNREADABLE_BODY, ApiError

logger = logging.getLogger(__name__)


async def read_error_body(response: httpx.Response) -> str:
    try:
        await response.aread()
        return response.text
    except Exception as e:  # any failure reading the body yields the placeholder
        logger.debug("Could not read error response body: %r", e)
        return UNREADABLE_BODY


def resolve_request_url(
    base_url: str, endpoint: str, params: Mapping[str, str] | None = None
) -> str:
    try:
        url = httpx.URL(base_url).join(endpoint)
        if params:
            url = url.copy_merge_params(dict(params))
        return str(url)
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        logger.debug("Falling back to concatenated URL for %r: %r", endpoint, e)

    url_str = f"{base_url}{endpoint}"
    if params:
        sep = "&" if "?" in endpoint else "?"
        url_str = f"{url_str}{sep}{urlencode(dict(params))}"
    return url_str


async def validate_response(
    response: httpx.Response,
    *,
    base_url: str,
    endpoint: str,
    params: Mapping[str, str] | None = None,
) -> httpx.Response:
    """
    Return the response untouched when its status is 2xx, otherwise raise ApiError.
    The success path never reads or parses the body.
    """
    if response.is_success:
        return response

    body = await read_error_body(response)
    url = resolve_request_url(base_url, endpoint, params)
    logger.warning("API error %s %s for %s", response.status_code, response.reason_phrase, url)
    raise ApiError(response.status_code, response.reason_phrase, body, url)
