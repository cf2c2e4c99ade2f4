from __future__ import annotations

from typing import Any

import httpx

from deck_e2e.api.errors import HttpResponseError
from deck_e2e.api.validation import read_error_body


async def process_json_response(response: httpx.Response) -> Any:
    """Parse a raw response as JSON, raising HttpResponseError for non-2xx statuses."""
    if not response.is_success:
        text = await read_error_body(response)
        raise HttpResponseError(
            f"HTTP Error {response.status_code} - {response.reason_phrase}\nResponse Body: {text}"
        )
    await response.aread()
    return response.json()
