from __future__ import annotations

UNREADABLE_BODY = "Unable to read response body"


class ApiError(Exception):
    """Raised by ApiClient for any response outside the 2xx class."""

    def __init__(self, status: int, status_text: str, response_body: str, url: str) -> None:
        super().__init__(f"API Error {status} ({status_text}): {response_body}")
        self.status = status
        self.status_text = status_text
        self.response_body = response_body
        self.url = url

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, status_text={self.status_text!r}, url={self.url!r})"


class HttpResponseError(RuntimeError):
    """Raised by process_json_response for raw responses outside the 2xx class."""
