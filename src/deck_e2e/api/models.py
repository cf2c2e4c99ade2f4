from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

JSONValue = Union[str, int, float, bool, None, list[Any], dict[str, Any]]
RequestBody = dict[str, JSONValue]


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True, slots=True)
class VerbSpec:
    method: HttpMethod
    accepts_body: bool


# Single dispatch table; a new verb is one entry here plus its public method.
VERBS: dict[HttpMethod, VerbSpec] = {
    HttpMethod.GET: VerbSpec(HttpMethod.GET, accepts_body=False),
    HttpMethod.POST: VerbSpec(HttpMethod.POST, accepts_body=True),
    HttpMethod.PUT: VerbSpec(HttpMethod.PUT, accepts_body=True),
    HttpMethod.DELETE: VerbSpec(HttpMethod.DELETE, accepts_body=False),
    HttpMethod.PATCH: VerbSpec(HttpMethod.PATCH, accepts_body=True),
}


@dataclass(frozen=True)
class ApiClientOptions:
    """
    Configuration for one ApiClient. Relative endpoints resolve against base_url;
    headers are merged over the JSON content-type defaults.
    """

    base_url: str
    headers: Mapping[str, str] | None = None
    ignore_tls_errors: bool = False
    timeout_s: float | None = 30.0


@dataclass(frozen=True)
class RequestOptions:
    headers: Mapping[str, str] | None = None
    params: Mapping[str, str] | None = None


@dataclass(frozen=True)
class InternalRequestOptions:
    headers: dict[str, str]
    params: dict[str, str] | None = None
    json: RequestBody | None = None
