from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from deck_e2e.api.client import ApiClient
from deck_e2e.api.models import RequestOptions
from deck_e2e.deck.models import CreateDeckResponse, DrawResponse, ShuffleResponse

ParamValue = str | int | bool


def stringify_params(params: Mapping[str, ParamValue] | None) -> dict[str, str]:
    if not params:
        return {}
    # bool before int: the service expects lowercase "true"/"false"
    return {k: (str(v).lower() if isinstance(v, bool) else str(v)) for k, v in params.items()}


def _json_object(data: Any, endpoint: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"Expected JSON object from {endpoint}; got {type(data)}")
    return data


async def create_shuffled_deck(
    client: ApiClient, params: Mapping[str, ParamValue] | None = None
) -> CreateDeckResponse:
    """
    Create a new shuffled deck.
    Example params: {"deck_count": 1}, {"jokers_enabled": True}, {"cards": "AS,KH"}
    """
    endpoint = "/api/deck/new/shuffle/"
    res = await client.get(endpoint, RequestOptions(params=stringify_params(params)))
    return cast(CreateDeckResponse, _json_object(res.json(), endpoint))


async def draw_cards(client: ApiClient, deck_id: str, count: int) -> DrawResponse:
    endpoint = f"/api/deck/{deck_id}/draw/"
    res = await client.get(endpoint, RequestOptions(params={"count": str(count)}))
    return cast(DrawResponse, _json_object(res.json(), endpoint))


async def shuffle_remaining(client: ApiClient, deck_id: str) -> ShuffleResponse:
    # reshuffles what is left in the deck, drawn cards stay out
    endpoint = f"/api/deck/{deck_id}/shuffle/"
    res = await client.get(endpoint, RequestOptions(params={"remaining": "true"}))
    return cast(ShuffleResponse, _json_object(res.json(), endpoint))
