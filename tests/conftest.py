from collections.abc import Callable
from typing import Any

import httpx
import pytest

from deck_e2e.api.client import ApiClient
from deck_e2e.api.models import ApiClientOptions

Handler = Callable[[httpx.Request], httpx.Response]

_VALUES = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "0", "J", "Q", "K"]
_SUITS = {"S": "SPADES", "D": "DIAMONDS", "C": "CLUBS", "H": "HEARTS"}
_VALUE_NAMES = {"A": "ACE", "0": "10", "J": "JACK", "Q": "QUEEN", "K": "KING"}


class FakeDeckService:
    """
    In-memory stand-in for the deck of cards service, served through httpx.MockTransport.
    Decks are dealt in a fixed order so tests stay deterministic.
    """

    FULL_DECK = [v + s for s in _SUITS for v in _VALUES]

    def __init__(self) -> None:
        self.decks: dict[str, list[str]] = {}
        self._next_id = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        parts = request.url.path.strip("/").split("/")
        if len(parts) != 4 or parts[:2] != ["api", "deck"]:
            return httpx.Response(404, text="Not found")

        deck_id, action = parts[2], parts[3]
        params = request.url.params

        if deck_id == "new" and action == "shuffle":
            return self._new_deck(params)

        deck = self.decks.get(deck_id)
        if deck is None:
            return httpx.Response(
                404, json={"success": False, "error": f"Deck ID {deck_id} does not exist."}
            )

        if action == "draw":
            count = int(params.get("count", "1"))
            drawn, deck[:] = deck[:count], deck[count:]
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "deck_id": deck_id,
                    "cards": [self.card(code) for code in drawn],
                    "remaining": len(deck),
                },
            )

        if action == "shuffle":
            if params.get("remaining") == "true":
                deck.reverse()
            return httpx.Response(
                200,
                json={"success": True, "deck_id": deck_id, "remaining": len(deck), "shuffled": True},
            )

        return httpx.Response(404, text="Not found")

    def _new_deck(self, params: httpx.QueryParams) -> httpx.Response:
        if "cards" in params:
            cards = params["cards"].split(",")
        else:
            deck_count = int(params.get("deck_count", "1"))
            cards = self.FULL_DECK * deck_count
            if params.get("jokers_enabled") == "true":
                cards = cards + ["X1", "X2"] * deck_count

        self._next_id += 1
        deck_id = f"deck{self._next_id}"
        self.decks[deck_id] = list(cards)
        return httpx.Response(
            200,
            json={"success": True, "deck_id": deck_id, "remaining": len(cards), "shuffled": True},
        )

    @staticmethod
    def card(code: str) -> dict[str, Any]:
        png = f"https://deckofcardsapi.com/static/img/{code}.png"
        if code.startswith("X"):
            value, suit = "JOKER", "BLACK" if code == "X1" else "RED"
        else:
            value, suit = _VALUE_NAMES.get(code[0], code[0]), _SUITS[code[1]]
        return {
            "code": code,
            "image": png,
            "images": {"svg": png.replace(".png", ".svg"), "png": png},
            "value": value,
            "suit": suit,
        }


@pytest.fixture()
def base_url() -> str:
    return "https://example.test"


@pytest.fixture()
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture()
def make_client(base_url: str, requests_seen: list[httpx.Request]) -> Callable[..., ApiClient]:
    """
    Build an ApiClient whose transport is an httpx.MockTransport running `handler`.
    Every request the handler sees is recorded in `requests_seen`.
    """

    def _make(handler: Handler, **options: Any) -> ApiClient:
        def _recording(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        options.setdefault("base_url", base_url)
        return ApiClient(ApiClientOptions(**options), transport=httpx.MockTransport(_recording))

    return _make


@pytest.fixture()
def deck_service() -> FakeDeckService:
    return FakeDeckService()
