from __future__ import annotations

from typing import NotRequired, TypedDict


class CardImages(TypedDict):
    svg: str
    png: str


class Card(TypedDict):
    code: str
    image: str
    images: CardImages
    value: str
    suit: str


class CreateDeckResponse(TypedDict):
    success: bool
    deck_id: str
    remaining: int
    shuffled: NotRequired[bool]


class DrawResponse(TypedDict):
    success: bool
    deck_id: str
    remaining: int
    cards: list[Card]


class ShuffleResponse(TypedDict):
    success: bool
    deck_id: str
    remaining: int
    shuffled: NotRequired[bool]
