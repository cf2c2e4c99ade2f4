from __future__ import annotations

import logging
from dataclasses import dataclass

from deck_e2e.api.client import ApiClient
from deck_e2e.deck.deck_of_cards import create_shuffled_deck, draw_cards, shuffle_remaining

logger = logging.getLogger(__name__)

TOTAL_CARDS = 52
DRAW_FIVE_COUNT = 5
DRAW_ONE_COUNT = 1


class SmokeCheckError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class SmokeResult:
    deck_id: str
    first_draw: tuple[str, ...]
    second_draw: tuple[str, ...]
    remaining: int


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise SmokeCheckError(message)


async def run_smoke_flow(client: ApiClient) -> SmokeResult:
    """
    Create a deck, draw 5, shuffle the remaining 47, draw 1 more and confirm
    the last card was not among the first five.
    """
    after_draw_5 = TOTAL_CARDS - DRAW_FIVE_COUNT
    after_draw_1 = after_draw_5 - DRAW_ONE_COUNT

    create = await create_shuffled_deck(client, {"deck_count": 1})
    _check(create.get("success") is True, f"create: success={create.get('success')!r}")
    _check(isinstance(create.get("deck_id"), str), "create: deck_id missing")
    _check(create.get("remaining") == TOTAL_CARDS, f"create: remaining={create.get('remaining')!r}")
    deck_id = create["deck_id"]
    logger.info("Created deck %s", deck_id)

    draw5 = await draw_cards(client, deck_id, DRAW_FIVE_COUNT)
    _check(draw5.get("success") is True, f"draw: success={draw5.get('success')!r}")
    _check(draw5.get("deck_id") == deck_id, f"draw: deck_id={draw5.get('deck_id')!r}")
    cards = draw5.get("cards") or []
    _check(len(cards) == DRAW_FIVE_COUNT, f"draw: got {len(cards)} cards")
    _check(draw5.get("remaining") == after_draw_5, f"draw: remaining={draw5.get('remaining')!r}")
    first_codes = tuple(c["code"] for c in cards)
    _check(len(set(first_codes)) == DRAW_FIVE_COUNT, f"draw: duplicate codes {first_codes}")

    shuffle = await shuffle_remaining(client, deck_id)
    _check(shuffle.get("success") is True, f"shuffle: success={shuffle.get('success')!r}")
    _check(shuffle.get("deck_id") == deck_id, f"shuffle: deck_id={shuffle.get('deck_id')!r}")
    _check(
        shuffle.get("remaining") == after_draw_5,
        f"shuffle: remaining={shuffle.get('remaining')!r}",
    )

    draw1 = await draw_cards(client, deck_id, DRAW_ONE_COUNT)
    _check(draw1.get("success") is True, f"draw: success={draw1.get('success')!r}")
    _check(draw1.get("deck_id") == deck_id, f"draw: deck_id={draw1.get('deck_id')!r}")
    cards = draw1.get("cards") or []
    _check(len(cards) == DRAW_ONE_COUNT, f"draw: got {len(cards)} cards")
    _check(draw1.get("remaining") == after_draw_1, f"draw: remaining={draw1.get('remaining')!r}")
    new_code = cards[0].get("code")
    _check(isinstance(new_code, str), "draw: card code is missing or not a string")
    _check(new_code not in first_codes, f"draw: {new_code} was already drawn")

    return SmokeResult(
        deck_id=deck_id,
        first_draw=first_codes,
        second_draw=(new_code,),
        remaining=draw1["remaining"],
    )
