from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, TypeVar

import httpx
import typer

from deck_e2e.api.client import ApiClient
from deck_e2e.api.errors import ApiError
from deck_e2e.cli.common import api_client, echo_json
from deck_e2e.deck.deck_of_cards import (
    ParamValue,
    create_shuffled_deck,
    draw_cards,
    shuffle_remaining,
)

deck_app = typer.Typer(no_args_is_help=True)

T = TypeVar("T")


def run_with_client(fn: Callable[[ApiClient], Awaitable[T]]) -> T:
    async def _run() -> T:
        async with api_client() as client:
            return await fn(client)

    try:
        return asyncio.run(_run())
    except ApiError as e:
        typer.echo(f"{e} [{e.url}]", err=True)
        raise typer.Exit(code=1) from e
    except httpx.TransportError as e:
        typer.echo(f"Request failed: {e!r}", err=True)
        raise typer.Exit(code=1) from e


@deck_app.command("new")
def new_deck(
    deck_count: Annotated[int, typer.Option(help="Number of 52-card decks to combine")] = 1,
    jokers_enabled: Annotated[bool, typer.Option(help="Add two jokers per deck")] = False,
    cards: Annotated[
        str | None, typer.Option(help="Comma separated card codes for a partial deck (e.g. AS,KH)")
    ] = None,
) -> None:
    """
    Create a new shuffled deck.
    """
    params: dict[str, ParamValue] = {"deck_count": deck_count}
    if jokers_enabled:
        params["jokers_enabled"] = True
    if cards:
        params["cards"] = cards

    result: Any = run_with_client(lambda client: create_shuffled_deck(client, params))
    echo_json(result)


@deck_app.command("draw")
def draw(
    deck_id: Annotated[str, typer.Argument(help="Deck id returned by 'deck new'")],
    count: Annotated[int, typer.Option(help="Number of cards to draw")] = 1,
) -> None:
    """
    Draw cards from an existing deck.
    """
    result: Any = run_with_client(lambda client: draw_cards(client, deck_id, count))
    echo_json(result)


@deck_app.command("shuffle")
def shuffle(
    deck_id: Annotated[str, typer.Argument(help="Deck id returned by 'deck new'")],
) -> None:
    """
    Shuffle the cards still in the deck (drawn cards are not returned).
    """
    result: Any = run_with_client(lambda client: shuffle_remaining(client, deck_id))
    echo_json(result)
