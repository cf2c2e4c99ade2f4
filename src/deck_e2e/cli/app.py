from __future__ import annotations

import typer

from deck_e2e.cli.deck import deck_app, run_with_client
from deck_e2e.jobs.smoke import SmokeCheckError, run_smoke_flow

app = typer.Typer(no_args_is_help=True)
app.add_typer(deck_app, name="deck")


@app.command("smoke")
def smoke() -> None:
    """
    Run the deck smoke flow against DECK_BASE_URL.
    """
    try:
        result = run_with_client(run_smoke_flow)
    except SmokeCheckError as e:
        typer.echo(f"Smoke check failed: {e}", err=True)
        raise typer.Exit(code=1) from e

    drawn = ", ".join(result.first_draw)
    typer.echo(f"Deck {result.deck_id}: drew {drawn} then {result.second_draw[0]}")
    typer.echo(f"Smoke flow passed. Remaining cards: {result.remaining}")
