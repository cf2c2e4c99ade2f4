from __future__ import annotations

import json
from typing import Any

import typer

from deck_e2e.api.client import ApiClient
from deck_e2e.core.config import settings
from deck_e2e.core.logging import configure_logging


def api_client() -> ApiClient:
    try:
        options = settings.api_client_options()
    except RuntimeError as e:
        raise typer.BadParameter(str(e)) from e

    configure_logging(settings.log_level)
    return ApiClient(options)


def echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))
