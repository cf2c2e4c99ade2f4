from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from deck_e2e.api.models import ApiClientOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # deck of cards service
    deck_base_url: Optional[str] = Field(default=None)
    deck_ignore_tls_errors: bool = False

    http_timeout_s: float = 30.0
    log_level: str = "INFO"

    def require_base_url(self) -> str:
        if not self.deck_base_url:
            raise RuntimeError(
                "DECK_BASE_URL is not set. "
                "Set it in the environment or .env file."
            )
        return self.deck_base_url

    def api_client_options(self) -> ApiClientOptions:
        return ApiClientOptions(
            base_url=self.require_base_url(),
            ignore_tls_errors=self.deck_ignore_tls_errors,
            timeout_s=self.http_timeout_s,
        )


settings = Settings()
