"""Application settings for the waitlist server, the chat bot and tests."""

from __future__ import annotations

from pydantic import AliasChoices
from pydantic import Field
from pydantic import model_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

DEFAULT_PLACE_ID = 109983668079237


class Settings(BaseSettings):
    """Typed server settings loaded from environment variables or explicit kwargs."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sab_app_env: str = "dev"
    sab_app_host: str = "127.0.0.1"
    sab_app_port: int = Field(
        default=3000,
        ge=1,
        validation_alias=AliasChoices("sab_app_port", "PORT"),
    )

    # Unset or empty means open mode: mutating routes skip the secret check.
    sab_api_key: str | None = None

    sab_session_stale_seconds: float = Field(default=600.0, gt=0)
    sab_session_sweep_interval_seconds: float = Field(default=300.0, gt=0)
    sab_ws_heartbeat_interval_seconds: float = Field(default=30.0, gt=0)

    sab_log_level: str = "INFO"

    @property
    def api_key_configured(self) -> bool:
        return bool(self.sab_api_key)

    @model_validator(mode="after")
    def validate_sweep_interval(self) -> "Settings":
        """Ensure sessions are swept at least once per staleness window."""
        if self.sab_session_sweep_interval_seconds > self.sab_session_stale_seconds:
            raise ValueError(
                "SAB_SESSION_SWEEP_INTERVAL_SECONDS must not exceed "
                "SAB_SESSION_STALE_SECONDS"
            )
        return self


class BotSettings(BaseSettings):
    """Typed settings for the Discord command frontend."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sab_discord_bot_token: str = Field(
        min_length=1,
        validation_alias=AliasChoices("sab_discord_bot_token", "DISCORD_BOT_TOKEN"),
    )
    sab_server_url: str = "http://127.0.0.1:3000"
    sab_api_key: str | None = None
    sab_owner_role_id: int | None = None
    sab_owner_ids: str = ""
    sab_buyer_role_id: int | None = None
    sab_place_id: int = DEFAULT_PLACE_ID
    sab_request_timeout_seconds: float = Field(default=10.0, gt=0)
    sab_log_level: str = "INFO"

    @property
    def owner_ids(self) -> frozenset[int]:
        """Parse the comma-separated owner id list, skipping malformed items."""
        parsed: set[int] = set()
        for raw in self.sab_owner_ids.split(","):
            raw = raw.strip()
            if raw.isdigit():
                parsed.add(int(raw))
        return frozenset(parsed)

    def missing_optional(self) -> list[str]:
        """Names of optional settings that are unset and degrade bot behavior."""
        missing: list[str] = []
        if not self.sab_api_key:
            missing.append("SAB_API_KEY")
        if self.sab_owner_role_id is None and not self.owner_ids:
            missing.append("SAB_OWNER_ROLE_ID/SAB_OWNER_IDS")
        if self.sab_buyer_role_id is None:
            missing.append("SAB_BUYER_ROLE_ID")
        return missing


def load_settings() -> Settings:
    """Load server settings from process environment."""
    return Settings()


def load_bot_settings() -> BotSettings:
    """Load bot settings from process environment."""
    return BotSettings()
