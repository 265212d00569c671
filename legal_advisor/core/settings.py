from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "legal-advisor"
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )

    # Intermediary proxy in front of the completion provider.
    # Both values are deployment secrets: never hardcode them and never log them.
    proxy_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PROXY_URL", "proxy_url"),
        description="Endpoint of the AI proxy (e.g. https://proxy.internal/openai).",
    )
    proxy_auth_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PROXY_AUTH_TOKEN", "proxy_auth_token"),
        description="Static bearer token sent to the proxy on every call.",
    )
    proxy_timeout_seconds: float = Field(
        default=25.0,
        ge=1.0,
        validation_alias=AliasChoices("PROXY_TIMEOUT_SECONDS", "proxy_timeout_seconds"),
        description="Upper bound for a single proxy round-trip (seconds).",
    )
    proxy_max_response_bytes: int = Field(
        default=8192,
        ge=1,
        validation_alias=AliasChoices("PROXY_MAX_RESPONSE_BYTES", "proxy_max_response_bytes"),
        description="Responses larger than this are rejected as transport failures.",
    )

    # Caller identity is established upstream (auth gateway) and forwarded in a header.
    caller_identity_header: str = Field(
        default="X-Caller-Identity",
        validation_alias=AliasChoices("CALLER_IDENTITY_HEADER", "caller_identity_header"),
        description="Header carrying the verified caller identity.",
    )
    anonymous_identity: str = Field(
        default="2vxsx-fae",
        min_length=1,
        validation_alias=AliasChoices("ANONYMOUS_IDENTITY", "anonymous_identity"),
        description="Reserved identity value meaning 'unauthenticated'.",
    )

    @property
    def proxy_configured(self) -> bool:
        return bool(self.proxy_url) and bool(self.proxy_auth_token)

    @property
    def is_development(self) -> bool:
        return str(self.app_env).strip().lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
