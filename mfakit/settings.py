from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"
    log_json: bool = True

    # Codes
    code_length: int = Field(6, ge=1, le=12)
    code_expiry_seconds: float = Field(300, gt=0)

    # Token store
    token_store_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://redis:6379/0"
    redis_key_prefix: str = "mfa:"

    # TOTP
    totp_issuer: str = "mfakit"
    totp_drift_seconds: int = Field(30, ge=0)

    # Delivery gateway
    gateway_base_url: Optional[str] = None
    gateway_timeout_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MFA_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
