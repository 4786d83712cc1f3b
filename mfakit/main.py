from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from mfakit.application.config import MFAConfig
from mfakit.application.mfa_service import MFAService
from mfakit.domain.ports.principal_directory import PrincipalDirectoryPort
from mfakit.infrastructure.http.client import (
    close_http_client,
    get_http_client,
    open_http_client,
)
from mfakit.infrastructure.memory.token_store import InMemoryTokenStore
from mfakit.infrastructure.notifiers.http_gateway import HttpEmailSender, HttpSmsSender
from mfakit.infrastructure.notifiers.log_sender import (
    LoggingEmailSender,
    LoggingSmsSender,
)
from mfakit.infrastructure.redis_cache.pool import close_redis, get_redis
from mfakit.infrastructure.redis_cache.token_store import RedisTokenStore
from mfakit.logging import setup_logging
from mfakit.presentation.api import api
from mfakit.settings import Settings, get_settings


def build_config(settings: Settings) -> MFAConfig:
    """Wire concrete store and delivery providers from settings."""
    if settings.token_store_backend == "redis":
        token_store = RedisTokenStore(
            get_redis(settings.redis_url), key_prefix=settings.redis_key_prefix
        )
    else:
        token_store = InMemoryTokenStore()

    sms_provider = email_provider = None
    if settings.gateway_base_url:
        # Both senders share one client; the lifespan closes it
        open_http_client(timeout=settings.gateway_timeout_seconds)
        client = get_http_client()
        sms_provider = HttpSmsSender(settings.gateway_base_url, client=client)
        email_provider = HttpEmailSender(settings.gateway_base_url, client=client)
    elif settings.app_env == "dev":
        sms_provider = LoggingSmsSender()
        email_provider = LoggingEmailSender()

    return MFAConfig.from_settings(
        settings,
        token_store=token_store,
        sms_provider=sms_provider,
        email_provider=email_provider,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        # shutdown; both are no-ops when never opened
        close_http_client()
        close_redis()


def create_app(
    config: Optional[MFAConfig] = None,
    principal_directory: Optional[PrincipalDirectoryPort] = None,
) -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, json_output=settings.log_json)
    if config is None:
        config = build_config(settings)

    app = FastAPI(title="MFA API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.mfa_service = MFAService.from_config(config)
    app.state.principal_directory = principal_directory
    app.include_router(api)
    return app
