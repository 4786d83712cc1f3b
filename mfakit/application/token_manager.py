from __future__ import annotations

import logging

import mfakit.domain.services as domain_services
from mfakit.application.config import MFAConfig
from mfakit.domain.ports.token_store import AtomicTokenStorePort, TokenStorePort
from mfakit.infrastructure.memory.token_store import InMemoryTokenStore

logger = logging.getLogger("mfakit.application.token_manager")


class TokenManager:
    """
    Issues and verifies short-lived numeric codes, one per principal.

    Codes live in the token store under ``otp:<principal_id>``. A new code
    replaces the previous one; a successful verification consumes it; a
    failed one leaves it in place so a typo does not burn the real code.
    """

    def __init__(
        self,
        store: TokenStorePort | None = None,
        *,
        code_length: int = 6,
        code_expiry_seconds: float = 300,
    ) -> None:
        self._store = store if store is not None else InMemoryTokenStore()
        self.code_length = code_length
        self.code_expiry_seconds = code_expiry_seconds

    @classmethod
    def from_config(cls, config: MFAConfig) -> "TokenManager":
        return cls(
            config.token_store,
            code_length=config.code_length,
            code_expiry_seconds=config.code_expiry_seconds,
        )

    @property
    def store(self) -> TokenStorePort:
        return self._store

    @staticmethod
    def key_for(principal_id: int | str) -> str:
        return f"otp:{principal_id}"

    def issue_code(
        self,
        principal_id: int | str,
        length: int | None = None,
        ttl: float | None = None,
    ) -> str:
        length = self.code_length if length is None else length
        ttl = self.code_expiry_seconds if ttl is None else ttl
        code = domain_services.generate_numeric_code(length)
        self._store.write(self.key_for(principal_id), code, ttl)
        logger.info(
            "numeric code issued",
            extra={"principal_id": str(principal_id), "length": length, "ttl": ttl},
        )
        return code

    def verify_code(self, principal_id: int | str, submitted: object) -> bool:
        key = self.key_for(principal_id)
        stored = self._store.read(key)
        if stored is None or submitted is None:
            return False

        if not domain_services.secure_compare(str(stored), str(submitted)):
            logger.info(
                "numeric code rejected", extra={"principal_id": str(principal_id)}
            )
            return False

        # one-time use
        if isinstance(self._store, AtomicTokenStorePort):
            consumed = self._store.delete_if_equals(key, stored)
        else:
            self._store.delete(key)
            consumed = True

        if consumed:
            logger.info(
                "numeric code consumed", extra={"principal_id": str(principal_id)}
            )
        return consumed
