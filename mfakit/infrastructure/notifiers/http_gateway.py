from __future__ import annotations

from typing import Any, Optional
import httpx

from mfakit.domain.ports.notifier import EmailSender, SmsSender


class _HttpGatewaySender:
    """POSTs a JSON payload to a delivery gateway (SMS provider, mail relay)."""

    def __init__(
        self,
        base_url: str,
        *,
        send_path: str,
        client: Optional[httpx.Client] = None,
        timeout: float = 5.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._send_path = send_path if send_path.startswith("/") else f"/{send_path}"
        self._owns_client: bool = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    def _post(self, payload: dict[str, Any]) -> None:
        url = f"{self._base_url}{self._send_path}"
        try:
            resp = self._client.post(url, json=payload)
            if not (200 <= resp.status_code < 300):
                text = resp.text[:200]
                raise RuntimeError(f"Gateway responded {resp.status_code}: {text}")
        except httpx.HTTPError as e:
            raise RuntimeError(f"Gateway HTTP error: {e}") from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class HttpSmsSender(_HttpGatewaySender, SmsSender):
    def __init__(
        self,
        base_url: str,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = 5.0,
        send_path: str = "/sms",
    ) -> None:
        super().__init__(base_url, send_path=send_path, client=client, timeout=timeout)

    def __call__(self, to: str, message: str) -> None:
        self._post({"to": to, "message": message})


class HttpEmailSender(_HttpGatewaySender, EmailSender):
    def __init__(
        self,
        base_url: str,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = 5.0,
        send_path: str = "/email",
    ) -> None:
        super().__init__(base_url, send_path=send_path, client=client, timeout=timeout)

    def __call__(self, to: str, subject: str, body: str) -> None:
        self._post({"to": to, "subject": subject, "body": body})
