"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and base URL for every API call.
- Makes testing easy: `build_client` accepts an `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from letscrate.core.config import AppSettings
from letscrate.core.domain.models import Credentials
from letscrate.core.interfaces.transport import RawResponse

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every endpoint behaves the same.
    - Tests inject `transport` instead of reaching the network.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpTransport:
    """`Transport` implementation on top of `httpx.Client`.

    Failures that happen per request (network errors, non-JSON bodies) are
    turned into failure envelopes so the batch can keep going.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def post(
        self,
        path: str,
        *,
        credentials: Credentials,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, tuple[str, bytes]] | None = None,
    ) -> RawResponse:
        try:
            response = self._client.post(
                path,
                data=dict(data) if data else None,
                files=dict(files) if files else None,
                auth=(credentials.username, credentials.password),
            )
        except httpx.HTTPError as exc:
            logger.debug("request to %s failed: %r", path, exc)
            return {"status": "failure", "message": f"Network error: {exc}"}

        try:
            payload: Any = response.json()
        except ValueError:
            logger.debug("non-JSON response from %s (HTTP %s)", path, response.status_code)
            return {
                "status": "failure",
                "message": f"Unexpected response from server (HTTP {response.status_code}).",
            }

        if not isinstance(payload, (dict, list)):
            return {"status": "failure", "message": "Unexpected response from server."}
        return payload
