"""Transport contract.

Why Protocol:
- The engine only needs one blocking `post`; httpx lives in the adapter.
- Tests swap in a call-counting stub without touching the network.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Union, runtime_checkable

from letscrate.core.domain.models import Credentials

# Parsed JSON envelope (usually a dict; search actions hand lists of entries
# to the formatter instead).
RawResponse = Union[dict[str, Any], list[Any]]


@runtime_checkable
class Transport(Protocol):
    """Minimal contract for talking to the remote service.

    Design rules:
    - `post` is synchronous: one blocking round trip per call.
    - Network-level failures come back as a failure envelope
      (`{"status": "failure", "message": ...}`) rather than as exceptions.
    """

    def post(
        self,
        path: str,
        *,
        credentials: Credentials,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, tuple[str, bytes]] | None = None,
    ) -> RawResponse:
        ...
