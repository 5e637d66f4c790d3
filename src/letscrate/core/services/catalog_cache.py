"""Catalog cache.

Why a separate component:
- Name resolution and search both read the full crate/file listing; the
  service is asked for it at most once per run.
- Only a successful snapshot is memoized, so a failed fetch can be retried
  by the next caller.
"""

from __future__ import annotations

import logging
from typing import Callable

from pydantic import ValidationError

from letscrate.core.domain.models import Catalog
from letscrate.core.errors import RemoteFailure
from letscrate.core.interfaces.transport import RawResponse

logger = logging.getLogger(__name__)


def is_failure(response: object) -> bool:
    """A response is a failure when any top-level value is the string "failure"."""

    return isinstance(response, dict) and "failure" in response.values()


def failure_message(response: object, default: str = "Request failed.") -> str:
    if isinstance(response, dict):
        message = response.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return default


class CatalogCache:
    """Fetch-once view over the account catalog."""

    def __init__(self, fetch: Callable[[], RawResponse]) -> None:
        self._fetch = fetch
        self._catalog: Catalog | None = None

    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    def get_catalog(self) -> Catalog:
        if self._catalog is not None:
            logger.debug("catalog cache hit (%d crates)", len(self._catalog.crates))
            return self._catalog

        logger.debug("fetching catalog from the service")
        response = self._fetch()
        if is_failure(response) or not isinstance(response, dict):
            raise RemoteFailure(failure_message(response, "Could not list your crates."))
        try:
            catalog = Catalog.model_validate({"crates": response.get("crates") or []})
        except ValidationError as exc:
            raise RemoteFailure(f"Unexpected catalog format: {exc.error_count()} invalid field(s).") from exc

        self._catalog = catalog
        logger.debug(
            "catalog loaded: %d crates, %d files",
            len(catalog.crates),
            len(catalog.all_files()),
        )
        return catalog
