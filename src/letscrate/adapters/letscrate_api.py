"""LetsCrate API endpoints.

API v1 reference: every call is a POST with HTTP basic auth returning a JSON
envelope whose `status` is "success" or "failure".

Why a wrapper:
- Endpoint paths live in one place.
- Identifiers are checked before they are embedded in a path, so a name can
  never be sent where the service expects an identifier.
"""

from __future__ import annotations

import logging
from typing import Callable

from letscrate.adapters.file_reader import UploadFile, read_upload
from letscrate.core.domain.identifiers import is_identifier
from letscrate.core.domain.models import Credentials, ResourceKind
from letscrate.core.errors import InvalidIdentifierFormat
from letscrate.core.interfaces.transport import RawResponse, Transport

logger = logging.getLogger(__name__)


def failure_envelope(message: str) -> dict[str, str]:
    return {"status": "failure", "message": message}


def _require_id(value: str, kind: ResourceKind) -> str:
    if not is_identifier(value):
        raise InvalidIdentifierFormat(value, kind)
    return value


class LetsCrateApi:
    """One method per remote operation."""

    def __init__(
        self,
        transport: Transport,
        credentials: Credentials,
        *,
        reader: Callable[[str], UploadFile] = read_upload,
    ) -> None:
        self._transport = transport
        self._credentials = credentials
        self._reader = reader

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def _post(self, path: str, **kwargs) -> RawResponse:
        logger.debug("POST %s", path)
        return self._transport.post(path, credentials=self._credentials, **kwargs)

    def authenticate(self) -> RawResponse:
        return self._post("users/authenticate.json")

    # Files

    def upload_file(self, path: str, crate_id: str) -> RawResponse:
        crate_id = _require_id(crate_id, ResourceKind.CRATE)
        try:
            upload = self._reader(path)
        except OSError as exc:
            logger.debug("cannot read %s: %s", path, exc)
            return failure_envelope(f"Cannot read file: {exc.strerror or exc}")
        return self._post(
            "files/upload.json",
            data={"crate_id": crate_id},
            files={"file": (upload.name, upload.content)},
        )

    def destroy_file(self, file_id: str) -> RawResponse:
        return self._post(f"files/destroy/{_require_id(file_id, ResourceKind.FILE)}.json")

    def list_files(self) -> RawResponse:
        return self._post("files/list.json")

    def show_file(self, file_id: str) -> RawResponse:
        return self._post(f"files/show/{_require_id(file_id, ResourceKind.FILE)}.json")

    # Crates

    def add_crate(self, name: str) -> RawResponse:
        return self._post("crates/add.json", data={"name": name})

    def list_crates(self) -> RawResponse:
        return self._post("crates/list.json")

    def rename_crate(self, crate_id: str, name: str) -> RawResponse:
        return self._post(
            f"crates/rename/{_require_id(crate_id, ResourceKind.CRATE)}.json",
            data={"name": name},
        )

    def destroy_crate(self, crate_id: str) -> RawResponse:
        return self._post(f"crates/destroy/{_require_id(crate_id, ResourceKind.CRATE)}.json")
