"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import pytest

from letscrate.adapters.letscrate_api import LetsCrateApi
from letscrate.core.domain.models import Credentials
from letscrate.core.services.catalog_cache import CatalogCache
from letscrate.core.services.resolver import Resolver

Route = Any  # a response dict/list, or a callable(data) -> response


@dataclass
class StubTransport:
    """Call-counting transport; unknown paths answer with a failure envelope."""

    routes: dict[str, Route] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, str] | None]] = field(default_factory=list)
    uploads: list[tuple[str, bytes]] = field(default_factory=list)

    def post(
        self,
        path: str,
        *,
        credentials: Credentials,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, tuple[str, bytes]] | None = None,
    ) -> Any:
        self.calls.append((path, dict(data) if data else None))
        if files:
            self.uploads.extend(files.values())
        route = self.routes.get(path)
        if route is None:
            return {"status": "failure", "message": f"No route for {path}"}
        if callable(route):
            return route(data)
        return route

    def paths(self) -> list[str]:
        return [path for path, _ in self.calls]

    def __enter__(self) -> "StubTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


@dataclass
class RecordingDisplay:
    """DisplaySink that keeps every line in order."""

    width: int | None = None
    events: list[tuple[str, str]] = field(default_factory=list)

    def line(self, text: str, *, style: str | None = None) -> None:
        self.events.append(("line", text))

    def error_line(self, text: str) -> None:
        self.events.append(("error", text))

    @property
    def lines(self) -> list[str]:
        return [text for kind, text in self.events if kind == "line"]

    @property
    def errors(self) -> list[str]:
        return [text for kind, text in self.events if kind == "error"]


CATALOG = {
    "status": "success",
    "crates": [
        {
            "id": "00010",
            "name": "Photos",
            "short_code": "ph0",
            "files": [
                {"id": "00101", "name": "beach.jpg", "short_code": "b01"},
                {"id": "00102", "name": "Sunset.PNG", "short_code": "s02"},
            ],
        },
        {
            "id": "00020",
            "name": "Documents",
            "short_code": "dc0",
            "files": [
                {"id": "00201", "name": "taxes-2021.pdf", "short_code": "t01"},
                {"id": "00202", "name": "taxes-2022.pdf", "short_code": "t02"},
            ],
        },
        {"id": "00042", "name": "Archive2021", "short_code": "ar0", "files": None},
        {"id": "00043", "name": "Archive2022", "short_code": "ar1"},
    ],
}


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="alice", password="s3cret")


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport(routes={"files/list.json": CATALOG})


@pytest.fixture
def api(transport: StubTransport, credentials: Credentials) -> LetsCrateApi:
    return LetsCrateApi(transport, credentials)


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def resolver(api: LetsCrateApi) -> Resolver:
    return Resolver(CatalogCache(api.list_files))

