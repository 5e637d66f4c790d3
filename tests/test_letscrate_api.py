"""Tests for the endpoint wrapper."""

import pytest

from conftest import StubTransport
from letscrate.adapters.file_reader import UploadFile
from letscrate.adapters.letscrate_api import LetsCrateApi
from letscrate.core.domain.models import Credentials, ResourceKind
from letscrate.core.errors import InvalidIdentifierFormat


class TestEndpoints:
    def test_paths(self, api: LetsCrateApi, transport: StubTransport) -> None:
        api.authenticate()
        api.list_files()
        api.show_file("00101")
        api.destroy_file("00101")
        api.add_crate("New")
        api.list_crates()
        api.rename_crate("00010", "Renamed")
        api.destroy_crate("00010")

        assert transport.calls == [
            ("users/authenticate.json", None),
            ("files/list.json", None),
            ("files/show/00101.json", None),
            ("files/destroy/00101.json", None),
            ("crates/add.json", {"name": "New"}),
            ("crates/list.json", None),
            ("crates/rename/00010.json", {"name": "Renamed"}),
            ("crates/destroy/00010.json", None),
        ]

    @pytest.mark.parametrize(
        ("call", "kind"),
        [
            (lambda api: api.show_file("beach.jpg"), ResourceKind.FILE),
            (lambda api: api.destroy_file("1234"), ResourceKind.FILE),
            (lambda api: api.destroy_crate("Photos"), ResourceKind.CRATE),
            (lambda api: api.rename_crate("Photos", "x"), ResourceKind.CRATE),
            (lambda api: api.upload_file("a.txt", "Photos"), ResourceKind.CRATE),
        ],
    )
    def test_names_are_never_sent_as_ids(
        self, api: LetsCrateApi, transport: StubTransport, call, kind: ResourceKind
    ) -> None:
        with pytest.raises(InvalidIdentifierFormat) as info:
            call(api)
        assert info.value.kind is kind
        assert transport.calls == []

    def test_upload_uses_reader(self, transport: StubTransport) -> None:
        api = LetsCrateApi(
            transport,
            Credentials(username="a", password="b"),
            reader=lambda path: UploadFile(name="report.pdf", content=b"%PDF"),
        )
        api.upload_file("/some/where/report.pdf", "00020")
        assert transport.calls == [("files/upload.json", {"crate_id": "00020"})]
        assert transport.uploads == [("report.pdf", b"%PDF")]

    def test_unreadable_upload_is_a_failure_envelope(self, api: LetsCrateApi, transport: StubTransport, tmp_path) -> None:
        response = api.upload_file(str(tmp_path / "nope.txt"), "00020")
        assert response["status"] == "failure"
        assert transport.calls == []
