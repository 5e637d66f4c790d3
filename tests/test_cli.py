"""Tests for the command-line entry point."""

import pytest
from typer.testing import CliRunner

from conftest import StubTransport
from letscrate.cli import main as cli_main
from letscrate.cli.main import app

runner = CliRunner()


@pytest.fixture
def stub(monkeypatch: pytest.MonkeyPatch, transport: StubTransport) -> dict:
    built = {"count": 0, "transport": transport}

    def fake_build_transport(settings):
        built["count"] += 1
        return transport

    for var in ("LETSCRATE_USERNAME", "LETSCRATE_PASSWORD", "LETSCRATE_TERMINAL_WIDTH"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(cli_main, "build_transport", fake_build_transport)
    return built


class TestFlags:
    def test_version(self, stub: dict) -> None:
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "LetsCrate v1.3" in result.output
        assert stub["count"] == 0

    def test_no_action_prints_help(self, stub: dict) -> None:
        result = runner.invoke(app, ["-l", "alice:pw"])
        assert result.exit_code == 0
        assert "Usage" in result.output
        assert stub["count"] == 0

    def test_too_many_actions_fail_before_network(self, stub: dict, transport: StubTransport) -> None:
        result = runner.invoke(app, ["-l", "alice:pw", "-a", "-D", "Photos"])
        assert result.exit_code == 1
        assert "More than one action was selected" in result.output
        assert stub["count"] == 0
        assert transport.calls == []

    def test_missing_credentials(self, stub: dict) -> None:
        result = runner.invoke(app, ["-A"])
        assert result.exit_code == 1
        assert "You need an account" in result.output
        assert stub["count"] == 0

    def test_credentials_from_environment(self, stub: dict, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LETSCRATE_USERNAME", "alice")
        monkeypatch.setenv("LETSCRATE_PASSWORD", "pw")
        stub["transport"].routes["users/authenticate.json"] = {"status": "success"}
        result = runner.invoke(app, ["-t"])
        assert result.exit_code == 0
        assert "The credentials are valid" in result.output

    def test_bad_credentials_format(self, stub: dict) -> None:
        result = runner.invoke(app, ["-l", "alice", "-A"])
        assert result.exit_code == 1
        assert "username:password" in result.output


class TestRuns:
    def test_search_files(self, stub: dict) -> None:
        result = runner.invoke(app, ["-l", "alice:pw", "-s", "beach"])
        assert result.exit_code == 0
        assert "beach.jpg" in result.output
        assert "http://lts.cr/b01" in result.output

    def test_delete_crate_by_name(self, stub: dict, transport: StubTransport) -> None:
        transport.routes["crates/destroy/00042.json"] = {"status": "success"}
        result = runner.invoke(app, ["-l", "alice:pw", "-D", "archive2021"])
        assert result.exit_code == 0
        assert "Archive2021 deleted" in result.output

    def test_unknown_crate_is_fatal(self, stub: dict, transport: StubTransport) -> None:
        result = runner.invoke(app, ["-l", "alice:pw", "-D", "Music"])
        assert result.exit_code == 1
        assert "No crates were found that match that name." in result.output
        assert transport.paths() == ["files/list.json"]

    def test_regexp_flag(self, stub: dict, transport: StubTransport) -> None:
        transport.routes["crates/destroy/00042.json"] = {"status": "success"}
        transport.routes["crates/destroy/00043.json"] = {"status": "success"}
        result = runner.invoke(app, ["-l", "alice:pw", "-r", "-D", "^archive"])
        assert result.exit_code == 0
        assert "Archive2021 deleted" in result.output
        assert "Archive2022 deleted" in result.output
