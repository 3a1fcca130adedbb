"""Tests for muxer.cli — entrypoint, argument parsing, routes and build."""

import sys
import types

import pytest

from muxer import Mux, MuxConfig
from muxer.cli import main


def _profile(request):
    return "profile"


def _install_app(monkeypatch: pytest.MonkeyPatch, mux: Mux, name: str = "cliapp") -> str:
    module = types.ModuleType(name)
    module.mux = mux  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, name, module)
    return name


def _api_mux() -> Mux:
    mux = Mux(MuxConfig(base_path="/api"))
    mux.add("GET", "users/{id}", _profile, name="profile")
    mux.add("POST", "{domain}/{action}/{id}", _profile, name="whatever")
    mux.add("GET", "products", lambda request: "list")
    return mux


class TestCLIHelp:
    @pytest.mark.parametrize(
        "argv", [["--help"], ["routes", "--help"], ["build", "--help"], ["run", "--help"]]
    )
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    @pytest.mark.parametrize("argv", [["routes"], ["build"], ["build", "app"], ["run"]])
    def test_missing_args_exit_two(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "muxer" in capsys.readouterr().out


class TestRoutesCommand:
    def test_lists_routes_in_order(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = _install_app(monkeypatch, _api_mux())
        main(["routes", app])

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["METHOD", "PATTERN", "HANDLER"]
        assert lines[2].split() == ["GET", "/api/users/{id}", "_profile", "(profile)"]
        assert lines[3].split()[:2] == ["POST", "/api/{domain}/{action}/{id}"]
        assert lines[4].split()[:3] == ["GET", "/api/products", "<lambda>"]

    def test_no_routes(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = _install_app(monkeypatch, Mux())
        main(["routes", app])
        assert capsys.readouterr().out.strip() == "No routes registered."

    def test_unknown_module_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "no_such_module_for_muxer_tests"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestBuildCommand:
    def test_prints_path(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = _install_app(monkeypatch, _api_mux())
        main(["build", app, "whatever", "somedomain", "true", "23.45"])
        assert capsys.readouterr().out.strip() == "/api/somedomain/true/23.45"

    def test_explicit_attribute(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = _install_app(monkeypatch, _api_mux())
        main(["build", f"{app}:mux", "profile", "123"])
        assert capsys.readouterr().out.strip() == "/api/users/123"

    def test_unknown_route_exits_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        app = _install_app(monkeypatch, _api_mux())
        with pytest.raises(SystemExit) as exc_info:
            main(["build", app, "missing"])
        assert exc_info.value.code == 1
        assert "Route 'missing' doesn't exist" in capsys.readouterr().err

    def test_too_few_values_exits_one(self, monkeypatch: pytest.MonkeyPatch) -> None:
        app = _install_app(monkeypatch, _api_mux())
        with pytest.raises(SystemExit) as exc_info:
            main(["build", app, "whatever", "only-one"])
        assert exc_info.value.code == 1
