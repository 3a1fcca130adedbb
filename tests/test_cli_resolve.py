"""Tests for muxer.cli._resolve — import string resolution."""

import sys
import types

import pytest

from muxer import Mux
from muxer.cli._resolve import resolve_mux, resolve_or_exit


@pytest.fixture
def app_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = types.ModuleType("resolveapp")
    module.mux = Mux()  # type: ignore[attr-defined]
    module.other = Mux()  # type: ignore[attr-defined]
    module.factory = lambda: module.other  # type: ignore[attr-defined]
    module.broken = lambda: 1 / 0  # type: ignore[attr-defined]
    module.not_a_mux = "hello"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "resolveapp", module)
    return module


class TestResolveMux:
    def test_default_attribute(self, app_module: types.ModuleType) -> None:
        assert resolve_mux("resolveapp") is app_module.mux

    def test_explicit_attribute(self, app_module: types.ModuleType) -> None:
        assert resolve_mux("resolveapp:other") is app_module.other

    def test_factory_called(self, app_module: types.ModuleType) -> None:
        assert resolve_mux("resolveapp:factory") is app_module.other

    def test_factory_error(self, app_module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="raised an error"):
            resolve_mux("resolveapp:broken")

    def test_wrong_type(self, app_module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="not a muxer.Mux"):
            resolve_mux("resolveapp:not_a_mux")

    def test_missing_attribute(self, app_module: types.ModuleType) -> None:
        with pytest.raises(AttributeError):
            resolve_mux("resolveapp:nope")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_mux("no_such_module_for_muxer_tests:mux")


class TestResolveOrExit:
    def test_exits_one(
        self, app_module: types.ModuleType, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            resolve_or_exit("resolveapp:not_a_mux")
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
