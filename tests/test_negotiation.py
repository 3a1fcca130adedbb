"""Tests for muxer.server.negotiation — handler return values to Responses."""

import pytest

from muxer.http.response import Redirect, Response
from muxer.server.negotiation import negotiate


class TestNegotiate:
    def test_response_passthrough(self) -> None:
        resp = Response("hi", status=201)
        assert negotiate(resp) is resp

    def test_str_is_html(self) -> None:
        resp = negotiate("<p>hi</p>")
        assert resp.status == 200
        assert resp.content_type == "text/html; charset=utf-8"
        assert resp.text == "<p>hi</p>"

    def test_bytes_is_octet_stream(self) -> None:
        resp = negotiate(b"\x00\x01")
        assert resp.content_type == "application/octet-stream"
        assert resp.body == b"\x00\x01"

    def test_dict_is_json(self) -> None:
        resp = negotiate({"id": "42"})
        assert resp.content_type.startswith("application/json")
        assert resp.json() == {"id": "42"}

    def test_list_is_json(self) -> None:
        assert negotiate([1, 2]).json() == [1, 2]

    def test_json_falls_back_to_str(self) -> None:
        class Ident:
            def __str__(self) -> str:
                return "ident"

        assert negotiate({"v": Ident()}).json() == {"v": "ident"}

    def test_none_is_empty_ok(self) -> None:
        resp = negotiate(None)
        assert resp.status == 200
        assert resp.body_bytes == b""

    def test_redirect(self) -> None:
        resp = negotiate(Redirect("/api/users/1", status=301))
        assert resp.status == 301
        assert resp.header("Location") == "/api/users/1"

    def test_redirect_extra_headers(self) -> None:
        resp = negotiate(Redirect("/x", headers=(("X-Why", "moved"),)))
        assert resp.status == 302
        assert resp.header("x-why") == "moved"

    def test_tuple_status(self) -> None:
        resp = negotiate(("created", 201))
        assert resp.status == 201
        assert resp.text == "created"

    def test_tuple_status_and_headers(self) -> None:
        resp = negotiate(({"ok": True}, 202, {"X-Job": "7"}))
        assert resp.status == 202
        assert resp.header("X-Job") == "7"
        assert resp.json() == {"ok": True}

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="Cannot convert int"):
            negotiate(42)
