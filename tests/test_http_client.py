"""Unit tests for YaplaHttpClient request execution."""

from __future__ import annotations

import json
import time

import pytest
import requests

from yapla_lib.config import Config
from yapla_lib.core import YaplaHttpClient
from yapla_lib.errors import DecodeError, HTTPStatusError, TransportError, YaplaTimeoutError

from conftest import make_response

CONFIG = Config(url="https://api.test/api/2", timeout=7)


@pytest.fixture
def client(fake_session) -> YaplaHttpClient:
    return YaplaHttpClient(CONFIG)


class TestPost:
    def test_builds_request(self, client: YaplaHttpClient, fake_session) -> None:
        fake_session.post.return_value = make_response({"result": True, "data": {}})

        client.post("/member/login", {"login": "a", "password": "b"}, "tok")

        args, kwargs = fake_session.post.call_args
        assert args[0] == "https://api.test/api/2/member/login"
        assert json.loads(kwargs["data"]) == {"login": "a", "password": "b"}
        assert kwargs["timeout"] == 7
        assert kwargs["stream"] is True
        assert kwargs["headers"] == {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "token": "tok",
        }

    def test_token_header_omitted_when_empty(self, client: YaplaHttpClient, fake_session) -> None:
        fake_session.post.return_value = make_response({"result": True, "data": {}})

        client.post("/authentication", {"api_key": "k"})

        headers = fake_session.post.call_args.kwargs["headers"]
        assert "token" not in headers

    def test_decodes_reply(self, client: YaplaHttpClient, fake_session) -> None:
        fake_session.post.return_value = make_response({"result": True, "data": {"member": {"id": 7}}})

        rep = client.post("/member/login", {"login": "a", "password": "b"}, "tok")

        assert rep.result is True
        assert rep.data == {"member": {"id": 7}}

    @pytest.mark.parametrize("status,reason", [(401, "Unauthorized"), (500, "Internal Server Error"), (201, "Created")])
    def test_non_200_status(self, client: YaplaHttpClient, fake_session, status: int, reason: str) -> None:
        fake_session.post.return_value = make_response(status_code=status, reason=reason, text="ignored")

        with pytest.raises(HTTPStatusError) as exc:
            client.post("/contact/login", {"login": "a", "password": "b"}, "tok")

        assert exc.value.status_code == status
        assert exc.value.url == "https://api.test/api/2/contact/login"
        assert "https://api.test/api/2/contact/login" in str(exc.value)
        assert str(status) in str(exc.value)
        assert reason in str(exc.value)
        fake_session.post.return_value.close.assert_called_once()

    def test_malformed_json_includes_body(self, client: YaplaHttpClient, fake_session) -> None:
        fake_session.post.return_value = make_response(text="<html>oops</html>")

        with pytest.raises(DecodeError) as exc:
            client.post("/authentication", {"api_key": "k"})

        assert exc.value.body == "<html>oops</html>"
        assert "<html>oops</html>" in str(exc.value)

    def test_connection_error(self, client: YaplaHttpClient, fake_session) -> None:
        fake_session.post.side_effect = requests.ConnectionError("refused")

        with pytest.raises(TransportError) as exc:
            client.post("/authentication", {"api_key": "k"})

        assert isinstance(exc.value.__cause__, requests.ConnectionError)
        assert "refused" in str(exc.value)

    def test_timeout(self, client: YaplaHttpClient, fake_session) -> None:
        fake_session.post.side_effect = requests.Timeout("slow")

        with pytest.raises(YaplaTimeoutError):
            client.post("/authentication", {"api_key": "k"})


def test_close_closes_session(client: YaplaHttpClient, fake_session) -> None:
    client.close()
    fake_session.close.assert_called_once()


class TestAgainstLocalServer:
    def test_utf8_body_with_html_content_type(self, local_server) -> None:
        local_server.content_type = "text/html"
        local_server.body = '{"result": true, "data": {"name": "Société"}}'.encode("utf-8")
        client = YaplaHttpClient(Config(url=local_server.url, timeout=5))

        rep = client.post("/member/login", {"login": "a", "password": "b"}, "tok")

        assert rep.data["name"] == "Société"
        client.close()

    def test_invalid_body_reported_as_utf8(self, local_server) -> None:
        local_server.content_type = "text/html"
        local_server.body = "<p>Erreur générale</p>".encode("utf-8")
        client = YaplaHttpClient(Config(url=local_server.url, timeout=5))

        with pytest.raises(DecodeError) as exc:
            client.post("/authentication", {"api_key": "k"})

        assert exc.value.body == "<p>Erreur générale</p>"
        client.close()

    def test_timeout_covers_slow_body(self, local_server) -> None:
        local_server.body = b'{"result": true, "data": {"padding": "xxxxxxx"}}'
        local_server.byte_delay = 0.1
        client = YaplaHttpClient(Config(url=local_server.url, timeout=1))

        started = time.monotonic()
        with pytest.raises(YaplaTimeoutError):
            client.post("/authentication", {"api_key": "k"})

        assert time.monotonic() - started < 2.5
        client.close()

    def test_slow_body_within_timeout(self, local_server) -> None:
        local_server.body = b'{"result": true, "data": {}}'
        local_server.byte_delay = 0.01
        client = YaplaHttpClient(Config(url=local_server.url, timeout=5))

        assert client.post("/authentication", {"api_key": "k"}).result is True
        client.close()
