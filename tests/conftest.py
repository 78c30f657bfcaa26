"""Fixtures compartilhadas: requests.Session falso e servidor HTTP local."""

from __future__ import annotations

import json
import threading
import time
from datetime import datetime, timedelta, timezone
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Iterator
from unittest.mock import MagicMock, patch

import pytest


def make_response(payload: Any = None, status_code: int = 200, reason: str = "OK", text: str | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    body = (text if text is not None else json.dumps(payload)).encode("utf-8")
    resp.content = body
    resp.iter_content.side_effect = lambda chunk_size=1: iter([body[i:i + 1] for i in range(len(body))])
    return resp


def auth_payload(token: str = "tok-123", expire: datetime | None = None) -> dict:
    expire = expire or datetime.now(timezone.utc) + timedelta(hours=1)
    return {
        "result": True,
        "data": {
            "session_token": token,
            "expire_date": expire.strftime("%Y-%m-%d %H:%M:%S"),
        },
    }


@pytest.fixture
def fake_session():
    """Substitui requests.Session; configure `fake_session.post.side_effect`."""
    with patch("yapla_lib.core.http_client.requests.Session") as session_cls:
        session = MagicMock()
        session_cls.return_value = session
        yield session


class LocalServer:
    """Servidor HTTP local cujo corpo de resposta e definido por cada teste."""

    def __init__(self) -> None:
        self.body = b"{}"
        self.content_type = "application/json"
        self.byte_delay = 0.0
        self.httpd: ThreadingHTTPServer | None = None

    @property
    def url(self) -> str:
        assert self.httpd is not None
        host, port = self.httpd.server_address[:2]
        return f"http://{host}:{port}"


@pytest.fixture
def local_server() -> Iterator[LocalServer]:
    server = LocalServer()

    class Handler(BaseHTTPRequestHandler):
        def do_POST(self) -> None:
            length = int(self.headers.get("Content-Length", 0))
            self.rfile.read(length)
            self.send_response(200)
            self.send_header("Content-Type", server.content_type)
            self.send_header("Content-Length", str(len(server.body)))
            self.end_headers()
            if not server.byte_delay:
                self.wfile.write(server.body)
                return
            try:
                for i in range(len(server.body)):
                    self.wfile.write(server.body[i:i + 1])
                    self.wfile.flush()
                    time.sleep(server.byte_delay)
            except (BrokenPipeError, ConnectionResetError):
                pass

        def log_message(self, format: str, *args: Any) -> None:
            pass

    httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    httpd.daemon_threads = True
    server.httpd = httpd
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        httpd.shutdown()
        httpd.server_close()
