"""
Unit tests for the listener runner.

Every server binds 127.0.0.1 on an ephemeral port and is shut down before the
test returns.
"""

import http.client
import json
import socket
import threading
import time

import pytest

from hanja_hangul.config import Settings
from hanja_hangul.web import server as web_server
from hanja_hangul.web.server import make_app_server, serve, start_redirect_listener


def _loopback_settings(**overrides) -> Settings:
    values = {"http_host": "127.0.0.1", "http_port": 0}
    values.update(overrides)
    return Settings(**values)


def _post_convert(port: int, text: str):
    conn = http.client.HTTPConnection("127.0.0.1", port, timeout=5)
    try:
        body = json.dumps({"text": text})
        conn.request(
            "POST", "/convert", body=body, headers={"Content-Type": "application/json"}
        )
        response = conn.getresponse()
        return response.status, json.loads(response.read().decode("utf-8"))
    finally:
        conn.close()


@pytest.mark.unit
class TestMakeAppServer:
    def test_plain_server_answers_convert(self, dictionary):
        server, address = make_app_server(
            _loopback_settings(), dictionary, plain=True
        )
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        try:
            status, payload = _post_convert(server.server_port, "李씨")
        finally:
            server.shutdown()
            server.server_close()
            thread.join(timeout=5)

        assert address == "127.0.0.1:0"
        assert status == 200
        assert payload == {"converted_text": "이씨"}

    def test_address_in_use_exits(self, dictionary):
        holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        holder.bind(("127.0.0.1", 0))
        holder.listen(1)
        try:
            settings = _loopback_settings(http_port=holder.getsockname()[1])
            with pytest.raises(SystemExit):
                make_app_server(settings, dictionary, plain=True)
        finally:
            holder.close()


@pytest.mark.unit
def test_redirect_listener_sends_307():
    settings = _loopback_settings(https_redirect="https://badang.xyz")
    server = start_redirect_listener(settings)
    try:
        conn = http.client.HTTPConnection("127.0.0.1", server.server_port, timeout=5)
        conn.request("GET", "/anything")
        response = conn.getresponse()
        response.read()
        conn.close()
    finally:
        server.shutdown()
        server.server_close()

    assert response.status == 307
    assert response.getheader("Location") == "https://badang.xyz"


@pytest.mark.unit
def test_serve_runs_until_shutdown(dictionary, monkeypatch):
    started = []
    real_make_app_server = web_server.make_app_server

    def capture(*args, **kwargs):
        bound = real_make_app_server(*args, **kwargs)
        started.append(bound[0])
        return bound

    monkeypatch.setattr(web_server, "make_app_server", capture)

    thread = threading.Thread(
        target=serve,
        args=(_loopback_settings(), dictionary),
        kwargs={"plain": True},
        daemon=True,
    )
    thread.start()

    deadline = time.monotonic() + 5
    while not started and time.monotonic() < deadline:
        time.sleep(0.01)
    assert started, "server was never bound"

    try:
        status, payload = _post_convert(started[0].server_port, "六月")
    finally:
        started[0].shutdown()
        thread.join(timeout=5)

    assert status == 200
    assert payload == {"converted_text": "유월"}
    assert not thread.is_alive()
