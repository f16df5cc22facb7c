"""Tests for the echo route (POST /{rootParam})."""

import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from conftest import read_json_lines
from pn_main.web_server import ECHO_MESSAGE, parse_utc_timestamp
from pn_main.web_server.payload import EchoPayload


class TestEchoResponse:
    """Tests for the echo payload returned to the client."""

    def test_hello_example(self, client):
        """POST /hello returns the greeting, the param and a timestamp."""
        response = client.post("/hello")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert set(data) == {"msg", "param", "time"}
        assert data["msg"] == ECHO_MESSAGE
        assert data["param"] == "hello"

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/a-b_c.d~e", "a-b_c.d~e"),
            ("/42", "42"),
            ("/MiXeD", "MiXeD"),
            ("/hello%20world", "hello world"),
            ("/café", "café"),
        ],
    )
    def test_param_is_echoed_verbatim(self, client, path, expected):
        response = client.post(path)

        assert response.status_code == 200
        assert response.json()["param"] == expected

    def test_empty_segment(self, client):
        """POST / captures an empty parameter."""
        response = client.post("/")

        assert response.status_code == 200
        assert response.json()["param"] == ""

    def test_request_body_is_ignored(self, client):
        response = client.post("/hello", json={"param": "other"})

        assert response.status_code == 200
        assert response.json()["param"] == "hello"

    def test_time_is_current_utc(self, client):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        response = client.post("/clock")
        after = datetime.now(timezone.utc)

        stamp = parse_utc_timestamp(response.json()["time"])
        assert stamp.tzinfo == timezone.utc
        assert before <= stamp <= after

    def test_time_is_non_decreasing(self, client):
        stamps = [parse_utc_timestamp(client.post(f"/seq{i}").json()["time"]) for i in range(20)]

        assert stamps == sorted(stamps)


class TestEchoLogging:
    """Tests for what the echo route records."""

    def test_response_is_logged_at_debug(self, client, log_stream):
        client.post("/hello")

        records = read_json_lines(log_stream.getvalue())
        echo = [r for r in records if r["msg"] == "RESPONSE-echo"]
        assert len(echo) == 1
        assert echo[0]["level"] == "debug"
        assert echo[0]["allParams"] == {"rootParam": "hello"}
        assert echo[0]["responseData"]["param"] == "hello"
        assert echo[0]["fullURL"].endswith("/hello")


class TestEchoEncodingFailure:
    """An encoding failure is answered with 500 and never stops the server."""

    @pytest.fixture
    def broken_payload(self, monkeypatch):
        monkeypatch.setattr(EchoPayload, "to_dict", lambda self: {"param": {self.param}})

    def test_returns_500_with_error_body(self, client, broken_payload):
        response = client.post("/hello")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "SERIALIZATION"
        assert error["reason"] == "RESPONSE_ENCODING_FAILED"
        assert error["recovery"]

    def test_error_is_logged(self, client, log_stream, broken_payload):
        client.post("/hello")

        records = read_json_lines(log_stream.getvalue())
        failures = [r for r in records if r["msg"] == "Request failed"]
        assert len(failures) == 1
        assert failures[0]["level"] == "error"
        assert failures[0]["error_code"] == "RESPONSE_ENCODING_FAILED"
        assert failures[0]["status"] == 500

    def test_server_keeps_serving(self, client, monkeypatch, broken_payload):
        assert client.post("/first").status_code == 500

        monkeypatch.undo()
        response = client.post("/second")
        assert response.status_code == 200
        assert response.json()["param"] == "second"


class TestEchoConcurrency:
    """Concurrent requests never see each other's parameters."""

    @pytest.mark.asyncio
    async def test_concurrent_posts_have_no_cross_talk(self, web_server):
        transport = httpx.ASGITransport(app=web_server.get_app())
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            params = [f"param-{i}" for i in range(100)]
            responses = await asyncio.gather(*(client.post(f"/{p}") for p in params))

        assert [r.status_code for r in responses] == [200] * 100
        assert [r.json()["param"] for r in responses] == params
