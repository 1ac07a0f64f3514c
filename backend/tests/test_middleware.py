"""
NoteKeeper Backend - Middleware Tests
=======================================

What:  Tests for the interceptor chain: request logging, JSON body parsing,
       request IDs, trailing slashes and CORS.
"""

import logging

import pytest

from notekeeper.exceptions import ValidationError
from notekeeper.middleware.body import decode_json_body, is_json_content_type
from notekeeper.middleware.trailing_slash import strip_trailing_slash


class TestJSONBodyHelpers:

    @pytest.mark.parametrize("content_type", [
        "application/json",
        "application/json; charset=utf-8",
        "Application/JSON",
        "application/merge-patch+json",
    ])
    def test_json_content_types(self, content_type):
        assert is_json_content_type(content_type)

    @pytest.mark.parametrize("content_type", ["", "text/plain", "application/xml", "text/json+x"])
    def test_other_content_types(self, content_type):
        assert not is_json_content_type(content_type)

    def test_decode_object(self):
        assert decode_json_body(b'{"content": "hi"}') == {"content": "hi"}

    def test_decode_array(self):
        assert decode_json_body(b"[1, 2]") == [1, 2]

    @pytest.mark.parametrize("raw", [b"{oops", b'"just a string"', b"42", b"\xff\xfe"])
    def test_decode_rejects(self, raw):
        with pytest.raises(ValidationError, match="malformed JSON"):
            decode_json_body(raw)


class TestRequestLogging:

    @pytest.mark.asyncio
    async def test_logs_method_path_and_body(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notekeeper.access")

        await test_client.post("/api/notes", json={"content": "logged"})

        messages = [r.getMessage() for r in caplog.records if r.name == "notekeeper.access"]
        assert "Method: POST" in messages
        assert "Path:   /api/notes" in messages
        assert "Body:   {'content': 'logged'}" in messages
        assert "---" in messages

    @pytest.mark.asyncio
    async def test_logs_empty_body_for_get(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notekeeper.access")

        await test_client.get("/api/notes")

        messages = [r.getMessage() for r in caplog.records if r.name == "notekeeper.access"]
        assert "Body:   {}" in messages

    @pytest.mark.asyncio
    async def test_unmatched_requests_still_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notekeeper.access")

        await test_client.get("/nowhere")

        records = [r for r in caplog.records if r.name == "notekeeper.access"]
        assert any(r.getMessage() == "Path:   /nowhere" for r in records)
        summary = records[-1]
        assert summary.levelno == logging.WARNING
        assert summary.status == 404

    @pytest.mark.asyncio
    async def test_body_still_reaches_handler(self, test_client):
        """Logging and body parsing must not consume the request for the route."""
        response = await test_client.post("/api/notes", json={"content": "intact"})
        assert response.json()["content"] == "intact"


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/api/notes")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_id_echoed(self, test_client):
        response = await test_client.get("/api/notes", headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"


class TestTrailingSlash:

    @pytest.mark.parametrize("path, expected", [
        ("/", "/"),
        ("/api/notes", "/api/notes"),
        ("/api/notes/", "/api/notes"),
        ("/api/notes/2/", "/api/notes/2"),
        ("/api/notes//", "/api/notes/"),
    ])
    def test_strip_one_slash(self, path, expected):
        assert strip_trailing_slash(path) == expected

    @pytest.mark.asyncio
    async def test_access_log_keeps_original_path(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="notekeeper.access")

        response = await test_client.get("/api/notes/")

        assert response.status_code == 200
        messages = [r.getMessage() for r in caplog.records if r.name == "notekeeper.access"]
        assert "Path:   /api/notes/" in messages


class TestCORS:

    @pytest.mark.asyncio
    async def test_any_origin_allowed(self, test_client):
        response = await test_client.get(
            "/api/notes", headers={"Origin": "http://example.com"}
        )
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_preflight(self, test_client):
        response = await test_client.options(
            "/api/notes",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "DELETE",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "DELETE" in response.headers["access-control-allow-methods"]

    @pytest.mark.asyncio
    async def test_error_responses_carry_cors_headers(self, test_client):
        response = await test_client.get(
            "/api/unknown", headers={"Origin": "http://example.com"}
        )
        assert response.status_code == 404
        assert response.headers["access-control-allow-origin"] == "*"
