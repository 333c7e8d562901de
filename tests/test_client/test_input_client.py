"""Tests for the httpx-based input client."""

from __future__ import annotations

import httpx
import pytest

from aoc_cache.client import InputClient, build_cookie_header
from aoc_cache.config import Settings
from aoc_cache.exceptions import (
    AuthError,
    HttpStatusError,
    InvalidUsageError,
    NotFoundError,
    TransportError,
)
from aoc_cache.exit_codes import EXIT_AUTH_FAILURE, EXIT_CONNECTION_ERROR, EXIT_NOT_FOUND

URL = "https://adventofcode.com/2022/day/1/input"


# ---------------------------------------------------------------------------
# Cookie header
# ---------------------------------------------------------------------------


class TestBuildCookieHeader:
    def test_full_cookie_passed_through(self) -> None:
        assert build_cookie_header("session=abc123") == "session=abc123"

    def test_bare_token_gets_session_name(self) -> None:
        assert build_cookie_header("abc123") == "session=abc123"

    def test_trailing_newline_stripped(self) -> None:
        """Cookie files usually end in a newline."""
        assert build_cookie_header("session=abc\n") == "session=abc"

    @pytest.mark.parametrize("cookie", ["", "   ", "\n"])
    def test_empty_cookie_rejected(self, cookie: str) -> None:
        with pytest.raises(InvalidUsageError, match="empty"):
            build_cookie_header(cookie)

    @pytest.mark.parametrize("cookie", ["session=a\r\nX-Evil: 1", "session=a\x00b", "a\tb"])
    def test_control_characters_rejected(self, cookie: str) -> None:
        with pytest.raises(InvalidUsageError, match="control characters"):
            build_cookie_header(cookie)

    @pytest.mark.parametrize("cookie", ["session=caf\u00e9", "\u2603", "session=abc\U0001f384"])
    def test_non_ascii_rejected(self, cookie: str) -> None:
        """Header values must be ASCII; anything else fails before encoding."""
        with pytest.raises(InvalidUsageError, match="non-ASCII"):
            build_cookie_header(cookie)


# ---------------------------------------------------------------------------
# Successful fetch
# ---------------------------------------------------------------------------


class TestFetch:
    def test_returns_body_text(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="1\n2\n3\n")

        assert make_client(handler).fetch(URL, "session=abc") == "1\n2\n3\n"

    def test_sends_cookie_and_user_agent(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["cookie"] = request.headers["cookie"]
            seen["ua"] = request.headers["user-agent"]
            return httpx.Response(200, text="ok")

        client = InputClient(
            Settings(user_agent="tester/1.0"), transport=httpx.MockTransport(handler)
        )
        client.fetch(URL, "session=abc")
        assert seen == {
            "method": "GET",
            "url": URL,
            "cookie": "session=abc",
            "ua": "tester/1.0",
        }

    def test_body_not_trimmed(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="  padded\n\n")

        assert make_client(handler).fetch(URL, "session=abc") == "  padded\n\n"

    def test_context_manager_reuses_client(self) -> None:
        calls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return httpx.Response(200, text="x")

        client = InputClient(transport=httpx.MockTransport(handler))
        assert client._client is None
        with client:
            inner = client._client
            assert inner is not None
            client.fetch(URL, "session=abc")
            client.fetch(URL, "session=abc")
            assert client._client is inner
        assert client._client is None
        assert len(calls) == 2

    def test_invalid_cookie_makes_no_request(self, offline_client: InputClient) -> None:
        with pytest.raises(InvalidUsageError):
            offline_client.fetch(URL, "")


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


class TestErrorMapping:
    @pytest.mark.parametrize("status", [400, 401, 403])
    def test_auth_statuses(self, make_client, status: int) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, text="Puzzle inputs differ by user.  Please log in to get your puzzle input.")

        with pytest.raises(AuthError) as exc_info:
            make_client(handler).fetch(URL, "session=expired")
        assert exc_info.value.status_code == status
        assert exc_info.value.url == URL
        assert exc_info.value.exit_code == EXIT_AUTH_FAILURE
        assert "log in" in str(exc_info.value)

    def test_not_found(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="Please don't repeatedly request this endpoint before it unlocks!")

        with pytest.raises(NotFoundError) as exc_info:
            make_client(handler).fetch(URL, "session=abc")
        assert exc_info.value.status_code == 404
        assert exc_info.value.exit_code == EXIT_NOT_FOUND

    @pytest.mark.parametrize("status", [302, 418, 500, 503])
    def test_other_statuses(self, make_client, status: int) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, headers={"location": "https://adventofcode.com/"})

        with pytest.raises(HttpStatusError) as exc_info:
            make_client(handler).fetch(URL, "session=abc")
        assert type(exc_info.value) is HttpStatusError
        assert exc_info.value.status_code == status
        assert str(exc_info.value) == f"HTTP {status} for {URL}"

    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
            httpx.RemoteProtocolError("peer closed"),
        ],
    )
    def test_transport_failures(self, make_client, exc: Exception) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        with pytest.raises(TransportError) as exc_info:
            make_client(handler).fetch(URL, "session=abc")
        assert exc_info.value.exit_code == EXIT_CONNECTION_ERROR
        assert exc_info.value.__cause__ is exc

    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "ftp://adventofcode.com/input",
            "http://[::1",
            "https://adventofcode.com/\ud800",
        ],
    )
    def test_malformed_urls(self, url: str) -> None:
        """Bad URLs are rejected by httpx before any connection and surface as TransportError."""
        with pytest.raises(TransportError):
            InputClient().fetch(url, "session=abc")
