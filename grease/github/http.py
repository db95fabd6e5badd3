"""Transport for the GitHub REST API.

``ReleaseClient`` talks to an ``HttpClient``: ``RealHttpClient`` sends the
requests with urllib, ``MockHttpClient`` answers from a table in tests.
Neither raises for HTTP or network failures; both return ``HttpError``.
"""

from __future__ import annotations

import http.client
import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO, Any, Protocol, cast, runtime_checkable

from grease.core.result import Err, Ok, Result
from grease.core.structured import as_obj_list, as_str_dict, get_str

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpCall",
    "HttpError",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """A failed request.

    ``status`` is the HTTP status, or 0 when no response arrived (DNS, TLS,
    refused connection) or the response body was unusable.
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """The two request shapes the release endpoints need."""

    def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Mapping[str, object] | None = None,
    ) -> Result[dict[str, Any], HttpError]:
        """Send a request with an optional JSON body and parse the JSON reply.

        Args:
            method: HTTP method ("GET", "POST", "PATCH")
            url: URL to call
            headers: Request headers
            body: JSON object to send, or None for no body

        Returns:
            Ok with parsed JSON object, or Err with HttpError
        """
        ...

    def upload(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        stream: IO[bytes],
        size: int,
    ) -> Result[dict[str, Any], HttpError]:
        """POST raw bytes read from ``stream`` and parse the JSON reply.

        Args:
            url: URL to post to
            headers: Request headers (Content-Type included)
            stream: Open binary stream, read to the end
            size: Number of bytes in the stream (sent as Content-Length)

        Returns:
            Ok with parsed JSON object, or Err with HttpError
        """
        ...


def _error_message(raw: bytes, fallback: str) -> str:
    """Extract GitHub's error message (and error codes) from a response body."""
    try:
        data = as_str_dict(json.loads(raw.decode("utf-8")))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return fallback
    if data is None:
        return fallback

    message = get_str(data, "message") or fallback
    codes: list[str] = []
    for item in as_obj_list(data.get("errors")) or []:
        entry = as_str_dict(item)
        if entry is None:
            continue
        code = get_str(entry, "code")
        if code:
            codes.append(code)
    if codes:
        return f"{message} ({', '.join(codes)})"
    return message


def _parse_object(url: str, raw: bytes) -> Result[dict[str, Any], HttpError]:
    """Decode a response body that must be a JSON object (empty counts as {})."""
    if not raw:
        return Ok({})
    try:
        data = as_str_dict(json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return Err(HttpError(url=url, status=0, message=f"Invalid JSON in response: {e}"))
    if data is None:
        return Err(HttpError(url=url, status=0, message="Expected JSON object"))
    return Ok(cast(dict[str, Any], data))


class RealHttpClient:
    """urllib-based client verifying TLS against the system trust store.

    Upload bodies are passed to urllib as the open file, so assets are
    streamed rather than read into memory.
    """

    def __init__(self, timeout: float | None = None) -> None:
        """
        Args:
            timeout: Socket timeout in seconds; None waits indefinitely
        """
        self.timeout = timeout
        self._ssl_context = ssl.create_default_context()

    def _send(self, req: urllib.request.Request) -> Result[dict[str, Any], HttpError]:
        url = req.full_url
        try:
            with urllib.request.urlopen(
                req, timeout=self.timeout, context=self._ssl_context
            ) as response:
                raw: bytes = response.read()
        except urllib.error.HTTPError as e:
            detail = _error_message(e.read(), str(e.reason))
            return Err(HttpError(url=url, status=e.code, message=detail))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except (TimeoutError, ValueError, OSError, http.client.HTTPException) as e:
            # socket timeouts, malformed URLs, a file that fails mid-upload, and
            # a connection dropped mid-response (IncompleteRead)
            return Err(HttpError(url=url, status=0, message=str(e) or type(e).__name__))
        return _parse_object(url, raw)

    def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Mapping[str, object] | None = None,
    ) -> Result[dict[str, Any], HttpError]:
        all_headers = dict(headers)
        data: bytes | None = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            all_headers["Content-Type"] = "application/json"
        req = urllib.request.Request(url, data=data, headers=all_headers, method=method)
        return self._send(req)

    def upload(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        stream: IO[bytes],
        size: int,
    ) -> Result[dict[str, Any], HttpError]:
        all_headers = dict(headers)
        all_headers["Content-Length"] = str(size)
        req = urllib.request.Request(url, data=stream, headers=all_headers, method="POST")
        return self._send(req)


@dataclass(frozen=True, slots=True)
class HttpCall:
    """A request recorded by MockHttpClient."""

    method: str
    url: str
    headers: dict[str, str]
    body: dict[str, object] | None = None
    content: bytes | None = None


class MockHttpClient:
    """Table-driven HttpClient that records every call.

    Replies are registered per (method, url); any other request gets a 404,
    which is also what GitHub answers for an unknown tag:

        http = MockHttpClient()
        http.set_response("GET", f"{api}/tags/v1.0.0", {"id": 7})
        http.set_response("POST", api, HttpError(url=api, status=422, message="..."))
    """

    def __init__(self) -> None:
        self._responses: dict[tuple[str, str], dict[str, Any] | HttpError] = {}
        self.calls: list[HttpCall] = []

    def set_response(self, method: str, url: str, response: dict[str, Any] | HttpError) -> None:
        """Set the response for a method and URL."""
        self._responses[(method.upper(), url)] = response

    def _reply(self, method: str, url: str) -> Result[dict[str, Any], HttpError]:
        match self._responses.get((method.upper(), url)):
            case None:
                return Err(HttpError(url=url, status=404, message="Not Found"))
            case HttpError() as error:
                return Err(error)
            case reply:
                return Ok(reply)

    def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Mapping[str, object] | None = None,
    ) -> Result[dict[str, Any], HttpError]:
        self.calls.append(
            HttpCall(
                method=method.upper(),
                url=url,
                headers=dict(headers),
                body=dict(body) if body is not None else None,
            )
        )
        return self._reply(method, url)

    def upload(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        stream: IO[bytes],
        size: int,
    ) -> Result[dict[str, Any], HttpError]:
        content = stream.read()
        self.calls.append(HttpCall(method="POST", url=url, headers=dict(headers), content=content))
        return self._reply("POST", url)

    # Test helper methods

    def calls_to(self, method: str, fragment: str = "") -> list[HttpCall]:
        """Recorded calls with the given method whose URL contains ``fragment``."""
        return [c for c in self.calls if c.method == method.upper() and fragment in c.url]
