"""Translator client tests — headers, trace ids and failure mapping.

Invariants:
    - Credentials and JSON content type on every call
    - X-ClientTraceId is a fresh uuid4 per call
    - Non-2xx → UpstreamError(status, error.message)
    - Transport failure or malformed 2xx body → UpstreamTransportError
"""

import uuid

import httpx
import pytest

from gateway.config import Settings
from gateway.core.errors import UpstreamError, UpstreamTransportError
from gateway.core.proxy_routes import DETECT, LANGUAGES, build_upstream_call
from gateway.infrastructure.translator_client import (
    TRACE_ID_HEADER, TranslatorClient, extract_error_message,
)


@pytest.fixture
def settings():
    return Settings(
        translator_key="k-123",
        translator_region="westeurope",
        translator_endpoint="https://translator.example/",
    )


def _client(settings, handler):
    return TranslatorClient(settings, transport=httpx.MockTransport(handler))


async def test_send_attaches_credentials_and_content_type(settings):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[{"language": "fr", "score": 1.0}])

    client = _client(settings, handler)
    result = await client.send(build_upstream_call(DETECT, "3.0", text="Bonjour"))
    await client.aclose()

    assert result == [{"language": "fr", "score": 1.0}]
    request = seen[0]
    assert request.url.host == "translator.example"
    assert request.url.path == "/detect"
    assert request.headers["Ocp-Apim-Subscription-Key"] == "k-123"
    assert request.headers["Ocp-Apim-Subscription-Region"] == "westeurope"
    assert request.headers["Content-Type"] == "application/json"


async def test_trace_id_is_fresh_uuid_per_call(settings):
    seen = []

    def handler(request):
        seen.append(request.headers[TRACE_ID_HEADER])
        return httpx.Response(200, json={})

    client = _client(settings, handler)
    call = build_upstream_call(LANGUAGES, "3.0")
    await client.send(call)
    await client.send(call)
    await client.aclose()

    assert len(seen) == 2
    assert seen[0] != seen[1]
    assert all(uuid.UUID(t).version == 4 for t in seen)


async def test_get_call_sends_no_body(settings):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"translation": {}})

    client = _client(settings, handler)
    await client.send(build_upstream_call(LANGUAGES, "3.0"))
    await client.aclose()

    assert seen[0].method == "GET"
    assert seen[0].content == b""


async def test_non_2xx_raises_upstream_error_with_envelope_message(settings):
    client = _client(settings, lambda r: httpx.Response(
        401, json={"error": {"code": 401000, "message": "invalid key"}},
    ))
    with pytest.raises(UpstreamError) as exc_info:
        await client.send(build_upstream_call(LANGUAGES, "3.0"))
    await client.aclose()

    assert exc_info.value.http_status == 401
    assert exc_info.value.message == "invalid key"
    assert exc_info.value.context.route == "languages"
    assert exc_info.value.context.trace_id


async def test_connect_error_raises_transport_error(settings):
    def handler(request):
        raise httpx.ConnectError("getaddrinfo failed: secret.internal", request=request)

    client = _client(settings, handler)
    with pytest.raises(UpstreamTransportError) as exc_info:
        await client.send(build_upstream_call(LANGUAGES, "3.0"))
    await client.aclose()

    assert exc_info.value.http_status == 500
    assert "secret.internal" not in exc_info.value.message
    assert exc_info.value.reason == "ConnectError"


async def test_timeout_raises_transport_error(settings):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = _client(settings, handler)
    with pytest.raises(UpstreamTransportError):
        await client.send(build_upstream_call(DETECT, "3.0", text="x"))
    await client.aclose()


async def test_empty_success_body_returns_none(settings):
    client = _client(settings, lambda r: httpx.Response(204))
    result = await client.send(build_upstream_call(LANGUAGES, "3.0"))
    await client.aclose()
    assert result is None


async def test_malformed_success_body_raises_transport_error(settings):
    client = _client(settings, lambda r: httpx.Response(200, content=b"<html>"))
    with pytest.raises(UpstreamTransportError) as exc_info:
        await client.send(build_upstream_call(DETECT, "3.0", text="x"))
    await client.aclose()
    assert exc_info.value.reason == "malformed_body"


# --- extract_error_message ------------------------------------------------------

def test_extract_error_message_from_envelope():
    response = httpx.Response(400, json={"error": {"message": "bad to"}})
    assert extract_error_message(response) == "bad to"


def test_extract_error_message_falls_back_to_reason_phrase():
    assert extract_error_message(httpx.Response(503, content=b"down")) == (
        "Service Unavailable"
    )
    assert extract_error_message(httpx.Response(429, json={"detail": "x"})) == (
        "Too Many Requests"
    )
    assert extract_error_message(httpx.Response(400, json=["x"])) == "Bad Request"
