"""Translator Client — one outbound call per request to the Azure AI Translator API.

Invariants:
    - Every call carries the subscription key, region, JSON content type
      and a fresh X-ClientTraceId (uuid4, generated per call, never reused)
    - Exactly one HTTP request per send(); no retries, httpx default timeout
    - 2xx with a JSON body → decoded payload returned unchanged; an empty 2xx body → None
    - Non-2xx → UpstreamError with the upstream status and error.message
    - No response, or an undecodable 2xx body → UpstreamTransportError

Design Decisions:
    - Wrapper over a shared httpx.AsyncClient: pooling comes from httpx, the
      wrapper only owns headers and error mapping
    - transport parameter lets tests substitute httpx.MockTransport
"""

import logging
import time
import uuid
from typing import Any

import httpx

from gateway.config import Settings
from gateway.core.errors import ErrorContext, UpstreamError, UpstreamTransportError
from gateway.core.proxy_routes import UpstreamCall

logger = logging.getLogger(__name__)

TRACE_ID_HEADER = "X-ClientTraceId"


def new_trace_id() -> str:
    return str(uuid.uuid4())


def extract_error_message(response: httpx.Response) -> str:
    """Read error.message from the upstream envelope, else the reason phrase."""
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    if isinstance(message, str) and message:
        return message
    return response.reason_phrase or f"Upstream returned {response.status_code}"


class TranslatorClient:
    """Sends UpstreamCalls to the translator endpoint with credentials attached."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_version = settings.translator_api_version
        self._key = settings.translator_key
        self._region = settings.translator_region
        self.http = httpx.AsyncClient(
            base_url=settings.translator_endpoint, transport=transport,
        )

    def _headers(self, trace_id: str) -> dict[str, str]:
        return {
            "Ocp-Apim-Subscription-Key": self._key,
            "Ocp-Apim-Subscription-Region": self._region,
            "Content-Type": "application/json",
            TRACE_ID_HEADER: trace_id,
        }

    async def send(self, call: UpstreamCall) -> Any:
        """Perform call and return the decoded upstream JSON payload."""
        trace_id = new_trace_id()
        context = ErrorContext(route=call.route, trace_id=trace_id)
        started = time.perf_counter()
        try:
            response = await self.http.request(
                call.method,
                call.path,
                params=call.params,
                json=call.json,
                headers=self._headers(trace_id),
            )
        except httpx.HTTPError as e:
            logger.warning(
                f"Upstream call failed: {type(e).__name__}",
                extra={"route": call.route, "trace_id": trace_id},
            )
            raise UpstreamTransportError(type(e).__name__, context=context) from e

        extra = {
            "route": call.route,
            "trace_id": trace_id,
            "upstream_status": response.status_code,
            "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
        }
        if not response.is_success:
            logger.warning("Upstream returned an error", extra=extra)
            raise UpstreamError(
                response.status_code, extract_error_message(response),
                context=context,
            )

        if not response.content:
            logger.info("Upstream call completed with an empty body", extra=extra)
            return None
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Upstream returned a malformed body", extra=extra)
            raise UpstreamTransportError("malformed_body", context=context) from e
        logger.info("Upstream call completed", extra=extra)
        return payload

    async def aclose(self) -> None:
        await self.http.aclose()
