"""Validated Proxy — validate, map, send, relay.

Invariants:
    - Validation runs before any network call; a RequestFieldsError means
      the upstream was never contacted
    - The upstream payload is returned as-is (no reshaping)
"""

import logging
from typing import Any, Mapping

from gateway.core.proxy_routes import ProxyRoute, build_upstream_call
from gateway.infrastructure.translator_client import TranslatorClient

logger = logging.getLogger(__name__)


async def relay(
    client: TranslatorClient,
    route: ProxyRoute,
    query: Mapping[str, str | None] | None = None,
    text: Any = None,
) -> Any:
    """Proxy one inbound request for route through client."""
    call = build_upstream_call(route, client.api_version, query=query, text=text)
    logger.debug(f"Relaying {route.name} to {call.method} {call.path}")
    return await client.send(call)
