"""Proxy Route Table — declarative mapping from gateway endpoints to upstream calls.

Invariants:
    - Every upstream call carries api-version; route-specific params are added on top
    - Optional inbound query values that are absent or empty are not forwarded
    - Text routes send a one-element array [{"text": ...}]; others send no body
    - build_upstream_call validates before mapping (no call is built for a bad request)

Design Decisions:
    - One ProxyRoute per endpoint instead of four hand-written handlers:
      required fields, upstream path and parameter mapping are data
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from gateway.core.validation import BODY, QUERY, FieldRule, is_present, require_fields

API_VERSION_PARAM = "api-version"


@dataclass(frozen=True)
class ProxyRoute:
    """How one gateway endpoint maps onto one upstream endpoint."""
    name: str
    path: str
    method: str
    upstream_path: str
    rules: tuple[FieldRule, ...] = ()
    # inbound query name -> upstream query name
    query_map: Mapping[str, str] = field(default_factory=dict)
    fixed_params: Mapping[str, str] = field(default_factory=dict)
    sends_text: bool = False


@dataclass(frozen=True)
class UpstreamCall:
    """A fully mapped outbound request, minus credentials and trace id."""
    route: str
    method: str
    path: str
    params: dict[str, str]
    json: list[dict[str, Any]] | None = None


LANGUAGES = ProxyRoute(
    name="languages",
    path="/languages",
    method="GET",
    upstream_path="/languages",
    fixed_params={"scope": "translation"},
)

TRANSLATE = ProxyRoute(
    name="translate",
    path="/translate",
    method="POST",
    upstream_path="/translate",
    rules=(
        FieldRule(QUERY, "toLanguage", "Please provide a language to translate to"),
        FieldRule(BODY, "text", "Please provide a text to translate"),
    ),
    query_map={"fromLanguage": "from", "toLanguage": "to"},
    sends_text=True,
)

DETECT = ProxyRoute(
    name="detect",
    path="/detect",
    method="POST",
    upstream_path="/detect",
    rules=(FieldRule(BODY, "text", "Please provide a text"),),
    sends_text=True,
)

DICTIONARY_LOOKUP = ProxyRoute(
    name="dictionary_lookup",
    path="/dictionary/lookup",
    method="POST",
    upstream_path="/dictionary/lookup",
    rules=(
        FieldRule(QUERY, "fromLanguage", "Please provide the language the word is in"),
        FieldRule(QUERY, "toLanguage", "Please provide a language to translate to"),
        FieldRule(BODY, "text", "Please provide a word to translate"),
    ),
    query_map={"fromLanguage": "from", "toLanguage": "to"},
    sends_text=True,
)


PROXY_ROUTES = (LANGUAGES, TRANSLATE, DETECT, DICTIONARY_LOOKUP)
_ROUTES_BY_PATH = {route.path: route for route in PROXY_ROUTES}


def route_for_path(path: str) -> ProxyRoute | None:
    """Return the ProxyRoute served at inbound path, if any."""
    return _ROUTES_BY_PATH.get(path.rstrip("/") or "/")


def inbound_values(
    query: Mapping[str, str | None], text: Any,
) -> dict[tuple[str, str], Any]:
    """Key inbound query values and body text by (location, name)."""
    values: dict[tuple[str, str], Any] = {
        (QUERY, name): value for name, value in query.items()
    }
    values[(BODY, "text")] = text
    return values


def build_upstream_call(
    route: ProxyRoute,
    api_version: str,
    query: Mapping[str, str | None] | None = None,
    text: Any = None,
) -> UpstreamCall:
    """Validate inbound values for route and map them to an UpstreamCall.

    Raises RequestFieldsError if any required field is missing or empty.
    """
    query = query or {}
    require_fields(route.rules, inbound_values(query, text))

    params = dict(route.fixed_params)
    for inbound, upstream in route.query_map.items():
        value = query.get(inbound)
        if is_present(value):
            params[upstream] = value
    params[API_VERSION_PARAM] = api_version

    return UpstreamCall(
        route=route.name,
        method=route.method,
        path=route.upstream_path,
        params=params,
        json=[{"text": text}] if route.sends_text else None,
    )
