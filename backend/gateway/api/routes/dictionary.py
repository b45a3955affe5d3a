"""Dictionary Route — alternate translations for a single word or phrase.

Invariants:
    - fromLanguage, toLanguage and text are all required
"""

from typing import Any

from fastapi import APIRouter, Depends, Query

from gateway.api.dependencies import get_translator_client
from gateway.core.proxy_routes import DICTIONARY_LOOKUP
from gateway.infrastructure.translator_client import TranslatorClient
from gateway.schemas.translation import text_body, text_from_body
from gateway.services.proxy import relay

router = APIRouter(prefix="/dictionary", tags=["Dictionary"])


@router.post("/lookup", summary="Lookup alternate words for word provided")
async def dictionary_lookup(
    payload: Any = text_body(),
    from_language: str | None = Query(
        None, alias="fromLanguage", description="The language the word is in (required)",
    ),
    to_language: str | None = Query(
        None, alias="toLanguage",
        description="The language to translate the word to (required)",
    ),
    client: TranslatorClient = Depends(get_translator_client),
):
    return await relay(
        client, DICTIONARY_LOOKUP,
        query={"fromLanguage": from_language, "toLanguage": to_language},
        text=text_from_body(payload),
    )
