"""Translation Route — translate text into a target language."""

from typing import Any

from fastapi import APIRouter, Depends, Query

from gateway.api.dependencies import get_translator_client
from gateway.core.proxy_routes import TRANSLATE
from gateway.infrastructure.translator_client import TranslatorClient
from gateway.schemas.translation import text_body, text_from_body
from gateway.services.proxy import relay

router = APIRouter(tags=["Translation"])


@router.post("/translate", summary="Translate text from one language to another")
async def translate(
    payload: Any = text_body(),
    from_language: str | None = Query(
        None, alias="fromLanguage", description="The language the text is in",
    ),
    to_language: str | None = Query(
        None, alias="toLanguage",
        description="The language to translate the text to (required)",
    ),
    client: TranslatorClient = Depends(get_translator_client),
):
    # from is omitted upstream when absent; the translator auto-detects it
    return await relay(
        client, TRANSLATE,
        query={"fromLanguage": from_language, "toLanguage": to_language},
        text=text_from_body(payload),
    )
