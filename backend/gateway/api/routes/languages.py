"""Language Routes — supported-language catalog and language detection.

Invariants:
    - GET /languages forwards scope=translation and sends no body
    - POST /detect forwards only api-version and the text array
"""

from typing import Any

from fastapi import APIRouter, Depends

from gateway.api.dependencies import get_translator_client
from gateway.core.proxy_routes import DETECT, LANGUAGES
from gateway.infrastructure.translator_client import TranslatorClient
from gateway.schemas.translation import text_body, text_from_body
from gateway.services.proxy import relay

router = APIRouter(tags=["Language"])


@router.get("/languages", summary="List all languages the API supports")
async def list_languages(
    client: TranslatorClient = Depends(get_translator_client),
):
    return await relay(client, LANGUAGES)


@router.post("/detect", summary="Detect the language of a text")
async def detect_language(
    payload: Any = text_body(),
    client: TranslatorClient = Depends(get_translator_client),
):
    return await relay(client, DETECT, text=text_from_body(payload))
