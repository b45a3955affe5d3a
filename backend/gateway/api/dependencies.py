"""Route dependencies — access to the translator client created in the lifespan."""

from fastapi import Request

from gateway.infrastructure.translator_client import TranslatorClient


def get_translator_client(request: Request) -> TranslatorClient:
    return request.app.state.translator_client
