"""Translation Schemas — inbound JSON body shared by the text endpoints.

Invariants:
    - The body is accepted as any JSON value; only an object contributes a text
    - A non-object body (string, array, number) counts as a missing text, so
      core.validation reports it alongside every other missing field
    - text is passed through untyped; a non-string text is a violation, not a parse error
"""

from typing import Any

from fastapi import Body

TEXT_BODY_EXAMPLE = {"text": "Hello, what is your name?"}


def text_body() -> Any:
    """Body parameter for the text endpoints (one instance per route)."""
    return Body(
        None,
        description='JSON object {"text": string}',
        examples=[TEXT_BODY_EXAMPLE],
    )


def text_from_body(payload: Any) -> Any:
    """Return body["text"] for an object body, else None."""
    if isinstance(payload, dict):
        return payload.get("text")
    return None
