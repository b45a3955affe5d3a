"""Root conftest — shared test configuration."""

import os

# Ensure tests never use real translator credentials
os.environ.setdefault("TRANSLATOR_KEY", "test-subscription-key")
os.environ.setdefault("TRANSLATOR_REGION", "test-region")
os.environ.setdefault(
    "TRANSLATOR_ENDPOINT", "https://translator.test",
)
