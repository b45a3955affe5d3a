"""Infrastructure Layer — upstream client and cross-cutting concerns.

Invariants:
    - All upstream calls go through TranslatorClient, which maps failures to core/errors.py
"""
