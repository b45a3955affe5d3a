"""Translator Gateway — validated HTTP proxy in front of the Azure AI Translator API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
