"""Core Layer — pure request validation and upstream call mapping, no IO.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic
"""
