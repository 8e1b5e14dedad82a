"""Core Layer — album collection and domain errors, no HTTP, no IO.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
"""
