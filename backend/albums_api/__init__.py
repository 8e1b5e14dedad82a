"""Albums API Package — in-memory album CRUD service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
