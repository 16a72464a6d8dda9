"""Core — pure domain logic (errors, headers, merge rules, boundary protocols).

Invariants:
    - No IO, no FastAPI, no SQLAlchemy imports
"""
