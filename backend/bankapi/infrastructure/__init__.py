"""Infrastructure Layer — database access, repositories, and logging setup.

Invariants:
    - SQLAlchemy errors never escape as raw exceptions (mapped to DatabaseError)
    - Repositories satisfy the Protocols in core/repository_protocols.py
"""
