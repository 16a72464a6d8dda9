"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Repositories exchange plain dicts, never ORM instances
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from bankapi.core.domain_types import BankAccountId


class BankAccountRepository(Protocol):
    """Contract for bank account persistence — implemented by shell."""
    async def save(self, account: dict) -> dict: ...
    async def find_by_id(self, account_id: BankAccountId) -> dict | None: ...
    async def find_all(self) -> list[dict]: ...
    async def delete_by_id(self, account_id: BankAccountId) -> None: ...
