"""Bank Account Repository — SQLAlchemy implementation of BankAccountRepository.

Invariants:
    - save() assigns a UUID4 string id when the account has none
    - save() upserts (merge): an unknown id is inserted as given
    - delete_by_id() is idempotent (no error when no row matches)
    - find_all() applies no ORDER BY (database default order)
    - Every method returns plain dicts, never ORM instances

Design Decisions:
    - One repository per request, bound to the request's AsyncSession (get_db)
    - Commit inside the repository: each operation is a single unit of work
"""

import logging
import uuid

from fastapi import Depends
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from bankapi.core.domain_types import BankAccountId
from bankapi.infrastructure.database import get_db
from bankapi.models.bank_account import BankAccount

logger = logging.getLogger(__name__)


class SqlAlchemyBankAccountRepository:
    """Bank account persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, account: dict) -> dict:
        account_id = account.get("id") or str(uuid.uuid4())
        entity = await self._db.merge(BankAccount(
            id=account_id,
            name=account.get("name"),
            balance=account.get("balance"),
        ))
        await self._db.commit()
        await self._db.refresh(entity)
        logger.debug(
            f"Saved bank account {entity.id}", extra={"entity_id": entity.id},
        )
        return entity.to_dict()

    async def find_by_id(self, account_id: BankAccountId) -> dict | None:
        result = await self._db.execute(
            select(BankAccount).where(BankAccount.id == account_id),
        )
        entity = result.scalar_one_or_none()
        return entity.to_dict() if entity else None

    async def find_all(self) -> list[dict]:
        result = await self._db.execute(select(BankAccount))
        return [entity.to_dict() for entity in result.scalars().all()]

    async def delete_by_id(self, account_id: BankAccountId) -> None:
        await self._db.execute(
            delete(BankAccount).where(BankAccount.id == account_id),
        )
        await self._db.commit()


def get_bank_account_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyBankAccountRepository:
    """FastAPI dependency — repository bound to the request session."""
    return SqlAlchemyBankAccountRepository(db)
