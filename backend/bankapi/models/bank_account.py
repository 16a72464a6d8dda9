"""BankAccount ORM — persists one bank account per row.

Invariants:
    - id is a string primary key (UUID4 text), assigned by the repository on first save
    - name and balance are nullable (partial records allowed)
    - balance is fixed-point NUMERIC(21, 2), stored without float rounding (ExactNumeric)

Design Decisions:
    - String(36) id over native UUID: the API contract treats ids as opaque strings
"""

from decimal import Decimal

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bankapi.db.base import Base
from bankapi.db.types import ExactNumeric


class BankAccount(Base):
    """Bank account — name and balance, nothing else."""
    __tablename__ = "bank_account"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    balance: Mapped[Decimal | None] = mapped_column(
        ExactNumeric(21, 2), nullable=True,
    )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "balance": self.balance}
