"""Bank Account Schemas — Pydantic models for the /api/bank-accounts boundary.

Invariants:
    - One request shape for POST, PUT and PATCH; id presence is checked by the
      route (400 idexists / idnull), not by Pydantic
    - Unknown fields are ignored
    - balance stays a Decimal end to end (rendered by DecimalJSONResponse)

Design Decisions:
    - No min_length on id: "" must reach the route and surface as the
      idexists/idnull error keys clients switch on, not VALIDATION_ERROR
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class BankAccountPayload(BaseModel):
    """Request body — every field optional."""
    model_config = ConfigDict(extra="ignore")

    id: str | None = Field(None, max_length=36)
    name: str | None = Field(None, max_length=255)
    balance: Decimal | None = Field(None, max_digits=21, decimal_places=2)


class BankAccountResponse(BaseModel):
    """Response body — the stored representation."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    balance: Decimal | None = None
