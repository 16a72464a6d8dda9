"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BankAccountId wraps the string identifier assigned by the repository
    - ENTITY_NAME is the single spelling used in alert headers and error payloads

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BankAccountId = NewType("BankAccountId", str)


# ─── Constants ───────────────────────────────────────────────────

BANK_ACCOUNT_ENTITY_NAME = "bankAccount"
MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKey(str, Enum):
    """Machine-readable keys for rejected requests (X-<app>-error: error.<key>)."""
    ID_EXISTS = "idexists"
    ID_NULL = "idnull"
