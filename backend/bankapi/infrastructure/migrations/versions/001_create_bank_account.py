"""Create bank_account table.

Revision ID: 001_create_bank_account
Revises:
Create Date: 2026-10-17

id is a 36-char string (UUID4 text) assigned by the application;
balance is fixed-point NUMERIC(21, 2) (decimal text on SQLite).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from bankapi.db.types import ExactNumeric


# revision identifiers, used by Alembic.
revision: str = '001_create_bank_account'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'bank_account',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('balance', ExactNumeric(21, 2), nullable=True),
    )


def downgrade() -> None:
    op.drop_table('bank_account')
