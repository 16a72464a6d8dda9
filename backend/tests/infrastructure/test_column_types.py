"""Column Types — verifies ExactNumeric per dialect, without a database.

Invariants:
    - SQLite: VARCHAR column, decimal text in and out
    - PostgreSQL: NUMERIC(21, 2) column, Decimal in and out
    - Values are quantized to two places on write
"""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.dialects import postgresql, sqlite

from bankapi.db.types import ExactNumeric

BALANCE = ExactNumeric(21, 2)


def test_sqlite_stores_text_wide_enough_for_21_digits():
    impl = BALANCE.load_dialect_impl(sqlite.dialect())

    assert isinstance(impl, String)
    assert impl.length == 23


def test_postgresql_uses_native_numeric():
    impl = BALANCE.load_dialect_impl(postgresql.dialect())

    assert isinstance(impl, Numeric)
    assert (impl.precision, impl.scale) == (21, 2)


def test_sqlite_bind_is_quantized_text():
    assert BALANCE.process_bind_param(Decimal("1234567890123456789.1"), sqlite.dialect()) == (
        "1234567890123456789.10"
    )


def test_postgresql_bind_is_quantized_decimal():
    bound = BALANCE.process_bind_param(Decimal("5"), postgresql.dialect())

    assert isinstance(bound, Decimal)
    assert str(bound) == "5.00"


def test_none_passes_through():
    assert BALANCE.process_bind_param(None, sqlite.dialect()) is None
    assert BALANCE.process_result_value(None, sqlite.dialect()) is None


def test_result_text_becomes_decimal():
    value = BALANCE.process_result_value("0.10", sqlite.dialect())

    assert value == Decimal("0.10")
    assert str(value) == "0.10"
