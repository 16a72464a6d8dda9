"""Column Types — exact fixed-point storage across database backends.

Invariants:
    - ExactNumeric never passes values through float
    - Values are quantized to the column scale on write

Design Decisions:
    - SQLite stores the decimal as text: its NUMERIC affinity converts to a
      float and drops digits past ~15 significant. Every other backend gets
      plain NUMERIC(p, s)
"""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator


def _stores_as_text(dialect) -> bool:
    return dialect.name == "sqlite"


class ExactNumeric(TypeDecorator):
    """NUMERIC(precision, scale) that round-trips every digit."""
    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if _stores_as_text(dialect):
            # sign + digits + decimal point
            return dialect.type_descriptor(String(self.impl.precision + 2))
        return dialect.type_descriptor(
            Numeric(self.impl.precision, self.impl.scale),
        )

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        quantized = Decimal(value).quantize(Decimal(1).scaleb(-self.impl.scale))
        if _stores_as_text(dialect):
            return str(quantized)
        return quantized

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, Decimal):
            return value
        return Decimal(value)
