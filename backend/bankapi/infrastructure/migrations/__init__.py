"""Alembic Migrations — programmatic config for the bank_account schema.

Invariants:
    - No alembic.ini: script_location is this package, the URL is passed in
    - upgrade()/downgrade() are synchronous and run their own event loop
      (env.py), so they must not be called from inside a running loop

Design Decisions:
    - Migrations ship inside the package: `bank-accounts-migrate` works from
      an installed wheel, not only from a source checkout
"""

from pathlib import Path

from alembic import command
from alembic.config import Config

from bankapi.config import get_settings


def build_config(database_url: str) -> Config:
    """Build an Alembic Config pointing at the bundled migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).parent))
    # ConfigParser interpolation: '%' in passwords must be doubled
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def upgrade(database_url: str, revision: str = "head") -> None:
    command.upgrade(build_config(database_url), revision)


def downgrade(database_url: str, revision: str = "base") -> None:
    command.downgrade(build_config(database_url), revision)


def main() -> None:
    """Console script: migrate the configured database to head."""
    upgrade(get_settings().database_url)
