"""
Migration environment for the todo API schema.

The database URL always comes from app settings (DATABASE_URL / .env), never
from alembic.ini. SQLite runs in batch mode since it cannot ALTER most columns.
"""
from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from alembic import context

from app.config import settings
from app.db.session import Base
from app.db import models  # noqa: F401  registers users, user_tokens and todos

config = context.config

if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = settings.DATABASE_URL


def _configure_options() -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": database_url.startswith("sqlite"),
    }


def run_migrations_offline():
    """Emit SQL to stdout without a live connection."""
    context.configure(url=database_url, literal_binds=True, **_configure_options())
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_options())
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
