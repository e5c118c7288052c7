"""
Migration environment for the catalog schema.

The database URL always comes from app.config (DATABASE_URL / .env), never from
alembic.ini. `alembic upgrade head` is the production path; app.seed's
create_all is only a local shortcut.
"""
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

from app.config import settings
from app.database import Base

import app.models  # noqa: F401  registers every table on Base.metadata

config = context.config
# configparser treats "%" as interpolation, so escape it for URL-encoded passwords
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMMON_OPTIONS = {
    "target_metadata": Base.metadata,
    "compare_type":    True,
    # SQLite can only change constraints by copying the table
    "render_as_batch": settings.DATABASE_URL.startswith("sqlite"),
}


def run_offline() -> None:
    """Print the SQL instead of executing it (`alembic upgrade head --sql`)."""
    context.configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMMON_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **COMMON_OPTIONS)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
