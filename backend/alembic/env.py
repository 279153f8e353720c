"""
Alembic Migration Environment
===============================

What:  Applies the persons table migrations to the contact database.
How:   The URL comes from phonebook settings unless overridden on the
       command line; online runs go through an async engine.
Who:   `alembic upgrade head` from the backend/ directory, or
       `alembic -x db_url=sqlite+aiosqlite:///./other.db upgrade head`
       to target another database without touching the environment.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from phonebook.config import settings
from phonebook.database import Base
from phonebook.models.person import Person

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _database_url() -> str:
    """
    Resolve the migration target.

    `-x db_url=...` wins over DATABASE_URL. Running with STORE_BACKEND=memory
    and no override is refused, since there is no database to migrate.
    """
    override = context.get_x_argument(as_dictionary=True).get("db_url")
    if override:
        return override
    if settings.store_backend == "memory":
        raise RuntimeError(
            "STORE_BACKEND=memory has no database; pass -x db_url=... to migrate one"
        )
    return settings.database_url


def _include_object(obj, name, type_, reflected, compare_to) -> bool:
    # Autogenerate only manages the contact table and its indexes
    if type_ == "table":
        return name == Person.__tablename__
    return True


config.set_main_option("sqlalchemy.url", _database_url())

_configure_opts = dict(
    target_metadata=target_metadata,
    include_object=_include_object,
    compare_type=True,
)


def run_migrations_offline() -> None:
    """Print the migration SQL instead of executing it (`alembic upgrade head --sql`)."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_opts,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    # SQLite cannot ALTER most constraints in place; batch mode recreates the table
    context.configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
        **_configure_opts,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        async with connectable.connect() as connection:
            await connection.run_sync(do_run_migrations)
    finally:
        await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
