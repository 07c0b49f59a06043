"""
Alembic environment for the TrophyVault schema.
Migrations run on a sync driver; the app's asyncpg URL is mapped to psycopg2.
Override the target with `alembic -x db_url=... upgrade head`.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import make_url

from app.config import get_settings
from app.db import models  # noqa: F401 - users, weapons, trophies, user_preferences, room_ratings
from app.db.base import Base

SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def migration_url() -> str:
    """`-x db_url` wins over DATABASE_URL; async drivers are swapped for their sync counterparts."""
    url = make_url(context.get_x_argument(as_dictionary=True).get("db_url") or get_settings().database_url)
    driver = SYNC_DRIVERS.get(url.drivername)
    if driver:
        url = url.set(drivername=driver)
    return url.render_as_string(hide_password=False)


def configure_context(**kwargs) -> None:
    url = make_url(config.get_main_option("sqlalchemy.url"))
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER constraints in place
        render_as_batch=url.get_backend_name() == "sqlite",
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit SQL for the five tables without connecting."""
    configure_context(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        if connection.dialect.name == "sqlite":
            # ON DELETE CASCADE / SET NULL on weapons and trophies
            connection.exec_driver_sql("PRAGMA foreign_keys=ON")
        configure_context(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


config.set_main_option("sqlalchemy.url", migration_url().replace("%", "%%"))

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
