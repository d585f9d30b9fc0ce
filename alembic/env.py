"""Alembic environment for the Outpace schema.

Migrations run against ``Settings().database_url`` unless overridden with
``alembic -x url=<database url> upgrade head``. Online runs go through
``outpace.db.database.build_engine`` so SQLite gets the same foreign key
pragma as the server.
"""

from logging.config import fileConfig

from alembic import context
from sqlmodel import SQLModel

from outpace.config import Settings
from outpace.db.database import build_engine, register_models

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

register_models()
target_metadata = SQLModel.metadata


def _settings() -> Settings:
    url = context.get_x_argument(as_dictionary=True).get("url")
    return Settings(database_url=url) if url else Settings()


def run_migrations_offline() -> None:
    """Emit SQL for the configured database without connecting to it."""
    context.configure(
        url=_settings().database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = build_engine(_settings())
    try:
        with engine.connect() as connection:
            # SQLite cannot ALTER most constraints in place
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                render_as_batch=connection.dialect.name == "sqlite",
                compare_type=True,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
