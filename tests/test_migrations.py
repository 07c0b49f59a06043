"""
Migration tests - the Alembic chain builds the same schema the models describe.
"""

from argparse import Namespace
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parent.parent


def _alembic_config(db_url: str) -> Config:
    config = Config(cmd_opts=Namespace(x=[f"db_url={db_url}"]))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    return config


def test_upgrade_and_downgrade(tmp_path):
    db_url = f"sqlite+aiosqlite:///{tmp_path / 'migrate.db'}"
    config = _alembic_config(db_url)

    command.upgrade(config, "head")

    engine = create_engine(f"sqlite:///{tmp_path / 'migrate.db'}")
    try:
        inspector = inspect(engine)
        assert {"users", "weapons", "trophies", "user_preferences", "room_ratings"} <= set(
            inspector.get_table_names()
        )
        uniques = {u["name"] for u in inspector.get_unique_constraints("room_ratings")}
        assert "uq_room_ratings_owner_rater" in uniques
        trophy_fks = {
            fk["referred_table"]: fk["options"].get("ondelete") for fk in inspector.get_foreign_keys("trophies")
        }
        assert trophy_fks["weapons"] == "SET NULL"

        command.downgrade(config, "base")
        assert "room_ratings" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
