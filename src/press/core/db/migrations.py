"""Alembic upgrade entry point for deploy scripts and the test suite."""

from pathlib import Path

from alembic.config import Config

from alembic import command

PROJECT_ROOT = Path(__file__).resolve().parents[4]


def run_migrations_sync(revision: str = "head") -> None:
    """Upgrade the configured database to ``revision``.

    Paths resolve against the project root, so this works from any
    working directory.
    """
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "src" / "alembic"))
    command.upgrade(alembic_cfg, revision)
