# infra/migrate.py
from pathlib import Path
import logging
import sys
from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)


def _app_dir() -> Path:
    """
    Directory holding the ``migration`` folder.
    - Frozen builds: sys._MEIPASS, else the folder containing the executable.
    - In dev: the project root (infra -> project root).
    """
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def _alembic_config(db_url: str) -> Config:
    script_location = _app_dir() / "migration"
    if not script_location.exists():
        raise RuntimeError(f"Alembic script_location missing: {script_location}")

    # No alembic.ini: everything env.py needs is set here
    cfg = Config()
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg


def run_migrations(db_url: str) -> None:
    logger.info("Upgrading schema at %s", db_url)
    command.upgrade(_alembic_config(db_url), "head")
