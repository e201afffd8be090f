import getpass
import logging
import os
import sys
import urllib.parse

from dotenv import load_dotenv
from sqlalchemy import create_engine, text

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))


def _mysql_url(user, password, host, port, dbname):
    pwd = urllib.parse.quote_plus(password) if password else ""
    port_part = f":{port}" if port else ""
    return f"mysql+pymysql://{user}:{pwd}@{host}{port_part}/{dbname}"


def get_engine(interactive=False):
    """Return a SQLAlchemy Engine for the catalog database.

    Resolution order:
      1. `DATABASE_URL`
      2. `DB_USER`, `DB_PASSWORD`, `DB_HOST`, `DB_PORT`, `DB_NAME` (MySQL)
      3. MySQL password prompt, only with `interactive=True` on a TTY
      4. Local SQLite file `data/catalog.db`

    The server never passes `interactive`; command-line tools may.
    """
    dotenv_path = os.path.join(PROJECT_ROOT, ".env")
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path)
    env = os.environ

    if env.get("DATABASE_URL"):
        return create_engine(env["DATABASE_URL"])

    if env.get("DB_USER") and env.get("DB_NAME") and env.get("DB_HOST"):
        return create_engine(
            _mysql_url(env["DB_USER"], env.get("DB_PASSWORD"), env["DB_HOST"], env.get("DB_PORT"), env["DB_NAME"])
        )

    if interactive and sys.stdin.isatty():
        raw_password = getpass.getpass("Enter MySQL password (leave empty to skip): ")
        if raw_password:
            return create_engine(
                _mysql_url(
                    env.get("DB_USER") or "root",
                    raw_password,
                    env.get("DB_HOST") or "127.0.0.1",
                    env.get("DB_PORT") or "3306",
                    env.get("DB_NAME") or "library_catalog",
                )
            )

    db_dir = os.path.join(PROJECT_ROOT, "data")
    os.makedirs(db_dir, exist_ok=True)
    db_path = os.path.join(db_dir, "catalog.db")
    logger.warning("No database configured, using local sqlite at %s", db_path)
    return create_engine(f"sqlite:///{db_path}")


def ensure_schema(engine):
    """Create the `authors` table if it does not exist yet."""
    if engine.dialect.name == "sqlite":
        id_column = "author_id INTEGER PRIMARY KEY AUTOINCREMENT"
    else:
        id_column = "author_id INT AUTO_INCREMENT PRIMARY KEY"
    ddl = text(
        f"""
        CREATE TABLE IF NOT EXISTS authors (
            {id_column},
            first_name VARCHAR(100) NOT NULL DEFAULT '',
            family_name VARCHAR(100) NOT NULL,
            date_of_birth DATE NULL,
            date_of_death DATE NULL
        )
        """
    )
    with engine.begin() as conn:
        conn.execute(ddl)
