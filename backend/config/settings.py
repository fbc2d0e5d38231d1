"""
Runtime Settings

Reads process configuration from environment variables once at import time.

Variables:
- PACKANDGO_DATABASE_URL: SQLAlchemy URL (defaults to a sqlite file in ~/.packandgo)
- PACKANDGO_SQL_ECHO: Echo SQL statements ('true', '1', 'yes')
- PACKANDGO_LOG_LEVEL: Root log level name (defaults to INFO)
"""
import os
from pathlib import Path

DATA_DIR = Path.home() / ".packandgo"
DEFAULT_DATABASE_URL = f"sqlite:///{DATA_DIR / 'packandgo.db'}"


def env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).strip().lower() in ('true', '1', 'yes')


def get_database_url() -> str:
    """Database URL, falling back to the per-user sqlite file."""
    return os.environ.get('PACKANDGO_DATABASE_URL') or DEFAULT_DATABASE_URL


DATABASE_URL = get_database_url()
SQL_ECHO = env_flag('PACKANDGO_SQL_ECHO')
LOG_LEVEL = os.environ.get('PACKANDGO_LOG_LEVEL', 'INFO').upper()
