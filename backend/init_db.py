"""
Create the database schema.

Run directly to initialize the database named by PACKANDGO_DATABASE_URL:

    python init_db.py
"""
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
import logging

from config.settings import LOG_LEVEL
from database import engine, init_db
from utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def init_database(target_engine: Engine = engine) -> list[str]:
    """
    Create any missing tables.

    Returns:
        Names of the tables present afterwards
    """
    init_db(target_engine)
    tables = sorted(inspect(target_engine).get_table_names())
    logger.info(f"Database ready: {', '.join(tables)}")
    return tables


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    init_database()
