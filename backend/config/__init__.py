from .settings import DATABASE_URL, SQL_ECHO, LOG_LEVEL

__all__ = ["DATABASE_URL", "SQL_ECHO", "LOG_LEVEL"]
