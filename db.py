import logging
from contextlib import contextmanager

import psycopg2
from psycopg2.extras import RealDictCursor

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    pass


def database_settings(config) -> tuple[str, str | None]:
    """Return ``(url, sslmode)`` from an app config mapping."""
    url = config.get("DATABASE_URL")
    if not url:
        raise ConfigurationError("Database connection string is missing")
    return url, config.get("DB_SSLMODE")


@contextmanager
def open_connection(url: str, sslmode: str | None = None):
    """One connection per caller, always closed on exit. No pooling."""
    kwargs = dict(cursor_factory=RealDictCursor)
    if sslmode:
        kwargs["sslmode"] = sslmode

    logger.info("Connecting to database...")
    conn = psycopg2.connect(url, **kwargs)
    logger.info("Connected to database successfully")
    try:
        yield conn
    finally:
        conn.close()
