"""Database connection management."""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from ..config import DatabaseConfig
from ..errors import ConfigError, DatabaseUnavailable

logger = logging.getLogger(__name__)

DRIVER_NAME = "mysql"
DIALECT = f"{DRIVER_NAME}+pymysql"
TCP_PROTOCOLS = ("tcp", "tcp4", "tcp6")


def build_url(config: DatabaseConfig) -> URL:
    """Translate the ini settings into an SQLAlchemy URL."""
    if config.protocol in TCP_PROTOCOLS:
        return URL.create(
            DIALECT,
            username=config.username,
            password=config.password,
            host=config.hostname,
            port=config.port,
            database=config.database,
        )
    if config.protocol == "unix":
        # hostname holds the socket path
        return URL.create(
            DIALECT,
            username=config.username,
            password=config.password,
            database=config.database,
            query={"unix_socket": config.hostname},
        )
    raise ConfigError(f"Unsupported protocol: {config.protocol!r}")


class Database:
    """
    Owns the pooled engine shared by every request.

    The engine is created once at startup and disposed once on shutdown.
    Connections are checked out per query.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine: Optional[Engine] = engine

    @classmethod
    def open(cls, config: DatabaseConfig) -> "Database":
        """Create the engine. Does not contact the server."""
        url = build_url(config)
        logger.info("Opening %s pool for %s", DRIVER_NAME,
                    url.render_as_string(hide_password=True))
        return cls(create_engine(url))

    def ping(self) -> None:
        """Round-trip a trivial query, raising DatabaseUnavailable on failure."""
        try:
            with self.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise DatabaseUnavailable(str(e)) from e

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Context manager handing out a pooled connection."""
        if self.engine is None:
            raise DatabaseUnavailable("Database is closed")
        with self.engine.connect() as conn:
            yield conn

    def close(self) -> None:
        """Dispose the pool. Further calls are no-ops."""
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        logger.info("Database pool closed")
