"""Unit tests for the database gateway."""
import os
import tempfile
import unittest
from sqlalchemy import create_engine
from eventapi.config import DatabaseConfig
from eventapi.db import Database, build_url
from eventapi.errors import ConfigError, DatabaseUnavailable
from support import memory_database


class TestBuildUrl(unittest.TestCase):
    """Test translation of config values into connection URLs."""

    def test_tcp_url_uses_host_and_port(self) -> None:
        url = build_url(DatabaseConfig(
            hostname="db.internal", port=3307, database="incidents",
            username="reader", password="p@ss:word",
        ))

        self.assertEqual(url.drivername, "mysql+pymysql")
        self.assertEqual(url.host, "db.internal")
        self.assertEqual(url.port, 3307)
        self.assertEqual(url.database, "incidents")
        self.assertEqual(url.username, "reader")
        self.assertEqual(url.password, "p@ss:word")

    def test_unix_url_passes_socket_path(self) -> None:
        url = build_url(DatabaseConfig(
            hostname="/run/mysqld/mysqld.sock", protocol="unix", database="incidents",
        ))

        self.assertIsNone(url.host)
        self.assertEqual(url.query["unix_socket"], "/run/mysqld/mysqld.sock")

    def test_tcp4_and_tcp6_behave_like_tcp(self) -> None:
        for protocol in ("tcp4", "tcp6"):
            url = build_url(DatabaseConfig(hostname="::1", port=3307, protocol=protocol))
            self.assertEqual(url.host, "::1", protocol)
            self.assertEqual(url.port, 3307, protocol)
            self.assertNotIn("unix_socket", url.query, protocol)

    def test_unknown_protocol_is_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            build_url(DatabaseConfig(protocol="udp"))


class TestDatabase(unittest.TestCase):
    """Test open, ping and close."""

    def test_open_does_not_connect(self) -> None:
        """Placeholder credentials still open; only ping talks to the server."""
        database = Database.open(DatabaseConfig())
        try:
            assert database.engine is not None
            self.assertEqual(database.engine.url.host, "127.0.0.1")
            self.assertEqual(database.engine.url.port, 3306)
        finally:
            database.close()

    def test_ping_succeeds_on_reachable_database(self) -> None:
        database = memory_database()

        database.ping()

        database.close()

    def test_ping_failure_raises_unavailable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "no", "such", "dir", "events.db")
            database = Database(create_engine(f"sqlite:///{missing}"))

            with self.assertRaises(DatabaseUnavailable):
                database.ping()
            database.close()

    def test_close_is_idempotent(self) -> None:
        database = memory_database()

        database.close()
        database.close()

        self.assertIsNone(database.engine)
        with self.assertRaises(DatabaseUnavailable):
            database.ping()


if __name__ == "__main__":
    unittest.main()
