import os
import tempfile
import unittest

from MIP.api.dependencies import build_session_store
from packages.mip_core.config import MIPConfig
from packages.mip_core.errors import ConfigurationError
from packages.mip_session.infrastructure.json_file_repo import JsonFileSessionStore
from packages.mip_session.infrastructure.memory_repo import MemorySessionStore
from packages.mip_session.infrastructure.sql_repo import SqlSessionStore


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = MIPConfig(_env_file=None)
        self.assertEqual(config.SESSION_STORE_BACKEND, "memory")
        self.assertEqual(config.TOKEN_TTL_MINUTES, 60 * 24 * 7)

    def test_invalid_backend_is_configuration_error(self):
        previous = os.environ.get("SESSION_STORE_BACKEND")
        os.environ["SESSION_STORE_BACKEND"] = "mongo"
        try:
            with self.assertRaises(ConfigurationError):
                MIPConfig.load()
        finally:
            if previous is None:
                del os.environ["SESSION_STORE_BACKEND"]
            else:
                os.environ["SESSION_STORE_BACKEND"] = previous

    def test_backend_selection(self):
        self.assertIsInstance(build_session_store(MIPConfig(SESSION_STORE_BACKEND="memory")), MemorySessionStore)
        self.assertIsInstance(
            build_session_store(MIPConfig(SESSION_STORE_BACKEND="sql", DATABASE_URL="sqlite://")),
            SqlSessionStore,
        )
        with tempfile.TemporaryDirectory() as tmp:
            store = build_session_store(MIPConfig(
                SESSION_STORE_BACKEND="json",
                SESSION_STORE_PATH=os.path.join(tmp, "sessions.json"),
            ))
            self.assertIsInstance(store, JsonFileSessionStore)


if __name__ == "__main__":
    unittest.main()
