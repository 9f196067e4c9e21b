"""
Taskboard Test Suite — Configuration and CLI
=============================================

Usage:
    python -m pytest tests/test_config.py -v
"""
import sys
import os
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from taskboard.config import ServerConfig
from taskboard import cli


class TestServerConfig(unittest.TestCase):

    def test_defaults(self):
        config = ServerConfig()
        self.assertEqual(config.port, 3000)
        self.assertEqual(config.api_prefix, "/api")
        self.assertEqual(config.base_url, "http://localhost:3000")

    def test_from_env(self):
        config = ServerConfig.from_env({
            "TASKBOARD_HOST": "127.0.0.1",
            "TASKBOARD_PORT": "8080",
            "TASKBOARD_API_PREFIX": "/v2/",
            "TASKBOARD_LOG_LEVEL": "debug",
        })
        self.assertEqual(config.host, "127.0.0.1")
        self.assertEqual(config.port, 8080)
        self.assertEqual(config.api_prefix, "/v2")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.base_url, "http://127.0.0.1:8080")

    def test_from_env_empty(self):
        self.assertEqual(ServerConfig.from_env({}), ServerConfig())

    def test_invalid_port(self):
        with self.assertRaises(ValueError):
            ServerConfig.from_env({"TASKBOARD_PORT": "http"})
        with self.assertRaises(ValueError):
            ServerConfig(port=70000)

    def test_invalid_prefix(self):
        with self.assertRaises(ValueError):
            ServerConfig(api_prefix="api")

    def test_log_level_aliases(self):
        self.assertEqual(ServerConfig(log_level="warn").log_level, "WARNING")
        self.assertEqual(ServerConfig(log_level="Fatal").log_level, "CRITICAL")
        config = ServerConfig.from_env({"TASKBOARD_LOG_LEVEL": "WARN"})
        self.assertEqual(config.log_level.lower(), "warning")

    def test_invalid_log_level(self):
        for level in ("loud", "trace", ""):
            with self.subTest(level=level):
                with self.assertRaises(ValueError):
                    ServerConfig(log_level=level)

    def test_root_prefix(self):
        self.assertEqual(ServerConfig(api_prefix="/").api_prefix, "")

    def test_overrides_skip_none(self):
        base = ServerConfig(port=4000)
        config = base.with_overrides(port=None, host="127.0.0.1")
        self.assertEqual(config.port, 4000)
        self.assertEqual(config.host, "127.0.0.1")
        self.assertEqual(base.host, "0.0.0.0")


class TestCli(unittest.TestCase):

    def test_flags_override_env(self):
        args = cli.build_parser().parse_args(["serve", "--port", "9000"])
        with patch.dict(os.environ, {"TASKBOARD_PORT": "8000", "TASKBOARD_HOST": "10.0.0.1"}):
            config = cli.build_config(args)
        self.assertEqual(config.port, 9000)
        self.assertEqual(config.host, "10.0.0.1")

    def test_serve_runs_server(self):
        with patch("taskboard.server.run_server") as run:
            code = cli.main(["serve", "--prefix", "/v1"])
        self.assertEqual(code, 0)
        self.assertEqual(run.call_args[0][0].api_prefix, "/v1")

    def test_bad_prefix_exits_nonzero(self):
        self.assertEqual(cli.main(["config", "--prefix", "nope"]), 1)

    def test_bad_log_level_exits_nonzero(self):
        with patch("taskboard.server.run_server") as run:
            code = cli.main(["serve", "--log-level", "verbose"])
        self.assertEqual(code, 1)
        run.assert_not_called()

    def test_no_command_prints_help(self):
        self.assertEqual(cli.main([]), 0)


if __name__ == "__main__":
    unittest.main()
