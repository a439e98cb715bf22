"""
Tests for the command-line interface.
"""
import io
import os
import sys
import unittest
from unittest import mock
from contextlib import redirect_stdout, redirect_stderr

# Add parent directory to path
sys.path.insert(0, os.path.abspath(
    os.path.join(os.path.dirname(__file__), '..')))

import cli
from seed_provider.provider.seed_provider import ZooKeeperSeedProvider
from tests.test_seed_provider import FakeConnection, FakeConnectionFactory


class TestCli(unittest.TestCase):
    """Test cases for cli.main."""

    def setUp(self):
        self.connection = FakeConnection()
        factory = FakeConnectionFactory(self.connection)
        patcher = mock.patch(
            'cli.ZooKeeperSeedProvider',
            side_effect=lambda params: ZooKeeperSeedProvider(params, connection_factory=factory)
        )
        self.provider_class = patcher.start()
        self.addCleanup(patcher.stop)

    def test_01_seeds(self):
        self.connection.data = b"10.0.0.1,10.0.0.2"
        out = io.StringIO()

        with redirect_stdout(out):
            code = cli.main(['seeds', '--zookeeper-servers', 'zk:2181',
                             '--seeds-path', '/cassandra/seeds'])

        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue().split(), ["10.0.0.1", "10.0.0.2"])
        self.assertTrue(self.connection.closed)

    def test_02_seeds_none_available(self):
        out = io.StringIO()

        with redirect_stdout(out):
            cli.main(['seeds', '--zookeeper-servers', 'zk:2181',
                      '--seeds-path', '/cassandra/seeds'])

        self.assertIn("No seeds available", out.getvalue())

    def test_03_configuration_error(self):
        err = io.StringIO()

        with redirect_stderr(err):
            code = cli.main(['seeds', '--zookeeper-servers', 'zk:2181'])

        self.assertEqual(code, 1)
        self.assertIn("zookeeper_seeds_path", err.getvalue())

    def test_04_invalid_timeout(self):
        err = io.StringIO()

        with redirect_stderr(err):
            code = cli.main(['seeds', '--zookeeper-servers', 'zk:2181',
                             '--seeds-path', '/s', '--session-timeout-ms', '-1'])

        self.assertEqual(code, 1)
        self.assertIn("session_timeout_ms", err.getvalue())

    def test_05_watch_polls(self):
        self.connection.data = b"10.0.0.1"
        out = io.StringIO()

        with redirect_stdout(out):
            code = cli.main(['watch', '--zookeeper-servers', 'zk:2181',
                             '--seeds-path', '/s', '--interval', '0', '--count', '3'])

        self.assertEqual(code, 0)
        self.assertEqual(len(self.connection.reads), 3)
        self.assertEqual(out.getvalue().count("10.0.0.1"), 3)

    def test_06_no_command(self):
        with redirect_stdout(io.StringIO()):
            self.assertEqual(cli.main([]), 1)


if __name__ == '__main__':
    unittest.main()
