"""
Tests for loading seed provider parameters from files.
"""
import os
import sys
import json
import shutil
import tempfile
import unittest

# Add parent directory to path
sys.path.insert(0, os.path.abspath(
    os.path.join(os.path.dirname(__file__), '..')))

from unittest import mock
from seed_provider.common.utils import (
    extract_seed_provider_parameters, load_parameters, merge_parameters,
    make_http_request
)
from seed_provider.provider.config import SeedProviderConfig

CASSANDRA_YAML = """
cluster_name: 'Test Cluster'
seed_provider:
  - class_name: seed_provider.provider.seed_provider.ZooKeeperSeedProvider
    parameters:
      - zookeeper_server_addresses: "zk1:2181,zk2:2181"
        zookeeper_seeds_path: "/cassandra/seeds"
        session_timeout_ms: 4000
        operation_retry_timeout_ms: -1
"""


class TestParameterFiles(unittest.TestCase):
    """Test cases for parameter file loading."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _write(self, name, content):
        path = os.path.join(self.temp_dir, name)
        with open(path, 'w') as f:
            f.write(content)
        return path

    def test_01_cassandra_yaml(self):
        params = load_parameters(self._write('cassandra.yaml', CASSANDRA_YAML))

        self.assertEqual(params, {
            "zookeeper_server_addresses": "zk1:2181,zk2:2181",
            "zookeeper_seeds_path": "/cassandra/seeds",
            "session_timeout_ms": "4000",
            "operation_retry_timeout_ms": "-1",
        })
        config = SeedProviderConfig.from_parameters(params)
        self.assertEqual(config.session_timeout_ms, 4000)

    def test_02_flat_yaml(self):
        path = self._write('seeds.yml', "zookeeper_server_addresses: zk:2181\n"
                                        "zookeeper_seeds_path: /seeds\n")
        self.assertEqual(load_parameters(path), {
            "zookeeper_server_addresses": "zk:2181",
            "zookeeper_seeds_path": "/seeds",
        })

    def test_03_json(self):
        path = self._write('seeds.json', json.dumps({
            "zookeeper_server_addresses": "zk:2181",
            "connection_timeout_ms": 3000,
        }))
        self.assertEqual(load_parameters(path), {
            "zookeeper_server_addresses": "zk:2181",
            "connection_timeout_ms": "3000",
        })

    def test_04_missing_file(self):
        self.assertEqual(load_parameters(os.path.join(self.temp_dir, 'nope.yaml')), {})

    def test_05_invalid_yaml(self):
        self.assertEqual(load_parameters(self._write('bad.yaml', "a: [unclosed\n")), {})

    def test_06_unexpected_documents(self):
        self.assertEqual(extract_seed_provider_parameters(["a", "b"]), {})
        self.assertEqual(extract_seed_provider_parameters({"seed_provider": []}), {})

    def test_07_merge_overrides_file(self):
        path = self._write('cassandra.yaml', CASSANDRA_YAML)

        params = merge_parameters(path, {
            "zookeeper_seeds_path": "/other/seeds",
            "connection_timeout_ms": None,
        })

        self.assertEqual(params["zookeeper_seeds_path"], "/other/seeds")
        self.assertNotIn("connection_timeout_ms", params)

    def test_08_merge_without_file(self):
        self.assertEqual(merge_parameters(None, {"session_timeout_ms": 10}),
                         {"session_timeout_ms": "10"})


class TestMakeHttpRequest(unittest.TestCase):
    """Test cases for the HTTP helper."""

    @mock.patch('seed_provider.common.utils.requests.get')
    def test_01_get(self, get):
        get.return_value.json.return_value = {"success": True}

        self.assertEqual(make_http_request('http://localhost:5300/seeds'), {"success": True})
        get.assert_called_once_with('http://localhost:5300/seeds', timeout=mock.ANY)

    @mock.patch('seed_provider.common.utils.requests.post')
    @mock.patch('seed_provider.common.utils.requests.get')
    def test_02_only_get_supported(self, get, post):
        with self.assertRaises(ValueError):
            make_http_request('http://localhost:5300/seeds', method="POST")
        get.assert_not_called()
        post.assert_not_called()


if __name__ == '__main__':
    unittest.main()
