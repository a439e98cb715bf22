"""
HTTP service exposing the seed provider to processes outside this one.
"""
from flask import Flask, jsonify
from seed_provider.common.utils import get_logger
from seed_provider.common.config import SEED_SERVICE_HOST, SEED_SERVICE_PORT
from seed_provider.provider.seed_provider import ZooKeeperSeedProvider

logger = get_logger(__name__)


class SeedService:
    """
    Serves the seeds of a ZooKeeperSeedProvider over HTTP.
    """

    def __init__(
        self,
        provider: ZooKeeperSeedProvider,
        host: str = SEED_SERVICE_HOST,
        port: int = SEED_SERVICE_PORT
    ):
        """
        Initialize the seed service.

        Args:
            provider: Seed provider to serve
            host: Host to bind to
            port: Port to bind to
        """
        self.provider = provider
        self.host = host
        self.port = port

        self.app = Flask(__name__)
        self._setup_routes()

        logger.info(f"Seed service initialized at {host}:{port}")

    def _setup_routes(self):
        """Set up Flask routes."""
        self.app.route('/seeds', methods=['GET'])(self.get_seeds)
        self.app.route('/status', methods=['GET'])(self.get_status)

    def start(self):
        """Start the seed service."""
        logger.info(f"Starting seed service at {self.host}:{self.port}")
        try:
            self.app.run(host=self.host, port=self.port)
        finally:
            self.stop()

    def stop(self):
        """Release the provider's ZooKeeper connection."""
        self.provider.close()

    # Route handlers

    def get_seeds(self):
        """Resolve and return the current seeds."""
        seeds = self.provider.get_seeds()
        return jsonify({"success": True, "seeds": [str(seed) for seed in seeds]})

    def get_status(self):
        """Return the provider configuration and cached seeds."""
        config = self.provider.config
        return jsonify({
            "success": True,
            "zookeeper_servers": config.zk_servers,
            "seeds_path": config.seeds_path,
            "retries_forever": config.retries_forever,
            "cached_seeds": [str(seed) for seed in self.provider.cached_seeds()]
        })
