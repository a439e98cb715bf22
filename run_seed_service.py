#!/usr/bin/env python3
"""
Script to start the seed service.
"""
import sys
import argparse
from seed_provider.service.seed_service import SeedService
from seed_provider.provider.seed_provider import ZooKeeperSeedProvider
from seed_provider.common.exceptions import ConfigurationError
from seed_provider.common.config import (
    SEED_SERVICE_HOST, SEED_SERVICE_PORT, ZOOKEEPERS_KEY, SEEDS_PATH_KEY
)
from seed_provider.common.utils import merge_parameters


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Start the seed service')
    parser.add_argument('--host', default=SEED_SERVICE_HOST, help='Host to bind to')
    parser.add_argument('--port', type=int, default=SEED_SERVICE_PORT, help='Port to bind to')
    parser.add_argument('--config', help='YAML or JSON file with seed provider parameters')
    parser.add_argument('--zookeeper-servers', help='Comma separated host:port list of ZooKeeper servers')
    parser.add_argument('--seeds-path', help='ZNode path holding the seeds')

    args = parser.parse_args()

    parameters = merge_parameters(args.config, {
        ZOOKEEPERS_KEY: args.zookeeper_servers,
        SEEDS_PATH_KEY: args.seeds_path
    })

    # A misconfigured node must not start
    try:
        provider = ZooKeeperSeedProvider(parameters)
    except ConfigurationError as e:
        print(f"Failed to start seed service: {e.__cause__ or e}", file=sys.stderr)
        sys.exit(1)

    print(f"Starting seed service at {args.host}:{args.port}...")
    service = SeedService(provider, host=args.host, port=args.port)
    service.start()


if __name__ == "__main__":
    main()
