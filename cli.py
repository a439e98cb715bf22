#!/usr/bin/env python3
"""
Command-line interface for the ZooKeeper seed provider.
Provides commands for resolving seeds once, polling them, serving them over HTTP,
and querying a running seed service.
"""
import sys
import time
import argparse

from seed_provider.provider.seed_provider import ZooKeeperSeedProvider
from seed_provider.service.seed_service import SeedService
from seed_provider.client.seed_client import SeedClient
from seed_provider.common.exceptions import ConfigurationError
from seed_provider.common.config import (
    ZOOKEEPERS_KEY, SEEDS_PATH_KEY, SESSION_TIMEOUT_KEY,
    CONNECTION_TIMEOUT_KEY, OPERATION_TIMEOUT_KEY,
    SEED_SERVICE_HOST, SEED_SERVICE_PORT, DEFAULT_POLL_INTERVAL
)
from seed_provider.common.utils import get_logger, merge_parameters

logger = get_logger(__name__)


def build_provider(args) -> ZooKeeperSeedProvider:
    """Create a seed provider from a parameters file and command-line overrides."""
    parameters = merge_parameters(args.config, {
        ZOOKEEPERS_KEY: args.zookeeper_servers,
        SEEDS_PATH_KEY: args.seeds_path,
        SESSION_TIMEOUT_KEY: args.session_timeout_ms,
        CONNECTION_TIMEOUT_KEY: args.connection_timeout_ms,
        OPERATION_TIMEOUT_KEY: args.operation_timeout_ms
    })
    return ZooKeeperSeedProvider(parameters)


def print_seeds(seeds):
    """Print seeds one per line."""
    if not seeds:
        print("No seeds available")
        return
    for seed in seeds:
        print(seed)


def show_seeds(args):
    """Resolve the seeds once."""
    with build_provider(args) as provider:
        print_seeds(provider.get_seeds())


def watch_seeds(args):
    """Resolve the seeds periodically."""
    with build_provider(args) as provider:
        polls = 0
        while args.count is None or polls < args.count:
            if polls:
                time.sleep(args.interval)
            seeds = provider.get_seeds()
            print(f"[{time.strftime('%H:%M:%S')}] {', '.join(str(s) for s in seeds) or '-'}")
            polls += 1


def serve_seeds(args):
    """Start the seed service."""
    print(f"Starting seed service at {args.host}:{args.port}...")
    service = SeedService(build_provider(args), host=args.host, port=args.port)
    service.start()


def query_seeds(args):
    """Ask a running seed service for its seeds."""
    client = SeedClient(args.url)
    print_seeds(client.get_seeds())


def add_provider_arguments(parser):
    """Add the seed provider parameter options to a parser."""
    parser.add_argument('--config', help='YAML or JSON file with seed provider parameters')
    parser.add_argument('--zookeeper-servers', help='Comma separated host:port list of ZooKeeper servers')
    parser.add_argument('--seeds-path', help='ZNode path holding the seeds')
    parser.add_argument('--session-timeout-ms', help='ZooKeeper session timeout in ms')
    parser.add_argument('--connection-timeout-ms', help='ZooKeeper connection timeout in ms')
    parser.add_argument('--operation-timeout-ms',
                        help='Time to retry a read in ms; negative retries forever')


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description='ZooKeeper seed provider CLI')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Seeds command
    seeds_parser = subparsers.add_parser('seeds', help='Resolve the seeds once')
    add_provider_arguments(seeds_parser)
    seeds_parser.set_defaults(func=show_seeds)

    # Watch command
    watch_parser = subparsers.add_parser('watch', help='Resolve the seeds periodically')
    add_provider_arguments(watch_parser)
    watch_parser.add_argument('--interval', type=float, default=DEFAULT_POLL_INTERVAL,
                              help='Seconds between polls')
    watch_parser.add_argument('--count', type=int, help='Number of polls (forever if not set)')
    watch_parser.set_defaults(func=watch_seeds)

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Serve the seeds over HTTP')
    add_provider_arguments(serve_parser)
    serve_parser.add_argument('--host', default=SEED_SERVICE_HOST, help='Host to bind to')
    serve_parser.add_argument('--port', type=int, default=SEED_SERVICE_PORT, help='Port to bind to')
    serve_parser.set_defaults(func=serve_seeds)

    # Query command
    query_parser = subparsers.add_parser('query', help='Query a running seed service')
    query_parser.add_argument('--url', default=f'http://{SEED_SERVICE_HOST}:{SEED_SERVICE_PORT}',
                              help='Seed service URL')
    query_parser.set_defaults(func=query_seeds)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        args.func(args)
    except ConfigurationError as e:
        cause = e.__cause__ or e
        print(f"Configuration error: {cause}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
