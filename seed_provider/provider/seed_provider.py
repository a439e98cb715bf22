"""
Seed provider that reads the cluster seed nodes from a ZooKeeper znode.

The znode holds a comma separated list of hostnames or IP addresses:

    zookeeper_server_addresses: "zk1:2181,zk2:2181,zk3:2181"
    zookeeper_seeds_path: "/cassandra/seeds"
    session_timeout_ms: 10000
    connection_timeout_ms: 10000
    operation_retry_timeout_ms: -1

Both ZooKeeper keys are mandatory. Timeouts are optional. With the default
operation_retry_timeout_ms of -1 reads retry forever, so get_seeds() blocks
for as long as the ensemble is unreachable. That is the most robust setting
for a joining node but gives the caller no bound; set a positive value to
have reads give up and fall back to the cached seeds.
"""
import socket
import ipaddress
import threading
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union
from seed_provider.common.utils import get_logger
from seed_provider.common.models import RetryPolicy
from seed_provider.common.exceptions import ConfigurationError
from seed_provider.provider.config import SeedProviderConfig
from seed_provider.provider.zookeeper import connect_zookeeper

logger = get_logger(__name__)

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def resolve_address(host: str) -> Address:
    """
    Resolve a hostname or IP literal to an IP address.

    IPv4 results are preferred, so a dual-stack name such as localhost
    resolves to 127.0.0.1 rather than ::1. Otherwise the resolver's first
    result is used.

    Raises:
        OSError: If the name cannot be resolved
        ValueError: If the resolver returns something that is not an address
    """
    infos = socket.getaddrinfo(host, None)
    if not infos:
        raise OSError(f"no addresses for {host}")
    ipv4 = [info for info in infos if info[0] == socket.AF_INET]
    sockaddr = (ipv4 or infos)[0][4]
    return ipaddress.ip_address(sockaddr[0].split('%', 1)[0])


def as_string(data: Optional[bytes]) -> str:
    """Decode znode data, treating missing data as empty."""
    if data is None:
        return ""
    return data.decode('utf-8', errors='replace')


def parse_addresses(text: str) -> List[Address]:
    """
    Parse a comma separated seed list into resolved addresses.

    Tokens that fail to resolve are logged and skipped; the order of the
    remaining tokens is kept.

    Args:
        text: Comma separated hostnames or IP addresses

    Returns:
        List of resolved addresses
    """
    if not text:
        return []

    addresses = []
    for token in text.split(','):
        host = token.strip()
        if not host:
            continue
        try:
            addresses.append(resolve_address(host))
        except (OSError, UnicodeError, ValueError) as e:
            logger.error(f"Failed to resolve seed {host}: {e}")
    return addresses


def _join(addresses) -> str:
    return ','.join(str(address) for address in addresses)


class ZooKeeperSeedProvider:
    """
    Provides cluster seed nodes read from a ZooKeeper znode.

    The last non-empty seed list read from ZooKeeper is cached. When a read
    fails or yields no usable seeds the cached list is returned instead, so
    a node keeps a seed list for as long as it ever had one.
    """

    def __init__(
        self,
        parameters: Union[SeedProviderConfig, Mapping[str, Any]],
        connection_factory: Callable = connect_zookeeper
    ):
        """
        Initialize the seed provider and start its ZooKeeper connection.

        Args:
            parameters: A validated SeedProviderConfig, or the raw seed
                provider parameters to parse into one
            connection_factory: Callable taking (servers, session_timeout_ms,
                connection_timeout_ms, retry_policy) and returning a
                connection with read_bytes(path) and close()

        Raises:
            ConfigurationError: If the parameters are invalid or the
                ZooKeeper client cannot be created. This is meant to stop
                the host from starting.
        """
        try:
            if isinstance(parameters, SeedProviderConfig):
                self.config = parameters
            else:
                self.config = SeedProviderConfig.from_parameters(parameters)

            self.retry_policy = RetryPolicy.for_operation_timeout(
                self.config.operation_timeout_ms
            )
            self._connection = connection_factory(
                self.config.zk_servers,
                self.config.session_timeout_ms,
                self.config.connection_timeout_ms,
                self.retry_policy
            )
        except Exception as e:
            logger.error(f"Invalid configuration: {e}")
            raise ConfigurationError("invalid configuration") from e

        self._lock = threading.Lock()
        self._cached: Tuple[Address, ...] = ()

        logger.info(
            f"Seed provider initialized for {self.config.seeds_path} "
            f"on {self.config.zk_servers}"
        )

    def _get_seeds_data(self) -> Optional[bytes]:
        try:
            return self._connection.read_bytes(self.config.seeds_path)
        except Exception as e:
            logger.error(f"Failed to retrieve seeds from ZooKeeper: {e!r}")
            return None

    def get_seeds(self) -> List[Address]:
        """
        Get the seed node addresses.

        Reads the seeds znode once. If that yields no usable address, the
        last seeds successfully read are returned. Never raises.

        Returns:
            List of seed addresses, empty if none were ever available
        """
        seeds = tuple(parse_addresses(as_string(self._get_seeds_data())))

        with self._lock:
            if seeds:
                self._cached = seeds
                logger.info(f"Retrieved seeds from ZooKeeper seeds = [{_join(seeds)}]")
                return list(seeds)

            cached = self._cached

        if cached:
            logger.warning(
                f"Failed to retrieve seeds from ZooKeeper returning cached "
                f"seeds seeds = [{_join(cached)}]"
            )
        else:
            logger.error("No seeds available from any source")
        return list(cached)

    def cached_seeds(self) -> List[Address]:
        """Return the cached seeds without contacting ZooKeeper."""
        with self._lock:
            return list(self._cached)

    def close(self) -> None:
        """Close the ZooKeeper connection."""
        self._connection.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
