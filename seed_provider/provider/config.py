"""
Configuration model for the ZooKeeper seed provider.
"""
from typing import Mapping, Any
from dataclasses import dataclass
from seed_provider.common.utils import get_logger
from seed_provider.common.models import ParsedValue, ValueStatus
from seed_provider.common.exceptions import MissingParameter, InvalidParameter
from seed_provider.common.config import (
    ZOOKEEPERS_KEY,
    SEEDS_PATH_KEY,
    SESSION_TIMEOUT_KEY,
    CONNECTION_TIMEOUT_KEY,
    OPERATION_TIMEOUT_KEY,
    DEFAULT_SESSION_TIMEOUT_MS,
    DEFAULT_CONNECTION_TIMEOUT_MS,
    DEFAULT_OPERATION_TIMEOUT_MS
)

logger = get_logger(__name__)

POSITIVE_INTEGER = "must be a strictly positive integer"


def _required_string(key: str, parameters: Mapping[str, Any]) -> str:
    value = parameters.get(key)
    if value is None or not str(value).strip():
        raise MissingParameter(key)
    return str(value).strip()


def _optional_integer(key: str, parameters: Mapping[str, Any]) -> ParsedValue:
    """
    Parse an optional integer parameter.

    Args:
        key: Parameter key
        parameters: Parameters to read from

    Returns:
        ParsedValue tagged ABSENT, MALFORMED or PRESENT
    """
    value = parameters.get(key)
    if value is None:
        return ParsedValue.absent()

    raw = str(value).strip()
    try:
        return ParsedValue.present(int(raw), raw)
    except ValueError:
        logger.error(f"Failed to parse {key}: {raw!r} is not a valid integer")
        return ParsedValue.malformed(raw)


def _positive_or_default(key: str, parsed: ParsedValue, default: int) -> int:
    if parsed.is_present:
        if parsed.value <= 0:
            raise InvalidParameter(key, POSITIVE_INTEGER, parsed.raw)
        return parsed.value

    if parsed.status is ValueStatus.ABSENT:
        logger.info(f"{key} not configured defaulting to {default} ms")
    else:
        logger.info(f"{key} is malformed defaulting to {default} ms")
    return default


@dataclass(frozen=True)
class SeedProviderConfig:
    """
    Immutable, validated configuration for a ZooKeeperSeedProvider.

    Attributes:
        zk_servers: Comma separated host:port pairs of the ZooKeeper ensemble
        seeds_path: Fully qualified path of the znode holding the seeds
        session_timeout_ms: ZooKeeper session timeout
        connection_timeout_ms: Time to wait for a connection before failing
        operation_timeout_ms: Time to retry an operation; negative retries forever
    """
    zk_servers: str
    seeds_path: str
    session_timeout_ms: int = DEFAULT_SESSION_TIMEOUT_MS
    connection_timeout_ms: int = DEFAULT_CONNECTION_TIMEOUT_MS
    operation_timeout_ms: int = DEFAULT_OPERATION_TIMEOUT_MS

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any]) -> "SeedProviderConfig":
        """
        Create a configuration from seed provider parameters.

        Args:
            parameters: Flat map of parameter names to string values. It must
                contain zookeeper_server_addresses and zookeeper_seeds_path.
                It may contain session_timeout_ms and connection_timeout_ms,
                strictly positive integers, and operation_retry_timeout_ms,
                an integer of any sign.

        Returns:
            A validated SeedProviderConfig

        Raises:
            MissingParameter: If a required parameter is absent
            InvalidParameter: If a supplied timeout is not strictly positive
        """
        try:
            zk_servers = _required_string(ZOOKEEPERS_KEY, parameters)
        except MissingParameter:
            logger.error(
                f"{ZOOKEEPERS_KEY} must be set to a comma separated list of "
                f"ZooKeeper servers"
            )
            raise

        try:
            seeds_path = _required_string(SEEDS_PATH_KEY, parameters)
        except MissingParameter:
            logger.error(f"{SEEDS_PATH_KEY} must be set to a ZNode path")
            raise

        session_timeout = _positive_or_default(
            SESSION_TIMEOUT_KEY,
            _optional_integer(SESSION_TIMEOUT_KEY, parameters),
            DEFAULT_SESSION_TIMEOUT_MS
        )
        connection_timeout = _positive_or_default(
            CONNECTION_TIMEOUT_KEY,
            _optional_integer(CONNECTION_TIMEOUT_KEY, parameters),
            DEFAULT_CONNECTION_TIMEOUT_MS
        )

        operation = _optional_integer(OPERATION_TIMEOUT_KEY, parameters)
        if not operation.is_present:
            logger.info(
                f"{OPERATION_TIMEOUT_KEY} not configured defaulting to "
                f"{DEFAULT_OPERATION_TIMEOUT_MS} ms"
            )

        return cls(
            zk_servers=zk_servers,
            seeds_path=seeds_path,
            session_timeout_ms=session_timeout,
            connection_timeout_ms=connection_timeout,
            operation_timeout_ms=operation.or_default(DEFAULT_OPERATION_TIMEOUT_MS)
        )

    @property
    def retries_forever(self) -> bool:
        """True when reads retry until ZooKeeper answers."""
        return self.operation_timeout_ms <= 0
