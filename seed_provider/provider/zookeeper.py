"""
ZooKeeper connection used by the seed provider, built on kazoo.

The connection is opened once and reused for every read. Reads go through
the client's command retry, so with the retry-forever policy a read blocks
until the ensemble answers. Configure a positive operation_retry_timeout_ms
to bound it.
"""
import threading
from typing import Optional
from kazoo.client import KazooClient
from kazoo.exceptions import ConnectionLoss
from seed_provider.common.utils import get_logger
from seed_provider.common.models import RetryPolicy

logger = get_logger(__name__)


class ZooKeeperConnection:
    """
    A started kazoo client reading data from a single ensemble.
    """

    def __init__(self, client: KazooClient, connection_timeout_ms: int,
                 connected_event: Optional[threading.Event] = None):
        """
        Initialize the connection.

        Args:
            client: kazoo client, already started
            connection_timeout_ms: Time each attempt waits for a session
            connected_event: Event set once the first session is established
        """
        self._client = client
        self._connection_timeout = connection_timeout_ms / 1000.0
        self._connected_event = connected_event
        self._closed = False

    def _wait_connected(self) -> None:
        if self._client.connected:
            return

        event = self._connected_event
        if event is not None and not event.is_set():
            event.wait(self._connection_timeout)

        if not self._client.connected:
            raise ConnectionLoss(
                f"not connected to ZooKeeper after {self._connection_timeout}s"
            )

    def _get_data(self, path: str) -> Optional[bytes]:
        self._wait_connected()
        data, _ = self._client.get(path)
        return data

    def read_bytes(self, path: str) -> Optional[bytes]:
        """
        Read the data stored at a znode.

        Args:
            path: Fully qualified znode path

        Returns:
            The znode data, or None if the znode holds no data

        Raises:
            KazooException: If the read fails once the retry policy gives up,
                or the znode does not exist
        """
        return self._client.retry(self._get_data, path)

    def close(self) -> None:
        """Stop and close the underlying client."""
        if self._closed:
            return
        self._closed = True
        try:
            self._client.stop()
        finally:
            self._client.close()
        logger.info("ZooKeeper connection closed")


def connect_zookeeper(
    servers: str,
    session_timeout_ms: int,
    connection_timeout_ms: int,
    retry_policy: RetryPolicy
) -> ZooKeeperConnection:
    """
    Create and start a connection to a ZooKeeper ensemble.

    Starting does not block; the session is established in the background
    and reads wait for it.

    Args:
        servers: Comma separated host:port pairs
        session_timeout_ms: ZooKeeper session timeout
        connection_timeout_ms: Time each read attempt waits for a session
        retry_policy: Policy for retrying reads; reconnecting never gives up

    Returns:
        A started ZooKeeperConnection
    """
    client = KazooClient(
        hosts=servers,
        timeout=session_timeout_ms / 1000.0,
        connection_retry=retry_policy.to_kazoo_connection_retry(),
        command_retry=retry_policy.to_kazoo_retry()
    )
    connected_event = client.start_async()

    logger.info(
        f"Connecting to ZooKeeper at {servers} "
        f"(session timeout {session_timeout_ms} ms, retry {retry_policy.kind.value})"
    )
    return ZooKeeperConnection(client, connection_timeout_ms, connected_event)
