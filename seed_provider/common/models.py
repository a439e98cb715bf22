"""
Data models for the seed provider.
"""
from enum import Enum
from typing import Optional
from dataclasses import dataclass
from kazoo.retry import KazooRetry
from seed_provider.common.config import (
    RETRY_FOREVER_INTERVAL_MS,
    OPERATION_RETRY_DIVISOR
)


class ValueStatus(Enum):
    """Outcome of reading an optional parameter."""
    ABSENT = "ABSENT"        # Key not supplied
    MALFORMED = "MALFORMED"  # Supplied but not an integer
    PRESENT = "PRESENT"      # Supplied and parsed


@dataclass(frozen=True)
class ParsedValue:
    """Tagged result of parsing an optional integer parameter."""
    status: ValueStatus
    value: Optional[int] = None
    raw: Optional[str] = None

    @classmethod
    def absent(cls) -> "ParsedValue":
        return cls(ValueStatus.ABSENT)

    @classmethod
    def malformed(cls, raw: str) -> "ParsedValue":
        return cls(ValueStatus.MALFORMED, raw=raw)

    @classmethod
    def present(cls, value: int, raw: str) -> "ParsedValue":
        return cls(ValueStatus.PRESENT, value=value, raw=raw)

    @property
    def is_present(self) -> bool:
        return self.status is ValueStatus.PRESENT

    def or_default(self, default: int) -> int:
        """Return the parsed value, or default when absent or malformed."""
        return self.value if self.is_present else default


class RetryKind(Enum):
    """Retry strategy used for ZooKeeper operations."""
    UNTIL_ELAPSED = "UNTIL_ELAPSED"  # Bounded by total elapsed time
    FOREVER = "FOREVER"              # Never gives up


@dataclass(frozen=True)
class RetryPolicy:
    """Retry policy applied to the ZooKeeper connection and its reads."""
    kind: RetryKind
    interval_ms: int
    max_elapsed_ms: Optional[int] = None

    @classmethod
    def for_operation_timeout(cls, operation_timeout_ms: int) -> "RetryPolicy":
        """
        Derive the retry policy from the operation retry timeout.

        A strictly positive timeout bounds the total time spent retrying and
        retries every quarter of it. Anything else retries forever every
        250 ms, which means a read blocks until ZooKeeper answers.

        Args:
            operation_timeout_ms: Configured operation retry timeout in ms

        Returns:
            The matching RetryPolicy
        """
        if operation_timeout_ms > 0:
            return cls(
                kind=RetryKind.UNTIL_ELAPSED,
                interval_ms=operation_timeout_ms // OPERATION_RETRY_DIVISOR,
                max_elapsed_ms=operation_timeout_ms
            )
        return cls(kind=RetryKind.FOREVER, interval_ms=RETRY_FOREVER_INTERVAL_MS)

    @property
    def retries_forever(self) -> bool:
        return self.kind is RetryKind.FOREVER

    def to_kazoo_retry(self) -> KazooRetry:
        """
        Build a kazoo retry object implementing this policy.

        Returns:
            A KazooRetry with a fixed interval and, when bounded, a deadline
        """
        interval = self.interval_ms / 1000.0
        deadline = None
        if self.max_elapsed_ms is not None:
            deadline = self.max_elapsed_ms / 1000.0

        return KazooRetry(
            max_tries=-1,
            delay=interval,
            backoff=1,
            max_jitter=0,
            max_delay=interval,
            deadline=deadline
        )

    def to_kazoo_connection_retry(self) -> KazooRetry:
        """
        Build the kazoo retry used for (re)connecting to the ensemble.

        Only operations are bounded by the policy. Reconnecting never gives
        up, otherwise kazoo stops its connection loop for good once the
        deadline passes and later reads could not succeed again.

        Returns:
            An unbounded KazooRetry at this policy's interval, or the
            retry-forever interval when that is zero
        """
        interval = (self.interval_ms or RETRY_FOREVER_INTERVAL_MS) / 1000.0
        return KazooRetry(
            max_tries=-1,
            delay=interval,
            backoff=1,
            max_jitter=0,
            max_delay=interval
        )
