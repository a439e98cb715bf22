"""
Exceptions raised by the seed provider.
"""


class SeedProviderError(Exception):
    """Base class for seed provider errors."""


class MissingParameter(SeedProviderError):
    """A required configuration parameter was not supplied."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"missing required parameter {key}")


class InvalidParameter(SeedProviderError):
    """An optional configuration parameter was supplied with an invalid value."""

    def __init__(self, key: str, expected: str, actual: str):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"{key} {expected}, {actual} provided")


class ConfigurationError(SeedProviderError):
    """
    Raised when a seed provider cannot be constructed.

    Wraps parameter errors as well as failures to set up the ZooKeeper
    client. Hosts are expected to abort startup when they see it.
    """
