"""
Configuration settings for the ZooKeeper seed provider.
"""

# Seed provider parameter keys
ZOOKEEPERS_KEY = "zookeeper_server_addresses"
SEEDS_PATH_KEY = "zookeeper_seeds_path"
SESSION_TIMEOUT_KEY = "session_timeout_ms"
CONNECTION_TIMEOUT_KEY = "connection_timeout_ms"
OPERATION_TIMEOUT_KEY = "operation_retry_timeout_ms"

# Defaults applied when an optional key is absent or malformed
DEFAULT_SESSION_TIMEOUT_MS = 10000
DEFAULT_CONNECTION_TIMEOUT_MS = 10000
DEFAULT_OPERATION_TIMEOUT_MS = -1  # Negative means retry forever

# Retry settings
RETRY_FOREVER_INTERVAL_MS = 250  # Fixed interval used when retrying forever
OPERATION_RETRY_DIVISOR = 4  # Base interval = operation timeout / divisor

# Seed service settings
SEED_SERVICE_HOST = "localhost"
SEED_SERVICE_PORT = 5300

# Client settings
CLIENT_TIMEOUT = 5.0  # seconds
DEFAULT_POLL_INTERVAL = 30.0  # seconds between polls in watch mode
