"""
Client for the HTTP seed service.
"""
import ipaddress
from typing import List, Union
from seed_provider.common.utils import get_logger, make_http_request

logger = get_logger(__name__)


class SeedClient:
    """
    Fetches seeds from a running seed service.
    """

    def __init__(self, service_url: str):
        """
        Initialize the seed client.

        Args:
            service_url: Base URL of the seed service
        """
        self.service_url = service_url.rstrip('/')
        logger.info(f"Seed client initialized with service URL {self.service_url}")

    def get_seeds(self) -> List[Union[ipaddress.IPv4Address, ipaddress.IPv6Address]]:
        """
        Get the seeds known to the service.

        Returns:
            List of seed addresses, empty if the service could not be reached
        """
        response = make_http_request(f"{self.service_url}/seeds")
        if not response.get('success'):
            logger.error(f"Failed to get seeds: {response.get('error', 'Unknown error')}")
            return []

        seeds = []
        for entry in response.get('seeds', []):
            try:
                seeds.append(ipaddress.ip_address(entry))
            except ValueError:
                logger.error(f"Ignoring invalid seed address {entry!r}")
        return seeds

    def get_status(self) -> dict:
        """Get the service status."""
        return make_http_request(f"{self.service_url}/status")
