"""Python client for the UniFi Cloud (Site Manager) API."""

__version__ = "1.0.1"

from unifi_cloud.client.errors import UniFiCloudError
from unifi_cloud.client.unifi import UniFiClient, clear_shared_clients, shared_client

__all__ = [
    "UniFiClient",
    "UniFiCloudError",
    "__version__",
    "clear_shared_clients",
    "shared_client",
]
