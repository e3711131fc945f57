"""Resource accessors, one per API resource family."""

from unifi_cloud.services.base import Service
from unifi_cloud.services.devices import DeviceService
from unifi_cloud.services.hosts import HostService
from unifi_cloud.services.sites import SiteService

__all__ = ["DeviceService", "HostService", "Service", "SiteService"]
