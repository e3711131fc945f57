"""UniFiClient: owns the gateway and resolves resource accessors."""

from __future__ import annotations

import threading
from typing import Any

import httpx

from unifi_cloud import __version__
from unifi_cloud.client.errors import UnknownServiceError
from unifi_cloud.client.gateway import RequestGateway
from unifi_cloud.config.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from unifi_cloud.config.models import ClientProfile
from unifi_cloud.services import DeviceService, HostService, Service, SiteService

SERVICES: dict[str, type[Service]] = {
    "hosts": HostService,
    "sites": SiteService,
    "devices": DeviceService,
}


class UniFiClient:
    """Client for the UniFi Cloud API.

    Accessors are created on first use and cached, one per family, under a
    lock so concurrent first access still yields a single instance::

        with UniFiClient("my-api-key") as client:
            hosts = client.hosts.list()
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        *,
        timeout: int = DEFAULT_TIMEOUT,
        debug: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        profile = ClientProfile(
            api_key=api_key,
            base_url=base_url or DEFAULT_BASE_URL,
            timeout=timeout,
            debug=debug,
        )
        self.gateway = RequestGateway(profile, transport=transport)
        self._services: dict[str, Service] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_profile(
        cls,
        profile: ClientProfile,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> UniFiClient:
        return cls(
            profile.api_key,
            profile.base_url,
            timeout=profile.timeout,
            debug=profile.debug,
            transport=transport,
        )

    @staticmethod
    def get_version() -> str:
        return __version__

    @property
    def timeout(self) -> int:
        return self.gateway.timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        self.gateway.timeout = value

    @property
    def debug(self) -> bool:
        return self.gateway.debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self.gateway.debug = value

    def service(self, name: str) -> Service:
        """Return the accessor for *name*, creating it on first use."""
        try:
            service_cls = SERVICES[name]
        except KeyError:
            raise UnknownServiceError(f"Service {name} not found") from None
        with self._lock:
            if name not in self._services:
                self._services[name] = service_cls(self.gateway)
            return self._services[name]

    @property
    def hosts(self) -> HostService:
        return self.service("hosts")  # type: ignore[return-value]

    @property
    def sites(self) -> SiteService:
        return self.service("sites")  # type: ignore[return-value]

    @property
    def devices(self) -> DeviceService:
        return self.service("devices")  # type: ignore[return-value]

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        return self.gateway.request(method, path, **kwargs)

    @property
    def closed(self) -> bool:
        return self.gateway.closed

    def close(self) -> None:
        self.gateway.close()

    def __enter__(self) -> UniFiClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


_shared: dict[tuple[str, str], UniFiClient] = {}
_shared_lock = threading.Lock()


def shared_client(api_key: str, base_url: str | None = None) -> UniFiClient:
    """Return the process-wide client for ``(api_key, base_url)``.

    Thread-safe. Each distinct pair maps to exactly one open client; a
    client closed by its user is replaced on the next lookup.
    """
    key = (api_key, (base_url or DEFAULT_BASE_URL).rstrip("/"))
    with _shared_lock:
        client = _shared.get(key)
        if client is None or client.closed:
            client = UniFiClient(api_key, key[1])
            _shared[key] = client
        return client


def clear_shared_clients() -> None:
    """Close and forget every client created by :func:`shared_client`."""
    with _shared_lock:
        clients = list(_shared.values())
        _shared.clear()
    for client in clients:
        client.close()
