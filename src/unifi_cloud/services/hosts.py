"""Hosts: UniFi consoles and gateways owned by the account."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from unifi_cloud.services.base import Service


class HostService(Service):
    family = "hosts"

    def list(self) -> Any:
        return self.gateway.get(self.path)

    def get(self, id: str) -> Any:
        return self.gateway.get(f"{self.path}/{quote(id, safe='')}")
