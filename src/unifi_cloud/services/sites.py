"""Sites across all hosts. Lookup by id is not offered by the API."""

from __future__ import annotations

from typing import Any

from unifi_cloud.services.base import Service


class SiteService(Service):
    family = "sites"
    supports_get = False

    def list(self) -> Any:
        return self.gateway.get(self.path)
