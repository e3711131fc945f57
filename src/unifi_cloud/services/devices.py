"""Devices managed by hosts, optionally filtered by host and time."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from unifi_cloud.services.base import Service


class DeviceService(Service):
    family = "devices"
    supports_get = False

    def list(
        self,
        host_ids: Sequence[str] | str | None = None,
        time: str | None = None,
    ) -> Any:
        """List devices.

        ``host_ids`` limits the result to devices of those hosts; ``time``
        is passed through as the API's ``time`` filter. A single id may be
        given as a plain string. Empty values are left out of the query
        entirely.
        """
        if host_ids and isinstance(host_ids, str):
            host_ids = [host_ids]
        query: dict[str, Any] = {}
        if host_ids:
            query["hostIds"] = list(host_ids)
        if time:
            query["time"] = time
        return self.gateway.get(self.path, query=query or None)
