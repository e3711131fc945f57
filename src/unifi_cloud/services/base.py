"""Common shape of a resource accessor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from unifi_cloud.client.errors import NotImplementedOperationError
from unifi_cloud.client.gateway import RequestGateway
from unifi_cloud.config.constants import API_PREFIX


class Service(ABC):
    """Accessor exposing ``list`` and ``get`` for one resource family.

    Accessors hold a reference to the shared gateway and never copy its
    configuration. ``supports_get`` tells callers whether ``get`` is
    available without having to call it.
    """

    family: str
    supports_get: bool = True

    def __init__(self, gateway: RequestGateway) -> None:
        self.gateway = gateway

    @property
    def path(self) -> str:
        return f"{API_PREFIX}/{self.family}"

    @abstractmethod
    def list(self, *args: Any, **kwargs: Any) -> Any:
        """Return every resource of this family."""

    def get(self, id: str) -> Any:
        """Return a single resource by its identifier.

        Raises :class:`NotImplementedOperationError` where the API offers
        no lookup by id; no request is issued in that case.
        """
        raise NotImplementedOperationError(
            f"Get {self.family} by ID is not implemented"
        )
