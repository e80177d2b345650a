"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from openmensa_client.adapters.openmensa_client import (
    HttpxOpenMensaClient,
    OpenMensaClient,
)
from openmensa_client.app_logging import configure_logging
from openmensa_client.config import Settings
from openmensa_client.services.cache import InMemoryCatalogueCache
from openmensa_client.services.canteens import CanteenService


@dataclass
class ClientContainer:
    """Holds the wired client dependencies."""

    settings: Settings
    openmensa_client: OpenMensaClient
    canteen_service: CanteenService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> ClientContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.debug:
        configure_logging()
    openmensa_client = HttpxOpenMensaClient.create(
        base_url=resolved_settings.base_url,
        timeout=resolved_settings.timeout_seconds,
    )
    cache = None
    if resolved_settings.catalogue_ttl_seconds > 0:
        cache = InMemoryCatalogueCache(
            ttl_seconds=resolved_settings.catalogue_ttl_seconds
        )
    canteen_service = CanteenService(
        client=openmensa_client,
        cache=cache,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await openmensa_client.close()

    return ClientContainer(
        settings=resolved_settings,
        openmensa_client=openmensa_client,
        canteen_service=canteen_service,
        close_resources=close_resources,
    )
