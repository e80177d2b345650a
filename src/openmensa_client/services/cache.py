"""Catalogue cache abstractions."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from openmensa_client.domain.canteens import Canteen


class CatalogueCache(Protocol):
    """Cache interface for the canteen catalogue."""

    def get(self) -> list[Canteen] | None:
        """Return the cached catalogue if present and not expired."""

    def set(self, canteens: list[Canteen]) -> None:
        """Store a freshly fetched catalogue."""


@dataclass
class InMemoryCatalogueCache(CatalogueCache):
    """Process-local catalogue cache with a fixed TTL."""

    ttl_seconds: int
    _canteens: list[Canteen] | None = field(default=None, init=False)
    _expires_at: datetime | None = field(default=None, init=False)

    def get(self) -> list[Canteen] | None:
        """Return a copy of the cached catalogue if it hasn't expired."""
        if self._canteens is None or self._expires_at is None:
            return None
        if datetime.now(tz=UTC) >= self._expires_at:
            self.clear()
            return None
        return list(self._canteens)

    def set(self, canteens: list[Canteen]) -> None:
        """Store the catalogue with the configured TTL."""
        self._canteens = list(canteens)
        self._expires_at = datetime.now(tz=UTC) + timedelta(seconds=self.ttl_seconds)

    def clear(self) -> None:
        """Drop the cached catalogue."""
        self._canteens = None
        self._expires_at = None
