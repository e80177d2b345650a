"""Canteen and meal lookups built on the OpenMensa client."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date as Date
from typing import TYPE_CHECKING, TypeVar

from openmensa_client.adapters.openmensa_client import OpenMensaClient
from openmensa_client.domain.canteens import Canteen, Meal
from openmensa_client.services.cache import CatalogueCache

T = TypeVar("T")

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable


@dataclass
class CanteenService:
    """Query service for canteens and meals.

    Lookups are stateless: each call goes to the client unless a catalogue
    cache is injected, in which case only the catalogue fetch is cached.
    Aggregate lookups fail fast, so the first failing request fails the
    whole call and no partial result is returned.
    """

    client: OpenMensaClient
    cache: CatalogueCache | None = None
    debug: bool = False

    async def get_meals(self, canteen: Canteen, date: str | Date) -> list[Meal]:
        """Return the meals a canteen serves on a date, in service order.

        ``date`` is a ``YYYY-MM-DD`` string or a ``datetime.date`` (a
        ``datetime`` is reduced to its day). Strings are forwarded as given.
        An empty list means nothing was published.
        """
        day = date.strftime("%Y-%m-%d") if isinstance(date, Date) else date
        meals = await self._logged(
            f"meals:{canteen.id}:{day}", self.client.list_meals(canteen.id, day)
        )
        if self.debug:
            _logger.info(
                "Meals: canteen=%s date=%s results=%s", canteen.id, day, len(meals)
            )
        return meals

    async def get_canteen_by_id(self, canteen_id: int) -> Canteen | None:
        """Return a canteen by id, or None if the service does not know it."""
        canteen = await self._logged(
            f"canteen:{canteen_id}", self.client.get_canteen(canteen_id)
        )
        if self.debug:
            _logger.info(
                "Canteen by id: id=%s found=%s", canteen_id, canteen is not None
            )
        return canteen

    async def get_canteens_by_ids(self, canteen_ids: Iterable[int]) -> list[Canteen]:
        """Return the known canteens for the given ids, in input order.

        Unknown ids are omitted. Lookups run concurrently; if one fails the
        remaining ones are cancelled and the error propagates.
        """
        ids = list(canteen_ids)
        if not ids:
            return []
        tasks = [asyncio.create_task(self.get_canteen_by_id(cid)) for cid in ids]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise
        return [canteen for canteen in results if canteen is not None]

    async def get_canteen_by_name(self, name: str) -> Canteen | None:
        """Return the first canteen in catalogue order with an exact name match."""
        canteens = await self.get_all_canteens()
        return next((canteen for canteen in canteens if canteen.name == name), None)

    async def get_canteens_by_names(self, names: Iterable[str]) -> list[Canteen]:
        """Return the first match for each name, in input order.

        Names without a match are omitted.
        """
        canteens = await self.get_all_canteens()
        first_by_name: dict[str, Canteen] = {}
        for canteen in canteens:
            first_by_name.setdefault(canteen.name, canteen)
        return [first_by_name[name] for name in names if name in first_by_name]

    async def get_canteens_by_location(self, location: str) -> list[Canteen]:
        """Return every canteen whose city matches exactly, in catalogue order."""
        canteens = await self.get_all_canteens()
        return [canteen for canteen in canteens if canteen.city == location]

    async def get_canteens_by_locations(
        self, locations: Iterable[str]
    ) -> list[Canteen]:
        """Return canteens located in any of the cities, in catalogue order."""
        wanted = set(locations)
        canteens = await self.get_all_canteens()
        return [canteen for canteen in canteens if canteen.city in wanted]

    async def get_all_canteens(self) -> list[Canteen]:
        """Return the complete canteen catalogue."""
        if self.cache is not None:
            cached = self.cache.get()
            if cached is not None:
                return cached

        canteens = await self._logged("canteens", self.client.list_canteens())
        if self.cache is not None:
            self.cache.set(canteens)
        if self.debug:
            _logger.info("Catalogue: results=%s", len(canteens))
        return canteens

    async def _logged(self, action: str, call: "Awaitable[T]") -> T:
        """Await a client call, logging failures in debug mode before re-raising."""
        try:
            return await call
        except Exception as exc:
            if self.debug:
                _logger.warning("OpenMensa %s failed: %s", action, exc)
            raise
