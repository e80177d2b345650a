"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from openmensa_client.adapters.openmensa_client import OpenMensaClient
from openmensa_client.config import Settings
from openmensa_client.domain.canteens import Canteen, Meal, Prices
from openmensa_client.domain.errors import TransportError


def make_canteen(
    canteen_id: int,
    name: str,
    city: str,
    coordinates: tuple[float, float] | None = None,
) -> Canteen:
    """Build a catalogue entry with a derived address."""
    return Canteen(
        id=canteen_id,
        name=name,
        city=city,
        address=f"{name} Street 1, {city}",
        coordinates=coordinates,
    )


CATALOGUE = [
    make_canteen(1, "Mensa Academica", "Aachen", (50.78, 6.07)),
    make_canteen(2, "Mensa Vita", "Aachen"),
    make_canteen(3, "Canteen 1", "Berlin", (52.51, 13.32)),
    make_canteen(4, "Mensa Academica", "Berlin"),
    make_canteen(5, "Cafeteria Nord", "Dresden"),
]


@dataclass
class FakeOpenMensaClient(OpenMensaClient):
    """In-memory OpenMensa client that records calls."""

    canteens: list[Canteen] = field(default_factory=lambda: list(CATALOGUE))
    meals: dict[tuple[int, str], list[Meal]] = field(default_factory=dict)
    failing_ids: set[int] = field(default_factory=set)
    fail_catalogue: bool = False
    list_calls: int = 0
    canteen_calls: list[int] = field(default_factory=list)
    meal_calls: list[tuple[int, str]] = field(default_factory=list)

    async def list_canteens(self) -> list[Canteen]:
        self.list_calls += 1
        if self.fail_catalogue:
            raise TransportError("https://api.test/canteens", OSError("down"))
        return list(self.canteens)

    async def get_canteen(self, canteen_id: int) -> Canteen | None:
        self.canteen_calls.append(canteen_id)
        if canteen_id in self.failing_ids:
            raise TransportError(
                f"https://api.test/canteens/{canteen_id}", OSError("down")
            )
        return next((c for c in self.canteens if c.id == canteen_id), None)

    async def list_meals(self, canteen_id: int, date: str) -> list[Meal]:
        self.meal_calls.append((canteen_id, date))
        return list(self.meals.get((canteen_id, date), []))


@pytest.fixture
def fake_client() -> FakeOpenMensaClient:
    return FakeOpenMensaClient()


@pytest.fixture
def sample_meal() -> Meal:
    return Meal(
        id=7000000001,
        name="Lentil stew",
        category="Main dish",
        prices=Prices(students=2.5, employees=4.1),
        notes=["vegan", "contains celery"],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        base_url="https://api.test",
        timeout_seconds=5,
        catalogue_ttl_seconds=0,
        debug=False,
        environment="test",
    )
