"""OpenMensa REST API client."""

from dataclasses import dataclass
from typing import Protocol, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from openmensa_client.domain.canteens import Canteen, Meal
from openmensa_client.domain.errors import DecodeError, TransportError

DEFAULT_BASE_URL = "https://openmensa.org/api/v2"

T = TypeVar("T")

_CANTEEN_LIST = TypeAdapter(list[Canteen])
_CANTEEN = TypeAdapter(Canteen)
_MEAL_LIST = TypeAdapter(list[Meal])


class OpenMensaClient(Protocol):
    """Interface for OpenMensa API interactions."""

    async def list_canteens(self) -> list[Canteen]:
        """Return the complete canteen catalogue."""

    async def get_canteen(self, canteen_id: int) -> Canteen | None:
        """Return a canteen by id, or None when the service reports 404."""

    async def list_meals(self, canteen_id: int, date: str) -> list[Meal]:
        """Return the meals a canteen serves on a YYYY-MM-DD date."""


@dataclass
class HttpxOpenMensaClient(OpenMensaClient):
    """HTTPX-backed OpenMensa client.

    Status codes never short-circuit: the body is always decoded and a
    failure to decode reports the status code. A 404 from the single
    canteen endpoint is the only status mapped to a result (``None``).
    """

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, base_url: str = DEFAULT_BASE_URL, timeout: float = 10
    ) -> "HttpxOpenMensaClient":
        """Create an OpenMensa client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(timeout=timeout),
        )

    async def list_canteens(self) -> list[Canteen]:
        """Fetch the canteen catalogue."""
        return await self.fetch("/canteens", _CANTEEN_LIST)

    async def get_canteen(self, canteen_id: int) -> Canteen | None:
        """Fetch a canteen by id."""
        url = self._url(f"/canteens/{canteen_id}")
        response = await self._get(url)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        return _decode(url, response, _CANTEEN)

    async def list_meals(self, canteen_id: int, date: str) -> list[Meal]:
        """Fetch meals for a canteen and day."""
        return await self.fetch(f"/canteens/{canteen_id}/days/{date}/meals", _MEAL_LIST)

    async def fetch(self, path: str, shape: TypeAdapter[T]) -> T:
        """GET a path below the base URL and decode the JSON body into shape."""
        url = self._url(path)
        response = await self._get(url)
        return _decode(url, response, shape)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _get(self, url: str) -> httpx.Response:
        try:
            return await self.http_client.get(url)
        except httpx.DecodingError as exc:
            raise DecodeError(url, None, exc) from exc
        except httpx.RequestError as exc:
            raise TransportError(url, exc) from exc


def _decode(url: str, response: httpx.Response, shape: TypeAdapter[T]) -> T:
    """Validate a response body against a pydantic type adapter."""
    try:
        return shape.validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(url, response.status_code, exc) from exc
